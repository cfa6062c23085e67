"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from calendar_events.services.event_service import EventService
from calendar_events.services.session import SessionContext
from calendar_events.stores.memory_store import InMemoryEventStore

PASSWORD = "calendar-pass-2024"


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="olena@example.com", email="olena@example.com", password=PASSWORD
    )


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        username="taras@example.com", email="taras@example.com", password=PASSWORD
    )


@pytest.fixture
def auth_client(api_client: APIClient, user) -> APIClient:
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def memory_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def session() -> SessionContext:
    return SessionContext(user_id="user-1", email="olena@example.com")


@pytest.fixture
def service(memory_store: InMemoryEventStore) -> EventService:
    return EventService(memory_store)
