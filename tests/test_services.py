"""Unit tests for EventService.

These test orchestration, the read-failure policy and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import pytest
from django.test import override_settings

from calendar_events.domain import EventChanges, EventDraft, Priority
from calendar_events.domain.errors import (
    EventNotFoundError,
    EventsLoadError,
    EventValidationError,
    EventWriteError,
    InvalidEventIdError,
)
from calendar_events.services.event_service import (
    CREATE_FAILED,
    DELETE_FAILED,
    UPDATE_FAILED,
    EventService,
    ReadFailurePolicy,
    build_store,
    get_event_service,
)
from calendar_events.services.session import SessionContext
from tests.stubs import UnavailableEventStore

MEMORY_STORE = "calendar_events.stores.memory_store.InMemoryEventStore"


def standup() -> EventDraft:
    return EventDraft(title="Standup", start="2024-03-04T09:00:00", priority=Priority.NORMAL)


class TestEventService:
    """Tests for EventService against the in-memory store."""

    def test_create_list_search_delete_scenario(self, service, session):
        """A created event is listed, found by search and gone after delete."""
        created = service.create_event(session, standup())
        assert created in service.list_events(session)

        found = service.search_events(session, "stand", "all")
        assert [event.id for event in found] == [created.id]

        service.delete_event(session, created.id.value)
        assert created.id not in [event.id for event in service.list_events(session)]

    def test_create_trims_before_writing(self, service, session):
        created = service.create_event(
            session, EventDraft(title="  Standup  ", start="2024-03-04T09:00:00")
        )
        assert created.title == "Standup"
        assert created.created_at is not None

    def test_invalid_draft_never_reaches_store(self, session):
        store = UnavailableEventStore()
        service = EventService(store)
        with pytest.raises(EventValidationError):
            service.create_event(session, EventDraft(title=" ", start="2024-03-04T09:00:00"))
        assert store.calls == []

    def test_events_are_scoped_per_user(self, service, session):
        service.create_event(session, standup())
        stranger = SessionContext(user_id="user-2")
        assert service.list_events(stranger) == []

    def test_update_returns_written_fields(self, service, session):
        created = service.create_event(session, standup())
        written = service.update_event(
            session,
            created.id.value,
            EventChanges(title=" Standup moved ", priority=Priority.CRITICAL),
        )
        assert written == {"title": "Standup moved", "priority": Priority.CRITICAL}
        [updated] = service.list_events(session)
        assert updated.title == "Standup moved"
        assert updated.priority is Priority.CRITICAL
        assert updated.start == created.start

    def test_update_can_clear_end(self, service, session):
        created = service.create_event(
            session,
            EventDraft(title="Sync", start="2024-03-04T09:00:00", end="2024-03-04T10:00:00"),
        )
        service.update_event(session, created.id.value, EventChanges(end=None))
        assert service.list_events(session)[0].end is None

    def test_update_unknown_event_raises_not_found(self, service, session):
        with pytest.raises(EventNotFoundError):
            service.update_event(session, "missing", EventChanges(title="x"))

    def test_delete_other_users_event_raises_not_found(self, service, session):
        created = service.create_event(session, standup())
        with pytest.raises(EventNotFoundError):
            service.delete_event(SessionContext(user_id="user-2"), created.id.value)
        assert len(service.list_events(session)) == 1

    def test_blank_event_id_is_invalid(self, service, session):
        with pytest.raises(InvalidEventIdError):
            service.delete_event(session, "  ")


class TestStrictEventOrder:
    """Tests for partial updates when end-before-start is rejected."""

    @pytest.fixture
    def strict_service(self, memory_store):
        return EventService(memory_store, reject_end_before_start=True)

    @pytest.fixture
    def meeting(self, strict_service, session):
        return strict_service.create_event(
            session,
            EventDraft(title="Sync", start="2024-03-04T09:00:00", end="2024-03-04T10:00:00"),
        )

    def test_end_only_before_stored_start_rejected(self, strict_service, session, meeting):
        with pytest.raises(EventValidationError) as excinfo:
            strict_service.update_event(
                session, meeting.id.value, EventChanges(end="2024-03-04T08:00:00")
            )
        assert excinfo.value.field == "end"
        assert strict_service.list_events(session)[0].end == "2024-03-04T10:00:00"

    def test_start_only_after_stored_end_rejected(self, strict_service, session, meeting):
        with pytest.raises(EventValidationError):
            strict_service.update_event(
                session, meeting.id.value, EventChanges(start="2024-03-04T11:00:00")
            )
        assert strict_service.list_events(session)[0].start == "2024-03-04T09:00:00"

    def test_one_sided_update_within_stored_range_written(self, strict_service, session, meeting):
        written = strict_service.update_event(
            session, meeting.id.value, EventChanges(end="2024-03-04T11:00:00")
        )
        assert written == {"end": "2024-03-04T11:00:00"}

    def test_one_sided_update_of_unknown_event_raises_not_found(self, strict_service, session):
        with pytest.raises(EventNotFoundError):
            strict_service.update_event(session, "missing", EventChanges(end="2024-03-04T11:00:00"))


class TestStoreFailures:
    """Tests for store failure handling."""

    @pytest.mark.parametrize(
        "call, message",
        [
            (lambda s, ctx: s.create_event(ctx, standup()), CREATE_FAILED),
            (lambda s, ctx: s.update_event(ctx, "e1", EventChanges(title="x")), UPDATE_FAILED),
            (lambda s, ctx: s.delete_event(ctx, "e1"), DELETE_FAILED),
        ],
    )
    def test_write_failures_carry_operation_message(self, session, call, message):
        service = EventService(UnavailableEventStore())
        with pytest.raises(EventWriteError) as excinfo:
            call(service, session)
        assert excinfo.value.message == message

    def test_read_failure_reported_by_default(self, session):
        service = EventService(UnavailableEventStore())
        with pytest.raises(EventsLoadError):
            service.list_events(session)

    def test_read_failure_shows_empty_collection_when_configured(self, session):
        service = EventService(UnavailableEventStore(), ReadFailurePolicy.EMPTY)
        assert service.list_events(session) == []
        assert service.search_events(session, "anything", "all") == []


class TestGetEventService:
    """Tests for building the service from settings."""

    @override_settings(
        CALENDAR_EVENTS={
            "STORE": "tests.stubs.UnavailableEventStore",
            "READ_FAILURE_POLICY": "empty",
        }
    )
    def test_settings_select_store_and_policy(self, session):
        service = get_event_service()
        assert service.list_events(session) == []

    @override_settings(CALENDAR_EVENTS={"STORE": "tests.stubs.UnavailableEventStore"})
    def test_policy_defaults_to_report(self, session):
        with pytest.raises(EventsLoadError):
            get_event_service().list_events(session)

    @override_settings(CALENDAR_EVENTS={"STORE": MEMORY_STORE})
    def test_store_is_shared_between_services(self, session):
        get_event_service().create_event(session, standup())
        assert len(get_event_service().list_events(session)) == 1

    def test_store_replaced_when_settings_change(self):
        with override_settings(CALENDAR_EVENTS={"STORE": MEMORY_STORE}):
            first = build_store(MEMORY_STORE)
            assert build_store(MEMORY_STORE) is first
        with override_settings(CALENDAR_EVENTS={"STORE": MEMORY_STORE}):
            assert build_store(MEMORY_STORE) is not first
