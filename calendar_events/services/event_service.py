"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from enum import Enum
from functools import cache
from typing import Any

from django.conf import settings
from django.utils.module_loading import import_string

from calendar_events.domain import Event, EventChanges, EventDraft, EventId, PriorityFilter
from calendar_events.domain.errors import (
    EventNotFoundError,
    EventsLoadError,
    EventWriteError,
    InvalidEventIdError,
    StoreError,
)
from calendar_events.domain.filters import filter_events
from calendar_events.domain.validation import validate_changes, validate_draft
from calendar_events.services.session import SessionContext
from calendar_events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

CREATE_FAILED = "Помилка створення події"
UPDATE_FAILED = "Помилка оновлення події"
DELETE_FAILED = "Помилка видалення події"

DEFAULT_OPTIONS = {
    "STORE": "calendar_events.stores.django_store.DjangoEventStore",
    "READ_FAILURE_POLICY": "report",
    "REJECT_END_BEFORE_START": False,
}


def _event_id(value: str) -> EventId:
    try:
        return EventId.from_string(value)
    except ValueError as exc:
        raise InvalidEventIdError() from exc


class ReadFailurePolicy(Enum):
    """What listing does when the store cannot be read."""

    # Present an empty collection, indistinguishable from "no events yet".
    EMPTY = "empty"
    # Raise EventsLoadError so the caller can show a load failure.
    REPORT = "report"


class EventService:
    """Service for a user's calendar events."""

    def __init__(
        self,
        store: EventStore,
        read_failure_policy: ReadFailurePolicy = ReadFailurePolicy.REPORT,
        reject_end_before_start: bool = False,
    ) -> None:
        self._store = store
        self._read_failure_policy = read_failure_policy
        self._reject_end_before_start = reject_end_before_start

    def create_event(self, session: SessionContext, draft: EventDraft) -> Event:
        """Validate and persist a new event.

        Raises:
            EventValidationError: If the draft fails validation. The store is not called.
            EventWriteError: If the store rejects the write.
        """
        draft = validate_draft(draft, self._reject_end_before_start)
        try:
            event = self._store.create(session.user_id, draft)
        except StoreError as exc:
            raise EventWriteError(CREATE_FAILED) from exc
        logger.info("Created event %s for user %s", event.id, session.user_id)
        return event

    def list_events(self, session: SessionContext) -> list[Event]:
        """Return all of the user's events.

        Raises:
            EventsLoadError: If the store cannot be read and the policy is REPORT.
        """
        try:
            return self._store.list_all(session.user_id)
        except StoreError as exc:
            if self._read_failure_policy is ReadFailurePolicy.EMPTY:
                logger.warning(
                    "Could not load events for user %s, showing none: %s",
                    session.user_id,
                    exc,
                )
                return []
            raise EventsLoadError() from exc

    def search_events(
        self,
        session: SessionContext,
        search: str = "",
        priority: PriorityFilter | str = "all",
    ) -> list[Event]:
        """Return the user's events filtered for the list view."""
        return filter_events(self.list_events(session), search, priority)

    def update_event(
        self, session: SessionContext, event_id: str, changes: EventChanges
    ) -> dict[str, Any]:
        """Validate and write a partial update.

        Returns the fields written, for patching a local copy of the event.

        Raises:
            EventValidationError: If a set field fails validation.
            InvalidEventIdError: If the ID is malformed for the store.
            EventNotFoundError: If the user has no such event.
            EventWriteError: If the store rejects the write.
        """
        key = _event_id(event_id)
        current = None
        if self._reject_end_before_start and changes.is_set("start") != changes.is_set("end"):
            current = self._stored_event(session, key)
        changes = validate_changes(changes, self._reject_end_before_start, current)
        fields = changes.to_payload()
        try:
            self._store.update(session.user_id, key, fields)
        except StoreError as exc:
            raise EventWriteError(UPDATE_FAILED) from exc
        logger.info("Updated event %s for user %s", event_id, session.user_id)
        return fields

    def _stored_event(self, session: SessionContext, event_id: EventId) -> Event:
        try:
            events = self._store.list_all(session.user_id)
        except StoreError as exc:
            raise EventWriteError(UPDATE_FAILED) from exc
        for event in events:
            if event.id == event_id:
                return event
        raise EventNotFoundError(event_id.value)

    def delete_event(self, session: SessionContext, event_id: str) -> None:
        """Delete an event permanently.

        Raises:
            InvalidEventIdError: If the ID is malformed for the store.
            EventNotFoundError: If the user has no such event.
            EventWriteError: If the store rejects the delete.
        """
        try:
            self._store.delete(session.user_id, _event_id(event_id))
        except StoreError as exc:
            raise EventWriteError(DELETE_FAILED) from exc
        logger.info("Deleted event %s for user %s", event_id, session.user_id)


def _options() -> dict[str, Any]:
    return {**DEFAULT_OPTIONS, **getattr(settings, "CALENDAR_EVENTS", {})}


@cache
def build_store(path: str) -> EventStore:
    """Instantiate the store at ``path`` once per process.

    Cleared by calendar_events.signals when CALENDAR_EVENTS changes.
    """
    return import_string(path)()


def get_event_service() -> EventService:
    """Build the service from the CALENDAR_EVENTS settings."""
    options = _options()
    return EventService(
        store=build_store(options["STORE"]),
        read_failure_policy=ReadFailurePolicy(options["READ_FAILURE_POLICY"]),
        reject_end_before_start=bool(options["REJECT_END_BEFORE_START"]),
    )
