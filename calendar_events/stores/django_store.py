"""Django ORM implementation of the EventStore."""

import logging
from typing import Any
from uuid import UUID

from django.db import DatabaseError

from calendar_events import models
from calendar_events.domain import Event, EventDraft, EventId, Priority
from calendar_events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    StoreError,
)
from calendar_events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _to_domain(row: models.CalendarEvent) -> Event:
    return Event(
        id=EventId(str(row.id)),
        title=row.title,
        start=row.start,
        end=row.end or None,
        description=row.description,
        priority=Priority(row.priority),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _row_fields(fields: dict[str, Any]) -> dict[str, Any]:
    return {
        name: value.value if isinstance(value, Priority) else value
        for name, value in fields.items()
    }


def _parse_id(event_id: EventId) -> UUID:
    try:
        return UUID(event_id.value)
    except ValueError:
        raise InvalidEventIdError()


class DjangoEventStore(EventStore):
    """Relational event store, one row per event owned by a user."""

    def create(self, user_id: str, draft: EventDraft) -> Event:
        payload = _row_fields(draft.to_payload())
        try:
            row = models.CalendarEvent.objects.create(owner_id=user_id, **payload)
        except DatabaseError as exc:
            logger.exception("Error adding event for user %s", user_id)
            raise StoreError("create event") from exc
        return _to_domain(row)

    def list_all(self, user_id: str) -> list[Event]:
        try:
            rows = list(models.CalendarEvent.objects.filter(owner_id=user_id))
        except DatabaseError as exc:
            logger.exception("Error getting events for user %s", user_id)
            raise StoreError("list events") from exc
        return [_to_domain(row) for row in rows]

    def update(self, user_id: str, event_id: EventId, fields: dict[str, Any]) -> None:
        pk = _parse_id(event_id)
        try:
            row = models.CalendarEvent.objects.filter(owner_id=user_id, pk=pk).first()
            if row is None:
                raise EventNotFoundError(event_id.value)
            for name, value in _row_fields(fields).items():
                setattr(row, name, value)
            row.save(update_fields=[*fields, "updated_at"])
        except DatabaseError as exc:
            logger.exception("Error updating event %s", event_id)
            raise StoreError("update event") from exc

    def delete(self, user_id: str, event_id: EventId) -> None:
        pk = _parse_id(event_id)
        try:
            deleted, _ = models.CalendarEvent.objects.filter(owner_id=user_id, pk=pk).delete()
        except DatabaseError as exc:
            logger.exception("Error deleting event %s", event_id)
            raise StoreError("delete event") from exc
        if not deleted:
            raise EventNotFoundError(event_id.value)
