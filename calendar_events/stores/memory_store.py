"""Process-local EventStore keeping each user's events in a dict."""

from dataclasses import replace
from typing import Any
from uuid import uuid4

from django.utils import timezone

from calendar_events.domain import Event, EventDraft, EventId
from calendar_events.domain.errors import EventNotFoundError
from calendar_events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Non-persistent store. Insertion order is the listing order."""

    def __init__(self) -> None:
        self._events: dict[str, dict[str, Event]] = {}

    def create(self, user_id: str, draft: EventDraft) -> Event:
        now = timezone.now()
        event = Event(
            id=EventId(uuid4().hex),
            title=draft.title,
            start=draft.start,
            end=draft.end,
            description=draft.description,
            priority=draft.priority,
            created_at=now,
            updated_at=now,
        )
        self._events.setdefault(user_id, {})[event.id.value] = event
        return event

    def list_all(self, user_id: str) -> list[Event]:
        return list(self._events.get(user_id, {}).values())

    def update(self, user_id: str, event_id: EventId, fields: dict[str, Any]) -> None:
        events = self._events.get(user_id, {})
        if event_id.value not in events:
            raise EventNotFoundError(event_id.value)
        events[event_id.value] = replace(
            events[event_id.value], **fields, updated_at=timezone.now()
        )

    def delete(self, user_id: str, event_id: EventId) -> None:
        events = self._events.get(user_id, {})
        if events.pop(event_id.value, None) is None:
            raise EventNotFoundError(event_id.value)
