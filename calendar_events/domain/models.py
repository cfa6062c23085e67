"""Domain models representing persisted state and write payloads.

These are pure domain objects with no API input rules.
Django ORM models are in calendar_events/models.py (persistence layer).
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any

from calendar_events.domain.value_objects import EventId, Priority


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class Event:
    """Domain representation of a persisted calendar event."""

    id: EventId
    title: str
    start: str
    end: str | None = None
    description: str | None = None
    priority: Priority = Priority.NORMAL
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class EventDraft:
    """Fields a user supplies when creating or replacing an event."""

    title: str
    start: str
    end: str | None = None
    description: str | None = None
    priority: Priority = Priority.NORMAL

    def to_payload(self) -> dict[str, Any]:
        """Return the write payload, omitting absent optional fields."""
        payload: dict[str, Any] = {
            "title": self.title,
            "start": self.start,
            "priority": self.priority,
        }
        if self.end:
            payload["end"] = self.end
        if self.description is not None:
            payload["description"] = self.description
        return payload


@dataclass(frozen=True)
class EventChanges:
    """Partial update. Fields left as UNSET are not written.

    Setting ``end`` or ``description`` to None clears the stored value.
    """

    title: str = field(default=UNSET)
    start: str = field(default=UNSET)
    end: str | None = field(default=UNSET)
    description: str | None = field(default=UNSET)
    priority: Priority = field(default=UNSET)

    def to_payload(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not UNSET
