"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every operation is
scoped to a single user; no store method reads across users.
"""

from abc import ABC, abstractmethod
from typing import Any

from calendar_events.domain import Event, EventDraft, EventId


class EventStore(ABC):
    """Interface for a user's event collection in the backing store."""

    @abstractmethod
    def create(self, user_id: str, draft: EventDraft) -> Event:
        """Persist a new event and return it with its assigned ID and timestamps.

        Raises:
            StoreError: If the backing store rejects the write.
        """
        ...

    @abstractmethod
    def list_all(self, user_id: str) -> list[Event]:
        """Return all of the user's events in store order.

        Raises:
            StoreError: If the backing store cannot be read.
        """
        ...

    @abstractmethod
    def update(self, user_id: str, event_id: EventId, fields: dict[str, Any]) -> None:
        """Replace the given fields of an event and refresh its updated_at.

        Raises:
            EventNotFoundError: If the user has no such event.
            StoreError: If the backing store rejects the write.
        """
        ...

    @abstractmethod
    def delete(self, user_id: str, event_id: EventId) -> None:
        """Remove an event permanently.

        Raises:
            EventNotFoundError: If the user has no such event.
            StoreError: If the backing store rejects the write.
        """
        ...
