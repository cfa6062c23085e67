from calendar_events.domain.models import UNSET, Event, EventChanges, EventDraft
from calendar_events.domain.value_objects import ALL_PRIORITIES, EventId, Priority, PriorityFilter

__all__ = [
    "Event",
    "EventDraft",
    "EventChanges",
    "UNSET",
    "EventId",
    "Priority",
    "PriorityFilter",
    "ALL_PRIORITIES",
]
