"""Client-side filtering of a user's event collection for the list view."""

from collections.abc import Iterable

from calendar_events.domain.models import Event
from calendar_events.domain.value_objects import PriorityFilter


def matches_search(event: Event, search: str) -> bool:
    """Case-insensitive substring match on title or description."""
    if not search:
        return True
    needle = search.lower()
    return needle in event.title.lower() or needle in (event.description or "").lower()


def filter_events(
    events: Iterable[Event],
    search: str = "",
    priority: PriorityFilter | str = "all",
) -> list[Event]:
    """Return the events matching both the search text and the priority selector.

    Input order is preserved.

    Raises:
        ValueError: If ``priority`` is neither ``all`` nor a known priority.
    """
    if not isinstance(priority, PriorityFilter):
        priority = PriorityFilter.from_string(priority)
    return [
        event
        for event in events
        if matches_search(event, search) and priority.matches(event.priority)
    ]
