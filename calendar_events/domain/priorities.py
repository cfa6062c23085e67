"""Priority presentation table shared by the list view and the calendar feed."""

from dataclasses import dataclass
from types import MappingProxyType

from calendar_events.domain.value_objects import Priority


@dataclass(frozen=True)
class PriorityStyle:
    background: str
    border: str
    color: str
    label: str
    icon: str


PRIORITY_STYLES = MappingProxyType(
    {
        Priority.NORMAL: PriorityStyle(
            background="#10b981",
            border="#059669",
            color="#ffffff",
            label="Звичайна",
            icon="flag",
        ),
        Priority.IMPORTANT: PriorityStyle(
            background="#f59e0b",
            border="#d97706",
            color="#ffffff",
            label="Важлива",
            icon="star",
        ),
        Priority.CRITICAL: PriorityStyle(
            background="#ef4444",
            border="#dc2626",
            color="#ffffff",
            label="Критична",
            icon="priority_high",
        ),
    }
)


def style_for(priority: Priority | str) -> PriorityStyle:
    """Look up the style for a priority, falling back to normal for unknown values."""
    try:
        return PRIORITY_STYLES[Priority(priority)]
    except ValueError:
        return PRIORITY_STYLES[Priority.NORMAL]
