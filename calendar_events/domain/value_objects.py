"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class Priority(str, Enum):
    """Classification tag of an event. Carries no scheduling behaviour."""

    NORMAL = "normal"
    IMPORTANT = "important"
    CRITICAL = "critical"


ALL_PRIORITIES = "all"


@dataclass(frozen=True)
class EventId:
    """Opaque identifier assigned by the store."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Event ID cannot be empty")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PriorityFilter:
    """Either ``all`` or a single priority to match exactly."""

    priority: Priority | None = None

    @classmethod
    def from_string(cls, value: str | None) -> Self:
        if not value or value == ALL_PRIORITIES:
            return cls()
        return cls(priority=Priority(value))

    def matches(self, priority: Priority) -> bool:
        return self.priority is None or self.priority == priority

    def __str__(self) -> str:
        return ALL_PRIORITIES if self.priority is None else self.priority.value
