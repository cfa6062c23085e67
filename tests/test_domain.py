"""Unit tests for domain primitives and payload models.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from calendar_events.domain import UNSET, EventChanges, EventDraft, EventId, Priority, PriorityFilter
from calendar_events.domain.priorities import PRIORITY_STYLES, style_for


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_strips_whitespace(self):
        """EventId.from_string keeps the opaque value without padding."""
        assert EventId.from_string("  abc123 ").value == "abc123"

    def test_rejects_empty_value(self):
        """EventId raises ValueError for a blank identifier."""
        with pytest.raises(ValueError):
            EventId.from_string("   ")


class TestPriorityFilter:
    """Tests for PriorityFilter value object."""

    def test_all_matches_every_priority(self):
        selector = PriorityFilter.from_string("all")
        assert all(selector.matches(priority) for priority in Priority)
        assert str(selector) == "all"

    def test_single_priority_matches_only_itself(self):
        selector = PriorityFilter.from_string("critical")
        assert selector.matches(Priority.CRITICAL)
        assert not selector.matches(Priority.NORMAL)

    def test_unknown_priority_is_rejected(self):
        with pytest.raises(ValueError):
            PriorityFilter.from_string("urgent")


class TestEventDraft:
    """Tests for the write payload."""

    def test_payload_omits_absent_optional_fields(self):
        draft = EventDraft(title="Standup", start="2024-03-04T09:00:00")
        assert draft.to_payload() == {
            "title": "Standup",
            "start": "2024-03-04T09:00:00",
            "priority": Priority.NORMAL,
        }

    def test_payload_includes_end_and_description(self):
        draft = EventDraft(
            title="Sync",
            start="2024-03-04T09:00:00",
            end="2024-03-04T10:00:00",
            description="quarterly review",
            priority=Priority.IMPORTANT,
        )
        payload = draft.to_payload()
        assert payload["end"] == "2024-03-04T10:00:00"
        assert payload["description"] == "quarterly review"


class TestEventChanges:
    """Tests for partial updates."""

    def test_only_set_fields_are_written(self):
        changes = EventChanges(title="Renamed", end=None)
        assert changes.to_payload() == {"title": "Renamed", "end": None}

    def test_unset_is_falsy_and_distinct_from_none(self):
        changes = EventChanges()
        assert changes.start is UNSET
        assert not changes.is_set("start")
        assert changes.to_payload() == {}


class TestPriorityStyles:
    """Tests for the shared priority lookup table."""

    def test_every_priority_has_a_style(self):
        assert set(PRIORITY_STYLES) == set(Priority)

    def test_unknown_priority_falls_back_to_normal(self):
        assert style_for("urgent") == PRIORITY_STYLES[Priority.NORMAL]

    def test_critical_colours(self):
        style = style_for("critical")
        assert style.background == "#ef4444"
        assert style.border == "#dc2626"
