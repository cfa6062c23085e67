"""Checks that gate every write before it reaches a store."""

from dataclasses import replace

from calendar_events.domain.datetimes import duration_minutes
from calendar_events.domain.errors import EventValidationError
from calendar_events.domain.models import Event, EventChanges, EventDraft

TITLE_REQUIRED = "Назва події є обов'язковою"
START_REQUIRED = "Дата та час початку є обов'язковими"
END_BEFORE_START = "Завершення не може бути раніше початку"


def _clean_title(title: str | None) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise EventValidationError("title", TITLE_REQUIRED)
    return cleaned


def _clean_start(start: str | None) -> str:
    if not start:
        raise EventValidationError("start", START_REQUIRED)
    return start


def _clean_description(description: str | None) -> str | None:
    if description is None:
        return None
    return description.strip() or None


def _check_order(start: str, end: str | None) -> None:
    if not end:
        return
    try:
        minutes = duration_minutes(start, end)
    except ValueError:
        return
    if minutes < 0:
        raise EventValidationError("end", END_BEFORE_START)


def validate_draft(draft: EventDraft, reject_end_before_start: bool = False) -> EventDraft:
    """Return a trimmed copy of ``draft``.

    Raises:
        EventValidationError: If the title is blank or the start is missing,
            or, when ``reject_end_before_start`` is set, the end precedes the start.
    """
    title = _clean_title(draft.title)
    start = _clean_start(draft.start)
    if reject_end_before_start:
        _check_order(start, draft.end)
    return replace(
        draft,
        title=title,
        start=start,
        end=draft.end or None,
        description=_clean_description(draft.description),
    )


def validate_changes(
    changes: EventChanges,
    reject_end_before_start: bool = False,
    current: Event | None = None,
) -> EventChanges:
    """Validate only the fields a partial update sets.

    When ``reject_end_before_start`` is set, the written start or end is
    checked against the other side taken from ``current``, the stored event.
    """
    updates = {}
    if changes.is_set("title"):
        updates["title"] = _clean_title(changes.title)
    if changes.is_set("start"):
        updates["start"] = _clean_start(changes.start)
    if changes.is_set("description"):
        updates["description"] = _clean_description(changes.description)
    if changes.is_set("end"):
        updates["end"] = changes.end or None
    if reject_end_before_start and ("start" in updates or "end" in updates):
        start = updates.get("start", current.start if current else None)
        end = updates["end"] if "end" in updates else (current.end if current else None)
        if start:
            _check_order(start, end)
    return replace(changes, **updates)
