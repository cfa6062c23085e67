"""Conversions between form fields, stored timestamps and display strings.

Stored timestamps are local, timezone-less strings of the form
``YYYY-MM-DDTHH:MM:SS``. Forms work with a ``YYYY-MM-DD`` date field and a
``HH:MM`` time field, or a combined ``YYYY-MM-DDTHH:MM`` value.

Display helpers never raise: an unparseable value renders as a sentinel.
Edit helpers never lose data: an unparseable value is passed through as is.
"""

import logging
import re
from datetime import date, datetime
from typing import Any

from dateutil.parser import isoparse
from django.utils import dateformat

from calendar_events.domain.models import Event

logger = logging.getLogger(__name__)

INPUT_MINUTES = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}$")
INPUT_SECONDS = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$")
TIME_MINUTES = re.compile(r"^\d{2}:\d{2}$")

DEFAULT_START_TIME = "09:00"
DEFAULT_END_TIME = "10:00"

LONG_DATE_FORMAT = "j E Y"

UNKNOWN_DATE = "Невідома дата"
UNKNOWN_TIME = "Невідомий час"
UNKNOWN_DURATION = "Невідома тривалість"
ALL_DAY = "Весь день"


def parse_timestamp(value: str) -> datetime:
    """Parse any ISO 8601 timestamp. Raises ValueError on failure."""
    try:
        return isoparse(value)
    except (TypeError, OverflowError) as exc:
        raise ValueError(f"Unparseable timestamp: {value!r}") from exc


def combine(date_part: str, time_part: str) -> str:
    """Join a date field and a time field into a stored timestamp."""
    if TIME_MINUTES.match(time_part):
        time_part = f"{time_part}:00"
    return f"{date_part}T{time_part}"


def to_storage(value: str | None) -> str | None:
    """Normalise a combined form value to the stored shape."""
    if not value:
        return None
    if INPUT_MINUTES.match(value):
        return f"{value}:00"
    return value


def _input_value(value: str) -> str | None:
    if INPUT_MINUTES.match(value):
        return value
    if INPUT_SECONDS.match(value):
        return value[:16]
    try:
        return parse_timestamp(value).strftime("%Y-%m-%dT%H:%M")
    except ValueError:
        logger.debug("Could not format %r for input", value)
        return None


def to_input(value: str) -> str:
    """Format a stored timestamp as a combined ``YYYY-MM-DDTHH:MM`` form value."""
    if not value:
        return value
    formatted = _input_value(value)
    return value if formatted is None else formatted


def split(value: str) -> tuple[str, str]:
    """Split a stored timestamp into ``(date, time)`` form fields."""
    formatted = _input_value(value) if value else None
    if formatted is None:
        return value, ""
    date_part, _, time_part = formatted.partition("T")
    return date_part, time_part


def format_date(value: str) -> str:
    """Long localised date, e.g. ``4 березня 2024``."""
    try:
        return dateformat.format(parse_timestamp(value), LONG_DATE_FORMAT)
    except ValueError:
        return UNKNOWN_DATE


def format_time(value: str) -> str:
    try:
        return parse_timestamp(value).strftime("%H:%M")
    except ValueError:
        return UNKNOWN_TIME


def duration_minutes(start: str, end: str) -> int:
    """Whole minutes between two stored timestamps."""
    try:
        delta = parse_timestamp(end) - parse_timestamp(start)
    except TypeError as exc:
        # naive and aware timestamps cannot be subtracted
        raise ValueError("Incomparable timestamps") from exc
    return int(delta.total_seconds() // 60)


def format_duration(start: str, end: str | None) -> str:
    if not end:
        return ALL_DAY
    try:
        minutes = duration_minutes(start, end)
    except ValueError:
        return UNKNOWN_DURATION
    if minutes < 60:
        return f"{minutes} хв"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}г {minutes}хв" if minutes else f"{hours}г"


def form_initial(event: Event) -> dict[str, Any]:
    """Values for the edit form of an existing event."""
    start_date, start_time = split(event.start)
    if event.end:
        end_date, end_time = split(event.end)
    else:
        end_date, end_time = start_date, ""
    return {
        "title": event.title,
        "description": event.description or "",
        "priority": event.priority.value,
        "start_date": start_date,
        "start_time": start_time or DEFAULT_START_TIME,
        "end_date": end_date or start_date,
        "end_time": end_time or DEFAULT_END_TIME,
    }


def day_defaults(day: date) -> dict[str, Any]:
    """Values for a new event created by selecting a day on the calendar."""
    day_value = day.isoformat()
    return {
        "title": "",
        "description": "",
        "priority": "normal",
        "start_date": day_value,
        "start_time": DEFAULT_START_TIME,
        "end_date": day_value,
        "end_time": DEFAULT_END_TIME,
    }
