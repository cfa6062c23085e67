"""Serializers for request parsing and for rendering domain models."""

from typing import Any

from django.utils import timezone
from rest_framework import serializers

from calendar_events.domain import ALL_PRIORITIES, UNSET, Event, EventChanges, EventDraft, Priority
from calendar_events.domain import datetimes
from calendar_events.domain.priorities import PRIORITY_STYLES, style_for

PRIORITY_CHOICES = [priority.value for priority in Priority]
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}(:\d{2})?$"
# Column sizes of calendar_events.models.CalendarEvent.
TITLE_MAX_LENGTH = 255
TIMESTAMP_MAX_LENGTH = 32
END_PAIR_INCOMPLETE = "Вкажіть дату і час завершення разом"


class EventWriteSerializer(serializers.Serializer):
    """Event form input.

    Start and end come either as one combined value (``start``, ``end``) or
    as separate date and time fields. Blank titles and starts are let
    through so the domain validation reports them.
    """

    title = serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False, max_length=TITLE_MAX_LENGTH
    )
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    priority = serializers.ChoiceField(choices=PRIORITY_CHOICES, required=False)
    start = serializers.CharField(
        required=False, allow_blank=True, max_length=TIMESTAMP_MAX_LENGTH
    )
    end = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=TIMESTAMP_MAX_LENGTH
    )
    start_date = serializers.RegexField(DATE_PATTERN, required=False, allow_blank=True)
    start_time = serializers.RegexField(TIME_PATTERN, required=False, allow_blank=True)
    end_date = serializers.RegexField(DATE_PATTERN, required=False, allow_blank=True)
    end_time = serializers.RegexField(TIME_PATTERN, required=False, allow_blank=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        start_date = attrs.pop("start_date", None)
        start_time = attrs.pop("start_time", None)
        end_date = attrs.pop("end_date", None)
        end_time = attrs.pop("end_time", None)

        if start_date is not None or start_time is not None:
            attrs["start"] = (
                datetimes.combine(start_date, start_time) if start_date and start_time else ""
            )
        elif "start" in attrs:
            attrs["start"] = datetimes.to_storage(attrs["start"]) or ""

        if end_date or end_time:
            # Both halves or neither.
            if not end_date:
                raise serializers.ValidationError({"end_date": END_PAIR_INCOMPLETE})
            if not end_time:
                raise serializers.ValidationError({"end_time": END_PAIR_INCOMPLETE})
            attrs["end"] = datetimes.combine(end_date, end_time)
        elif end_date is not None or end_time is not None:
            attrs["end"] = None
        elif "end" in attrs:
            attrs["end"] = datetimes.to_storage(attrs["end"])

        if "priority" in attrs:
            attrs["priority"] = Priority(attrs["priority"])
        return attrs

    def to_draft(self) -> EventDraft:
        data = self.validated_data
        return EventDraft(
            title=data.get("title", ""),
            start=data.get("start", ""),
            end=data.get("end"),
            description=data.get("description"),
            priority=data.get("priority", Priority.NORMAL),
        )

    def to_changes(self) -> EventChanges:
        data = self.validated_data
        return EventChanges(
            title=data.get("title", UNSET),
            start=data.get("start", UNSET),
            end=data.get("end", UNSET),
            description=data.get("description", UNSET),
            priority=data.get("priority", UNSET),
        )


class PrioritySerializer(serializers.Serializer):
    """Serializer for a PriorityStyle table entry."""

    background = serializers.CharField()
    border = serializers.CharField()
    color = serializers.CharField()
    label = serializers.CharField()
    icon = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Event as shown in the list view, with display strings and edit form values."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    start = serializers.CharField()
    end = serializers.CharField(allow_null=True)
    description = serializers.CharField(allow_null=True)
    priority = serializers.CharField(source="priority.value")
    created_at = serializers.DateTimeField(allow_null=True)
    updated_at = serializers.DateTimeField(allow_null=True)
    date_display = serializers.SerializerMethodField()
    time_display = serializers.SerializerMethodField()
    duration_display = serializers.SerializerMethodField()
    priority_style = serializers.SerializerMethodField()
    form = serializers.SerializerMethodField()

    def get_date_display(self, event: Event) -> str:
        return datetimes.format_date(event.start)

    def get_time_display(self, event: Event) -> str:
        start = datetimes.format_time(event.start)
        if event.end:
            return f"{start} - {datetimes.format_time(event.end)}"
        return start

    def get_duration_display(self, event: Event) -> str:
        return datetimes.format_duration(event.start, event.end)

    def get_priority_style(self, event: Event) -> dict[str, str]:
        return PrioritySerializer(style_for(event.priority)).data

    def get_form(self, event: Event) -> dict[str, Any]:
        return datetimes.form_initial(event)


class CalendarFeedSerializer(serializers.Serializer):
    """Event in the shape the calendar grid widget consumes."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    start = serializers.CharField()
    end = serializers.CharField(allow_null=True)
    description = serializers.CharField(allow_null=True)
    priority = serializers.CharField(source="priority.value")
    backgroundColor = serializers.SerializerMethodField()
    borderColor = serializers.SerializerMethodField()

    def get_backgroundColor(self, event: Event) -> str:
        return style_for(event.priority).background

    def get_borderColor(self, event: Event) -> str:
        return style_for(event.priority).border


class EventListQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True, default="")
    priority = serializers.ChoiceField(
        choices=[ALL_PRIORITIES, *PRIORITY_CHOICES], required=False, default=ALL_PRIORITIES
    )


class DayDefaultsQuerySerializer(serializers.Serializer):
    date = serializers.DateField(required=False)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        attrs.setdefault("date", timezone.localdate())
        return attrs


class CredentialsSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False, style={"input_type": "password"})


def priority_table() -> dict[str, dict[str, str]]:
    return {
        priority.value: PrioritySerializer(style).data
        for priority, style in PRIORITY_STYLES.items()
    }
