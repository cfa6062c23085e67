"""Django signal handlers for the calendar events app."""

from django.core.signals import setting_changed
from django.dispatch import receiver

from calendar_events.services.event_service import build_store


@receiver(setting_changed)
def reset_event_store(sender, setting, **kwargs):
    """Drop the process-wide store when the CALENDAR_EVENTS settings change."""
    if setting == "CALENDAR_EVENTS":
        build_store.cache_clear()
