"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.conf import settings
from django.db import models


class CalendarEvent(models.Model):
    """Persistence model for a user's calendar event."""

    class Priority(models.TextChoices):
        NORMAL = "normal", "Звичайна"
        IMPORTANT = "important", "Важлива"
        CRITICAL = "critical", "Критична"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="calendar_events",
    )
    title = models.CharField(max_length=255)
    # Local timestamps kept as the strings the client sent.
    start = models.CharField(max_length=32)
    end = models.CharField(max_length=32, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    priority = models.CharField(
        max_length=16, choices=Priority.choices, default=Priority.NORMAL
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["owner", "created_at"], name="calendar_ev_owner_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} - {self.start}"
