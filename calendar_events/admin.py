from django.contrib import admin

from calendar_events.models import CalendarEvent


@admin.register(CalendarEvent)
class CalendarEventAdmin(admin.ModelAdmin):
    list_display = ["title", "owner", "start", "end", "priority", "created_at"]
    list_filter = ["priority"]
    search_fields = ["title", "description", "owner__email"]
    readonly_fields = ["created_at", "updated_at"]
