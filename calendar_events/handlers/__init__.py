from calendar_events.handlers.views import (
    CalendarFeedView,
    EventDefaultsView,
    EventDetailView,
    EventListView,
    LoginView,
    LogoutView,
    PriorityListView,
    RegisterView,
    SessionView,
)

__all__ = [
    "CalendarFeedView",
    "EventDefaultsView",
    "EventDetailView",
    "EventListView",
    "LoginView",
    "LogoutView",
    "PriorityListView",
    "RegisterView",
    "SessionView",
]
