from django.urls import path

from calendar_events.handlers import (
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

urlpatterns = [
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/logout", LogoutView.as_view(), name="auth-logout"),
    path("auth/session", SessionView.as_view(), name="auth-session"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/defaults", EventDefaultsView.as_view(), name="event-defaults"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("calendar", CalendarFeedView.as_view(), name="calendar-feed"),
    path("priorities", PriorityListView.as_view(), name="priority-list"),
]
