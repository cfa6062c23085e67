"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Build the session context and call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from calendar_events.domain import Priority, datetimes
from calendar_events.domain.errors import (
    AuthenticationError,
    DomainError,
    EventNotFoundError,
    EventsLoadError,
    EventValidationError,
    EventWriteError,
    InvalidEventIdError,
)
from calendar_events.handlers.serializers import (
    CalendarFeedSerializer,
    CredentialsSerializer,
    DayDefaultsQuerySerializer,
    EventListQuerySerializer,
    EventSerializer,
    EventWriteSerializer,
    priority_table,
)
from calendar_events.services import auth_service
from calendar_events.services.event_service import get_event_service
from calendar_events.services.session import SessionContext

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    EventValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidEventIdError: status.HTTP_400_BAD_REQUEST,
    EventNotFoundError: status.HTTP_404_NOT_FOUND,
    EventWriteError: status.HTTP_503_SERVICE_UNAVAILABLE,
    EventsLoadError: status.HTTP_503_SERVICE_UNAVAILABLE,
    AuthenticationError: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    """Render a domain error as ``{"code", "message"}`` with its mapped status."""
    body = {"code": error.code.value, "message": error.message}
    field = getattr(error, "field", None)
    if field:
        body["field"] = field
    http_status = ERROR_STATUS.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if http_status >= 500:
        logger.warning("Request failed with %s", error)
    return Response(body, status=http_status)


def session_for(request: Request) -> SessionContext:
    return SessionContext.from_user(request.user)


class EventListView(APIView):
    """Handler for GET and POST /api/events"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        query = EventListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        try:
            events = get_event_service().search_events(
                session_for(request),
                search=query.validated_data["search"],
                priority=query.validated_data["priority"],
            )
        except DomainError as error:
            return error_response(error)
        return Response(
            {"count": len(events), "results": EventSerializer(events, many=True).data}
        )

    def post(self, request: Request) -> Response:
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_event_service().create_event(
                session_for(request), serializer.to_draft()
            )
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for PATCH and DELETE /api/events/{event_id}"""

    permission_classes = [IsAuthenticated]

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        try:
            fields = get_event_service().update_event(
                session_for(request), event_id, serializer.to_changes()
            )
        except DomainError as error:
            return error_response(error)
        written = {
            name: value.value if isinstance(value, Priority) else value
            for name, value in fields.items()
        }
        return Response({"id": event_id, **written})

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_event_service().delete_event(session_for(request), event_id)
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventDefaultsView(APIView):
    """Handler for GET /api/events/defaults?date=YYYY-MM-DD"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        query = DayDefaultsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        return Response(datetimes.day_defaults(query.validated_data["date"]))


class CalendarFeedView(APIView):
    """Handler for GET /api/calendar"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        try:
            events = get_event_service().list_events(session_for(request))
        except DomainError as error:
            return error_response(error)
        return Response(CalendarFeedSerializer(events, many=True).data)


class PriorityListView(APIView):
    """Handler for GET /api/priorities"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        return Response(priority_table())


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        credentials = CredentialsSerializer(data=request.data)
        credentials.is_valid(raise_exception=True)
        try:
            session = auth_service.sign_in(request, **credentials.validated_data)
        except AuthenticationError as error:
            return error_response(error)
        return Response({"user_id": session.user_id, "email": session.email})


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        credentials = CredentialsSerializer(data=request.data)
        credentials.is_valid(raise_exception=True)
        try:
            session = auth_service.register(request, **credentials.validated_data)
        except AuthenticationError as error:
            return error_response(error)
        return Response(
            {"user_id": session.user_id, "email": session.email},
            status=status.HTTP_201_CREATED,
        )


class LogoutView(APIView):
    """Handler for POST /api/auth/logout"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        auth_service.sign_out(request)
        return Response(status=status.HTTP_204_NO_CONTENT)


class SessionView(APIView):
    """Handler for GET /api/auth/session"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        session = auth_service.current_session(request)
        if session is None:
            return Response(
                {"code": "NOT_AUTHENTICATED", "message": "Сесію не знайдено"},
                status=status.HTTP_401_UNAUTHORIZED,
            )
        return Response({"user_id": session.user_id, "email": session.email})
