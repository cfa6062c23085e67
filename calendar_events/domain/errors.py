"""Domain error codes for the calendar events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    EVENT_WRITE_FAILED = "EVENT_WRITE_FAILED"
    EVENTS_LOAD_FAILED = "EVENTS_LOAD_FAILED"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event does not exist in the user's collection."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Подію не знайдено",
        )
        object.__setattr__(self, "event_id", event_id)


class InvalidEventIdError(DomainError):
    """Raised when an event ID is malformed for the active store."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Невірний формат ідентифікатора події",
        )


class EventValidationError(DomainError):
    """Raised when a draft fails the pre-write checks."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)
        object.__setattr__(self, "field", field)


class StoreError(DomainError):
    """Raised by a store when the backing service rejects an operation."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message=f"Event store failed to {operation}",
        )
        object.__setattr__(self, "operation", operation)


class EventWriteError(DomainError):
    """Raised by the service when a create, update or delete fails."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.EVENT_WRITE_FAILED, message=message)


class EventsLoadError(DomainError):
    """Raised when events cannot be loaded and the policy is to report it."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENTS_LOAD_FAILED,
            message="Помилка завантаження подій",
        )


class AuthenticationError(DomainError):
    """Raised when the identity provider rejects a sign-in or sign-up."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.AUTHENTICATION_FAILED, message=message)
