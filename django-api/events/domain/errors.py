"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT_DATA = "INVALID_EVENT_DATA"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    ORGANIZER_REQUIRED = "ORGANIZER_REQUIRED"
    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidEventDataError(DomainError):
    """Raised when a new event fails domain validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_DATA,
            message=reason,
        )


class InvalidQuantityError(DomainError):
    """Raised when a booking asks for fewer than one ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_QUANTITY,
            message="Quantity must be a whole number of at least 1",
        )


class NotAuthenticatedError(DomainError):
    """Raised when an operation needs a logged-in user."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_AUTHENTICATED,
            message="Please log in to continue",
        )


class OrganizerRequiredError(DomainError):
    """Raised when a user without organizer access manages events."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ORGANIZER_REQUIRED,
            message="You don't have organizer access",
        )


class InsufficientCapacityError(DomainError):
    """Raised when a booking asks for more seats than remain."""

    def __init__(self, available: int) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_CAPACITY,
            message=f"Only {available} seats available",
        )
        self.available = available


class PersistenceError(DomainError):
    """Raised when the backing store fails; the write must not be assumed."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILURE,
            message="The request could not be completed, please try again",
        )
        self.operation = operation
