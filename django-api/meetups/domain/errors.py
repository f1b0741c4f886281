"""Domain error codes for the meetups module."""

from dataclasses import dataclass
from enum import Enum

from meetups.domain.outcomes import Outcome


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    NOT_ORGANISER = "NOT_ORGANISER"
    ALREADY_JOINED = "ALREADY_JOINED"
    NOT_JOINED = "NOT_JOINED"
    MISSING_USER_ID = "MISSING_USER_ID"


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


class NotOrganiserError(DomainError):
    """Raised when someone other than the organiser tries to edit an event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_ORGANISER,
            message="Only the organiser can edit this event",
        )
        self.event_id = event_id


class AlreadyJoinedError(DomainError):
    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_JOINED,
            message="Already joined this event",
        )
        self.event_id = event_id


class NotJoinedError(DomainError):
    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_JOINED,
            message="Not a participant of this event",
        )
        self.event_id = event_id


class MissingUserIdError(DomainError):
    """Raised when a request does not identify the acting user."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_USER_ID,
            message="X-User-Id header is required",
        )


def error_for_outcome(outcome: Outcome, event_id: str) -> DomainError | None:
    """Return the domain error describing a rejected outcome, or None for OK."""
    if outcome is Outcome.NOT_FOUND:
        return EventNotFoundError(event_id)
    if outcome is Outcome.FORBIDDEN:
        return NotOrganiserError(event_id)
    if outcome is Outcome.ALREADY_JOINED:
        return AlreadyJoinedError(event_id)
    if outcome is Outcome.NOT_JOINED:
        return NotJoinedError(event_id)
    return None
