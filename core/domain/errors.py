"""Domain error codes for the event manager."""

from dataclasses import dataclass
from enum import Enum
from typing import List


class ErrorCode(Enum):
    """Domain error codes."""

    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    REMOTE_READ_FAILED = "REMOTE_READ_FAILED"
    REMOTE_WRITE_FAILED = "REMOTE_WRITE_FAILED"
    EVENT_FORM_INCOMPLETE = "EVENT_FORM_INCOMPLETE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class AuthenticationError(DomainError):
    """Raised when no active player matches the login email."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.AUTHENTICATION_FAILED,
            message="Login failed",
        )


class RemoteReadError(DomainError):
    """Raised when a read against the data service fails."""

    def __init__(self, resource: str) -> None:
        super().__init__(
            code=ErrorCode.REMOTE_READ_FAILED,
            message=f"Could not read {resource}",
        )
        self.resource = resource


class RemoteWriteError(DomainError):
    """Raised when a create or update against the data service fails."""

    def __init__(self, resource: str) -> None:
        super().__init__(
            code=ErrorCode.REMOTE_WRITE_FAILED,
            message=f"Could not write {resource}",
        )
        self.resource = resource


class EventFormError(DomainError):
    """Raised when required create-event fields are missing or malformed."""

    def __init__(self, fields: List[str]) -> None:
        super().__init__(
            code=ErrorCode.EVENT_FORM_INCOMPLETE,
            message=f"Missing or invalid fields: {', '.join(fields)}",
        )
        self.fields = list(fields)
