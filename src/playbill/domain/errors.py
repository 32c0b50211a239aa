"""Domain error codes for statement computation."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNKNOWN_PLAY_TYPE = "UNKNOWN_PLAY_TYPE"
    UNKNOWN_PLAY = "UNKNOWN_PLAY"
    INVALID_INPUT = "INVALID_INPUT"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownPlayTypeError(DomainError):
    """Raised when a play's type has no pricing rule."""

    def __init__(self, play_type: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY_TYPE,
            message=f"unknown type: {play_type}",
        )
        self.play_type = play_type


class UnknownPlayError(DomainError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY,
            message=f"No play found with ID: {play_id}",
        )
        self.play_id = play_id


class InvalidInputError(DomainError):
    """Raised when an invoice or catalog source cannot be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INPUT,
            message=f"Invalid input in {path}: {reason}",
        )
        self.path = path
        self.reason = reason
