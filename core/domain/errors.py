"""
Domain errors.

All business rule violations raise a single DomainError carrying a kind.
Callers switch on ``error.kind`` instead of catching subclasses.
"""
from enum import Enum


class DomainErrorKind(str, Enum):
    """Categories of recoverable domain failures."""

    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_STATE = "InvalidState"
    NOT_FOUND = "NotFound"


class DomainError(Exception):
    """
    Recoverable error raised by the order domain.

    - INVALID_ARGUMENT: malformed input, detected before any mutation
    - INVALID_STATE: illegal lifecycle transition, aggregate untouched
    - NOT_FOUND: referenced order does not exist
    """

    def __init__(self, kind: DomainErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def invalid_argument(cls, message: str) -> "DomainError":
        return cls(DomainErrorKind.INVALID_ARGUMENT, message)

    @classmethod
    def invalid_state(cls, message: str) -> "DomainError":
        return cls(DomainErrorKind.INVALID_STATE, message)

    @classmethod
    def not_found(cls, message: str) -> "DomainError":
        return cls(DomainErrorKind.NOT_FOUND, message)

    def to_dict(self) -> dict:
        """Serialize for API error responses."""
        return {"error": self.kind.value, "detail": self.message}

    def __repr__(self) -> str:
        return f"DomainError(kind={self.kind.name}, message={self.message!r})"
