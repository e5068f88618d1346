"""Base domain error shared by every app.

Each concrete error carries an app-specific code and belongs to one kind.
Handlers map the kind to an HTTP status; the code and message are user-safe.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Machine-readable error categories."""

    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION = "VALIDATION"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: Enum
    message: str

    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
