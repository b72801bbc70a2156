"""
Domain entities for the reporting bounded context.

Entities describe what went wrong independently of the shape in which
the error was raised. They contain no framework imports and no IO.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from error_reporter.domain.reporting.status_codes import (
    DEFAULT_ERROR_STATUS,
    MAX_ERROR_STATUS,
    MIN_ERROR_STATUS,
)


class ResponseFormat(Enum):
    """Representation chosen for an error response."""

    JSON = "json"
    TEXT = "text"
    HTML = "html"


@dataclass(frozen=True)
class NormalizedException:
    """Canonical description of an error, ready to be reported.

    Attributes:
        status: HTTP error status in the 400-599 range.
        name: Kind of error (exception class name or explicit name).
        message: Human-readable description, possibly empty.
        stack: Formatted stack trace, empty when absent or redacted.
    """

    status: int = DEFAULT_ERROR_STATUS
    name: str = "Unknown error"
    message: str = ""
    stack: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.status, bool) or not isinstance(self.status, int):
            raise TypeError(f"status must be an int, got {type(self.status).__name__}")
        if not MIN_ERROR_STATUS <= self.status <= MAX_ERROR_STATUS:
            raise ValueError(f"status must be an HTTP error status, got {self.status}")
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("name must be a non-empty string")
        if not isinstance(self.message, str) or not isinstance(self.stack, str):
            raise TypeError("message and stack must be strings")

    def to_dict(self) -> dict[str, Any]:
        """Structured wire representation used for JSON responses."""
        return {
            "statusCode": self.status,
            "name": self.name,
            "message": self.message,
            "stack": self.stack,
        }


@dataclass(frozen=True)
class ErrorProbe:
    """Fields an adapter managed to extract from a received error.

    A field left as None means the adapter has no opinion about it and
    the generic extraction rules apply.
    """

    status: Optional[Any] = None
    name: Optional[str] = None
    message: Optional[str] = None
    stack: Optional[str] = None


@dataclass(frozen=True)
class LinkContext:
    """Input handed to every link decorator on the diagnostic page."""

    message: str
