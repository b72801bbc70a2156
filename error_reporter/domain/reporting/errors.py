"""
Errors raised by application code and understood by the reporter.

Routes raise these to give an error an HTTP status without importing
any web framework. The reporter picks the status up from ``status_code``.
No framework imports allowed.
"""

from typing import Optional

from error_reporter.domain.reporting.status_codes import reason_phrase


class ReportingError(Exception):
    """Base error for all errors defined by this package."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class HttpError(ReportingError):
    """Raised when a request fails with a specific HTTP status.

    The message defaults to the status' standard reason phrase.
    """

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else reason_phrase(status_code))
        self.status_code = status_code


class NotFoundError(HttpError):
    """Raised when the requested resource does not exist."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(404, message)


class NotImplementedHttpError(HttpError):
    """Raised by endpoints that are declared but not implemented yet."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(501, message)
