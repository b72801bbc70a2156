"""
HTTP status-code validation for loosely typed error values.

Error objects surfaced by application code carry status codes as ints,
strings or not at all. This module decides which candidates count as an
HTTP error status and what their standard reason phrase is.
No framework imports allowed.
"""

import re
from http import HTTPStatus
from typing import Any, Optional

MIN_ERROR_STATUS = 400
MAX_ERROR_STATUS = 599
DEFAULT_ERROR_STATUS = 500

# ASCII digits only: int() would also take "4_04" and full-width digits.
DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")


def _to_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        value = value.strip()
        if DECIMAL_PATTERN.fullmatch(value) is None:
            return None
        try:
            return int(value, 10)
        except ValueError:
            return None
    return None


def validate_status_code(value: Any) -> Optional[int]:
    """Return ``value`` as an HTTP error status, or None if it is not one.

    Accepts ints, integral floats and strings of ASCII decimal digits.
    The result must fall in the 4xx/5xx range; anything else (including 399 and 600)
    is rejected so that unrelated ``code`` fields such as errno values or
    driver error codes are never mistaken for an HTTP status.

    Args:
        value: A candidate taken from an error's status-like field.

    Returns:
        The validated status code, or None.
    """
    status = _to_int(value)
    if status is not None and MIN_ERROR_STATUS <= status <= MAX_ERROR_STATUS:
        return status
    return None


def reason_phrase(status: int) -> str:
    """Standard reason phrase for ``status``, or an empty string."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""
