"""
Error normalization.

Turns whatever application code raised (an exception, a mapping, a
string, None, or an object with inconsistently named fields) into one
NormalizedException. Each field is extracted by its own probe; probes
never raise, so normalization is total.

Side effects: None. The received error is never mutated.
"""

import traceback
from collections.abc import Mapping
from typing import Any, Optional, Sequence

from error_reporter.domain.reporting.entities import ErrorProbe, NormalizedException
from error_reporter.domain.reporting.ports import ErrorAdapter
from error_reporter.domain.reporting.status_codes import (
    DEFAULT_ERROR_STATUS,
    reason_phrase,
    validate_status_code,
)

UNKNOWN_ERROR_NAME = "Unknown error"

# Checked in order, first valid code wins.
STATUS_FIELDS = ("statusCode", "status_code", "status", "code")

_MISSING = object()


def _lookup(received: Any, field: str) -> Any:
    """Return ``received``'s ``field`` or _MISSING, without ever raising."""
    if received is None or isinstance(received, (str, bytes, int, float)):
        return _MISSING
    try:
        if isinstance(received, Mapping):
            return received[field] if field in received else _MISSING
        return getattr(received, field, _MISSING)
    except Exception:
        return _MISSING


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return ""


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else _safe_str(value)


def _probe_adapters(received: Any, adapters: Sequence[ErrorAdapter]) -> ErrorProbe:
    for adapter in adapters:
        try:
            probe = adapter.probe(received)
        except Exception:
            continue
        if isinstance(probe, ErrorProbe):
            return probe
    return ErrorProbe()


def probe_status(received: Any) -> Optional[int]:
    """First valid HTTP error status found among STATUS_FIELDS."""
    for field in STATUS_FIELDS:
        value = _lookup(received, field)
        if value is _MISSING:
            continue
        status = validate_status_code(value)
        if status is not None:
            return status
    return None


def probe_name(received: Any) -> Optional[str]:
    """Exception class name, else a non-empty explicit ``name`` field."""
    if isinstance(received, BaseException):
        return type(received).__name__
    value = _lookup(received, "name")
    if value is _MISSING or value is None:
        return None
    return _safe_str(value) or None


def probe_message(received: Any) -> Optional[str]:
    """The ``message`` field, else the string form of a non-mapping input.

    Mappings are records, not messages: without a ``message`` key they
    have no message at all.
    """
    value = _lookup(received, "message")
    if value is not _MISSING:
        return None if value is None else _safe_str(value)
    if received is None or isinstance(received, Mapping):
        return None
    return _safe_str(received)


def probe_stack(received: Any) -> Optional[str]:
    """The ``stack`` field verbatim, else a raised exception's traceback."""
    value = _lookup(received, "stack")
    if value is not _MISSING and value is not None:
        return _safe_str(value)
    if isinstance(received, BaseException) and received.__traceback__ is not None:
        try:
            return "".join(
                traceback.format_exception(
                    type(received), received, received.__traceback__
                )
            )
        except Exception:
            return None
    return None


def normalize(
    received: Any, adapters: Sequence[ErrorAdapter] = ()
) -> NormalizedException:
    """Build the canonical description of ``received``.

    Adapters are consulted first, in order; the first one that recognizes
    the error supplies the fields it knows and the generic probes fill in
    the rest.

    Args:
        received: The raw error value, of any shape.
        adapters: Extractors for application-specific error types.

    Returns:
        A NormalizedException whose status is always in the 400-599 range
        and whose name is never empty.
    """
    found = _probe_adapters(received, adapters)

    status = validate_status_code(found.status) if found.status is not None else None
    if status is None:
        status = probe_status(received)
    if status is None:
        status = DEFAULT_ERROR_STATUS

    name = _optional_str(found.name) or probe_name(received) or UNKNOWN_ERROR_NAME

    message = _optional_str(found.message)
    if message is None:
        message = probe_message(received)
    if not message:
        message = reason_phrase(status)

    stack = _optional_str(found.stack)
    if stack is None:
        stack = probe_stack(received)

    return NormalizedException(
        status=status,
        name=name,
        message=message,
        stack=stack or "",
    )
