"""
Production redaction of normalized exceptions.

Stack traces reveal filesystem paths, module layout and source lines.
They are useful to operators during development and are removed from
anything sent to clients in production.
"""

import dataclasses

from error_reporter.domain.reporting.entities import NormalizedException


def redact(exc: NormalizedException, is_prod: bool) -> NormalizedException:
    """Return ``exc`` as it may be shown to a client.

    In production a new instance without the stack is returned; the
    original is left untouched so it can still be logged in full.
    Outside production ``exc`` itself is returned.
    """
    if not is_prod:
        return exc
    return dataclasses.replace(exc, stack="")
