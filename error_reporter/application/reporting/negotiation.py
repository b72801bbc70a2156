"""
Use case: Choose the representation of an error response.

Input: the request's Accept header value (may be missing)
Output: ResponseFormat
Side effects: None.
"""

from typing import Optional

from error_reporter.domain.reporting.entities import ResponseFormat

JSON_MEDIA_TYPE = "application/json"
HTML_MEDIA_TYPE = "text/html"


def select_response_format(accept: Optional[str]) -> ResponseFormat:
    """Pick the response format preferred by the client.

    JSON wins whenever it is mentioned at all, even alongside HTML, so
    API clients sending ``Accept: application/json, text/html`` never
    receive a page. Plain text is the fallback for everything else.

    Args:
        accept: Raw Accept header value.

    Returns:
        The format to respond with.
    """
    if accept:
        accept = accept.lower()
        if JSON_MEDIA_TYPE in accept:
            return ResponseFormat.JSON
        if HTML_MEDIA_TYPE in accept:
            return ResponseFormat.HTML
    return ResponseFormat.TEXT
