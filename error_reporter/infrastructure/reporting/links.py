"""
Link decorators for the diagnostic page.

A link decorator maps the exception message to an HTML fragment that
the page renderer appends next to the message.
"""

import html
from urllib.parse import quote_plus

from error_reporter.domain.reporting.entities import LinkContext
from error_reporter.domain.reporting.ports import LinkDecorator

STACKOVERFLOW_SEARCH_URL = "https://stackoverflow.com/search?q={query}"


def search_link(label: str, url_template: str) -> LinkDecorator:
    """Build a decorator linking to a search for the exception message.

    Args:
        label: Text of the link.
        url_template: URL containing a ``{query}`` placeholder which receives
            the URL-encoded message.

    Returns:
        A link decorator producing an ``<a>`` element.
    """

    def decorate(context: LinkContext) -> str:
        url = url_template.format(query=quote_plus(context.message))
        return (
            f'<a href="{html.escape(url)}" target="_blank" rel="noopener noreferrer">'
            f"{html.escape(label)}</a>"
        )

    return decorate


stackoverflow_link = search_link("Search Stack Overflow", STACKOVERFLOW_SEARCH_URL)
