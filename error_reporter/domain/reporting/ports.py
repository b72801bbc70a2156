"""
Port interfaces (ABCs) for the reporting bounded context.

Ports define the contracts the reporting pipeline requires from the
outside world: adapters that understand application-specific error
types, and the renderer that turns an exception into an HTML page.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from error_reporter.domain.reporting.entities import (
    ErrorProbe,
    LinkContext,
    NormalizedException,
)

LinkDecorator = Callable[[LinkContext], str]


class ErrorAdapter(ABC):
    """Port for extracting report fields from a known error type.

    Implement this for error classes whose status, message or stack live
    under names the generic extraction does not know about.
    """

    @abstractmethod
    def probe(self, error: Any) -> Optional[ErrorProbe]:
        """Return the fields found on ``error``, or None if it is not handled."""
        raise NotImplementedError


class PageRenderer(ABC):
    """Port for rendering a human-oriented HTML diagnostic page."""

    @abstractmethod
    async def render(
        self,
        exception: NormalizedException,
        request: Any,
        links: Sequence[LinkDecorator] = (),
    ) -> str:
        """Render ``exception`` raised while serving ``request`` as HTML.

        Args:
            exception: The (possibly redacted) exception to display.
            request: The request that was being served.
            links: Link decorators whose fragments are appended to the page,
                in order.

        Returns:
            A complete HTML document.
        """
        raise NotImplementedError
