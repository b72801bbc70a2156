"""
Response channel for a single ASGI HTTP request.

Wraps the ASGI ``send`` callable so the error reporter can tell
whether a response has already begun before it writes one.
"""

from starlette.responses import Response
from starlette.types import Message, Receive, Scope, Send


class ResponseChannel:
    """Write target of one request, tracking whether headers were sent."""

    def __init__(self, scope: Scope, receive: Receive, send: Send) -> None:
        self._scope = scope
        self._receive = receive
        self._send = send
        self.started = False

    async def send(self, message: Message) -> None:
        if message["type"] == "http.response.start":
            self.started = True
        await self._send(message)

    async def write(self, response: Response) -> None:
        """Send ``response`` as the complete answer to the request."""
        await response(self._scope, self._receive, self.send)
