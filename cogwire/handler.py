"""Request handlers: the part of a server that turns requests into responses."""

from __future__ import annotations

import abc

from cogwire.protocol import CogRequest, CogResponse
from cogwire.request import Ping, Shutdown
from cogwire.response import ErrorResponse, Signal


class RequestHandler(abc.ABC):
    """Answers requests on behalf of a server."""

    @abc.abstractmethod
    async def handle(self, request: CogRequest) -> CogResponse:
        """Return the response to ``request``."""


class DefaultHandler(RequestHandler):
    """Answers pings and shutdowns; reports every other request as unhandled."""

    async def handle(self, request: CogRequest) -> CogResponse:
        if isinstance(request.payload, Ping):
            return CogResponse.pong(request.id)
        if isinstance(request.payload, Shutdown):
            return CogResponse.ok(request.id, Signal.SHUTDOWN_ACK)
        return CogResponse.error(
            request.id, ErrorResponse.internal("no handler registered for this service")
        )