"""A Unix domain socket server that speaks the newline-delimited protocol."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from cogwire.handler import RequestHandler
from cogwire.handshake import server_handshake
from cogwire.request import Shutdown
from cogwire.schema import Feature
from cogwire.wire import decode_request, encode_response, read_line

logger = logging.getLogger(__name__)


class UdsServer:
    """Accepts connections on a Unix socket and hands requests to a handler."""

    def __init__(self, handler: RequestHandler, features: Iterable[Feature] = ()) -> None:
        self.handler = handler
        self.features = frozenset(features)

    async def listen(self, socket_path: str | os.PathLike[str]) -> None:
        """Serve connections on ``socket_path`` until cancelled.

        A file already at that path is removed first, and missing parent
        directories are created.
        """
        path = Path(socket_path)
        if path.exists():
            path.unlink()
        path.parent.mkdir(parents=True, exist_ok=True)

        server = await asyncio.start_unix_server(self._serve_client, path=str(path))
        logger.info("COG server listening on %s", path)
        async with server:
            await server.serve_forever()

    async def _serve_client(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        try:
            await self.handle_connection(reader, writer)
        except Exception as exc:  # one bad connection must not stop the server
            logger.error("connection error: %s", exc)
        finally:
            writer.close()
            with contextlib.suppress(Exception):
                await writer.wait_closed()

    async def handle_connection(self, reader: Any, writer: Any) -> None:
        """Run the handshake, then answer requests line by line.

        Returns when the client closes the stream or after answering a
        shutdown request. Handshake and framing errors are raised.
        """
        await server_handshake(reader, writer)
        logger.debug("client connected")

        while True:
            line = await read_line(reader)
            if line is None:
                logger.debug("client disconnected")
                return

            request = decode_request(line, self.features)
            is_shutdown = isinstance(request.payload, Shutdown)

            response = await self.handler.handle(request)
            writer.write(encode_response(response))
            await writer.drain()

            if is_shutdown:
                logger.info("shutdown requested, closing connection")
                return