"""The one-line handshake that opens every connection."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from cogwire.wire import encode

PROTOCOL_VERSION = "cog/1"


class HandshakeError(ValueError):
    """Raised when a handshake message is malformed or unsupported."""


class HandshakeRejected(HandshakeError):
    """Raised on the client when the server refuses the handshake."""


def _string_field(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise HandshakeError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise HandshakeError(f"invalid type for field `{key}`: expected a string")
    return value


@dataclass
class HandshakeRequest:
    """The first line a client sends."""

    protocol: str = PROTOCOL_VERSION

    def validate(self) -> None:
        """Raise ``HandshakeError`` unless the protocol version is supported."""
        if self.protocol != PROTOCOL_VERSION:
            raise HandshakeError(
                f"unsupported protocol: {self.protocol} (expected {PROTOCOL_VERSION})"
            )

    def to_dict(self) -> dict[str, Any]:
        return {"protocol": self.protocol}

    @classmethod
    def from_dict(cls, data: Any) -> HandshakeRequest:
        if not isinstance(data, Mapping):
            raise HandshakeError("invalid type: expected struct HandshakeRequest")
        return cls(_string_field(data, "protocol"))


@dataclass
class HandshakeResponse:
    """The server's answer; ``message`` is written under the ``error`` key."""

    protocol: str
    status: str
    message: str | None = None

    @classmethod
    def ok(cls) -> HandshakeResponse:
        return cls(PROTOCOL_VERSION, "ok")

    @classmethod
    def error(cls, message: str) -> HandshakeResponse:
        return cls(PROTOCOL_VERSION, "error", message)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"protocol": self.protocol, "status": self.status}
        if self.message is not None:
            out["error"] = self.message
        return out

    @classmethod
    def from_dict(cls, data: Any) -> HandshakeResponse:
        if not isinstance(data, Mapping):
            raise HandshakeError("invalid type: expected struct HandshakeResponse")
        message = data.get("error")
        if message is not None and not isinstance(message, str):
            raise HandshakeError("invalid type for field `error`: expected a string")
        return cls(_string_field(data, "protocol"), _string_field(data, "status"), message)


def _parse(line: bytes, cls: Any, what: str) -> Any:
    try:
        return cls.from_dict(json.loads(line.strip()))
    except ValueError as exc:
        raise HandshakeError(f"{what}: {exc}") from exc


async def server_handshake(reader: Any, writer: Any) -> None:
    """Read the client's handshake, answer it, and raise if it was refused."""
    line = await reader.readline()
    request: HandshakeRequest = _parse(line, HandshakeRequest, "invalid handshake")
    try:
        request.validate()
    except HandshakeError as exc:
        writer.write(encode(HandshakeResponse.error(str(exc))))
        await writer.drain()
        raise
    writer.write(encode(HandshakeResponse.ok()))
    await writer.drain()


async def client_handshake(reader: Any, writer: Any) -> None:
    """Send the handshake and raise ``HandshakeRejected`` if the server refuses."""
    writer.write(encode(HandshakeRequest()))
    await writer.drain()
    line = await reader.readline()
    response: HandshakeResponse = _parse(line, HandshakeResponse, "invalid handshake response")
    if response.status != "ok":
        raise HandshakeRejected(response.message or "handshake rejected")