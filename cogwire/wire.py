"""Newline-delimited JSON framing."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from cogwire.protocol import CogEvent, CogRequest, CogResponse
from cogwire.schema import Feature

MAX_LINE_SIZE = 16 * 1024 * 1024


class WireError(ValueError):
    """Raised when a message cannot be framed or read."""


def encode(message: Any) -> bytes:
    """Encode a message, or plain JSON, as one newline-terminated line."""
    to_dict = getattr(message, "to_dict", None)
    try:
        value = to_dict() if callable(to_dict) else message
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise WireError(str(exc)) from exc

    data = text.encode("utf-8") + b"\n"
    if len(data) > MAX_LINE_SIZE:
        raise WireError(f"message too large: {len(data)} bytes (max {MAX_LINE_SIZE})")
    return data


def decode(data: bytes) -> Any:
    """Decode one JSON line; the trailing newline is optional."""
    if data.endswith(b"\n"):
        data = data[:-1]
    try:
        return json.loads(data)
    except ValueError as exc:
        raise WireError(str(exc)) from exc


def encode_request(request: CogRequest) -> bytes:
    return encode(request)


def decode_request(data: bytes, features: Iterable[Feature] = ()) -> CogRequest:
    try:
        return CogRequest.from_dict(decode(data), features)
    except WireError:
        raise
    except ValueError as exc:
        raise WireError(str(exc)) from exc


def encode_response(response: CogResponse) -> bytes:
    return encode(response)


def decode_response(data: bytes) -> CogResponse:
    try:
        return CogResponse.from_dict(decode(data))
    except WireError:
        raise
    except ValueError as exc:
        raise WireError(str(exc)) from exc


def encode_event(event: CogEvent) -> bytes:
    return encode(event)


def decode_event(data: bytes) -> CogEvent:
    try:
        return CogEvent.from_dict(decode(data))
    except WireError:
        raise
    except ValueError as exc:
        raise WireError(str(exc)) from exc


async def read_line(reader: Any) -> bytes | None:
    """Read one line from a stream reader; return ``None`` at end of stream."""
    try:
        line = await reader.readline()
    except ValueError as exc:
        raise WireError(f"NDJSON line too large: {exc}") from exc
    if not line:
        return None
    if len(line) > MAX_LINE_SIZE:
        raise WireError(f"NDJSON line too large: {len(line)} bytes")
    return line