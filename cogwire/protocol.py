"""Request, response and event messages.

A request is one flat object, ``{"id": N, "type": "service.op", ...params}``.
A response is ``{"id": N, "result": ...}`` on success or
``{"id": N, "error": {"code": N, "message": "..."}}`` on failure.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from cogwire.request import (
    Ping,
    RequestError,
    RequestPayload,
    Shutdown,
    payload_from_dict,
    payload_to_dict,
)
from cogwire.response import (
    ErrorResponse,
    Failure,
    ResponseResult,
    Signal,
    Success,
    result_from_dict,
    result_to_dict,
)
from cogwire.schema import Feature

_U64_MAX = 2**64 - 1


def _message_id(data: Mapping[str, Any], error: type[ValueError]) -> int:
    if "id" not in data:
        raise error("missing field `id`")
    value = data["id"]
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U64_MAX:
        raise error("invalid type for field `id`: expected u64")
    return value


@dataclass
class CogRequest:
    """A request: an identifier and a payload."""

    id: int
    payload: RequestPayload

    @classmethod
    def ping(cls, id: int) -> CogRequest:
        return cls(id, Ping())

    @classmethod
    def shutdown(cls, id: int, reason: str | None = None) -> CogRequest:
        return cls(id, Shutdown(reason))

    def to_dict(self) -> dict[str, Any]:
        """Return the flat wire form, ``id`` first."""
        return {"id": self.id, **payload_to_dict(self.payload)}

    @classmethod
    def from_dict(
        cls, data: Any, features: Iterable[Feature] = ()
    ) -> CogRequest:
        """Parse the flat wire form, raising ``RequestError`` when it does not fit."""
        if not isinstance(data, Mapping):
            raise RequestError(
                'invalid type: expected a JSON object with "id" and "type" fields'
            )
        message_id = _message_id(data, RequestError)
        rest = {key: value for key, value in data.items() if key != "id"}
        return cls(message_id, payload_from_dict(rest, features))


@dataclass
class CogResponse:
    """A response: the identifier of its request and a result."""

    id: int
    result: ResponseResult

    @classmethod
    def ok(cls, id: int, payload: Any) -> CogResponse:
        return cls(id, Success(payload))

    @classmethod
    def error(cls, id: int, error: ErrorResponse) -> CogResponse:
        return cls(id, Failure(error))

    @classmethod
    def pong(cls, id: int) -> CogResponse:
        return cls.ok(id, Signal.PONG)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form, ``id`` first."""
        return {"id": self.id, **result_to_dict(self.result)}

    @classmethod
    def from_dict(cls, data: Any) -> CogResponse:
        """Parse the wire form, raising ``ValueError`` when it does not fit."""
        if not isinstance(data, Mapping):
            raise ValueError("invalid type: expected struct CogResponse")
        message_id = _message_id(data, ValueError)
        rest = {key: value for key, value in data.items() if key != "id"}
        return cls(message_id, result_from_dict(rest))


@dataclass
class CogEvent:
    """An event pushed by the server while monitoring."""

    event_type: str
    service: str
    payload: Any
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "service": self.service,
            "payload": self.payload,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Any) -> CogEvent:
        """Parse the wire form, raising ``ValueError`` when it does not fit."""
        if not isinstance(data, Mapping):
            raise ValueError("invalid type: expected struct CogEvent")
        for key in ("event_type", "service", "payload", "timestamp"):
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        for key in ("event_type", "service", "timestamp"):
            if not isinstance(data[key], str):
                raise ValueError(f"invalid type for field `{key}`: expected a string")
        return cls(data["event_type"], data["service"], data["payload"], data["timestamp"])