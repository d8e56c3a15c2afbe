"""Response results, payloads and error descriptions.

A result is either a success, written as ``{"result": ...}``, or a failure,
written as ``{"error": {"code": N, "message": "..."}}``. Success payloads
carry no tag of their own: when read back they come out as plain JSON.
"""

from __future__ import annotations

import base64
import dataclasses
import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

_U32_MAX = 2**32 - 1


class ErrorCode(enum.IntEnum):
    """Numeric error codes carried in error responses."""

    INTERNAL = 1
    INVALID_REQUEST = 2
    NOT_FOUND = 3
    AUTH_REQUIRED = 4
    PERMISSION_DENIED = 5
    RATE_LIMITED = 6
    DESTRUCTIVE_DENIED = 7
    BULK_TRASH_DENIED = 8
    FEATURE_DISABLED = 9
    SHUTDOWN_IN_PROGRESS = 10


@dataclass
class ErrorResponse:
    """An error code, a message and optional structured details."""

    code: int
    message: str
    details: Any = None

    @classmethod
    def internal(cls, message: str) -> ErrorResponse:
        return cls(ErrorCode.INTERNAL, message)

    @classmethod
    def invalid_request(cls, message: str) -> ErrorResponse:
        return cls(ErrorCode.INVALID_REQUEST, message)

    @classmethod
    def not_found(cls, message: str) -> ErrorResponse:
        return cls(ErrorCode.NOT_FOUND, message)

    @classmethod
    def auth_required(cls, message: str) -> ErrorResponse:
        return cls(ErrorCode.AUTH_REQUIRED, message)

    @classmethod
    def permission_denied(cls, message: str) -> ErrorResponse:
        return cls(ErrorCode.PERMISSION_DENIED, message)

    @classmethod
    def rate_limited(cls, message: str) -> ErrorResponse:
        return cls(ErrorCode.RATE_LIMITED, message)

    @classmethod
    def destructive_denied(cls, message: str) -> ErrorResponse:
        return cls(ErrorCode.DESTRUCTIVE_DENIED, message)

    @classmethod
    def bulk_trash_denied(cls, message: str) -> ErrorResponse:
        return cls(ErrorCode.BULK_TRASH_DENIED, message)

    @classmethod
    def feature_disabled(cls, message: str) -> ErrorResponse:
        return cls(ErrorCode.FEATURE_DISABLED, message)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form; ``details`` is left out when absent."""
        out: dict[str, Any] = {"code": int(self.code), "message": self.message}
        if self.details is not None:
            out["details"] = self.details
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ErrorResponse:
        """Parse the wire form, raising ``ValueError`` when it does not fit."""
        if not isinstance(data, Mapping):
            raise ValueError("invalid type: expected struct ErrorResponse")
        for key in ("code", "message"):
            if key not in data:
                raise ValueError(f"missing field `{key}`")
        code = data["code"]
        if isinstance(code, bool) or not isinstance(code, int) or not 0 <= code <= _U32_MAX:
            raise ValueError("invalid type for field `code`: expected u32")
        message = data["message"]
        if not isinstance(message, str):
            raise ValueError("invalid type for field `message`: expected a string")
        try:
            code = ErrorCode(code)
        except ValueError:
            pass
        return cls(code, message, data.get("details"))


class Signal(enum.Enum):
    """Success payloads that carry no data; each is written as ``null``."""

    PONG = "pong"
    SHUTDOWN_ACK = "shutdown_ack"
    EMPTY = "empty"


@dataclass
class Binary:
    """Binary data, written base64-encoded."""

    content_type: str
    data: bytes


@dataclass
class MonitorSubscription:
    service: str
    interval_secs: int
    last_check: str | None = None
    cursor: str | None = None


@dataclass
class IndexNamespaceStatus:
    namespace: str
    document_count: int
    last_refresh: str | None = None
    cursor: str | None = None


@dataclass
class AccountStatus:
    email: str
    scopes: list[str] = field(default_factory=list)
    token_valid: bool = False
    client_name: str | None = None


@dataclass
class MonitorSubscribed:
    services: list[str] = field(default_factory=list)


@dataclass
class MonitorUnsubscribed:
    services: list[str] = field(default_factory=list)


@dataclass
class MonitorStatus:
    subscriptions: list[MonitorSubscription] = field(default_factory=list)


@dataclass
class IndexResults:
    namespace: str
    results: list[Any] = field(default_factory=list)
    total: int = 0


@dataclass
class IndexRefreshStatus:
    namespaces: list[IndexNamespaceStatus] = field(default_factory=list)


@dataclass
class IndexStatus:
    namespaces: list[IndexNamespaceStatus] = field(default_factory=list)


@dataclass
class AuthStatus:
    accounts: list[AccountStatus] = field(default_factory=list)


@dataclass
class Success:
    """A successful result holding a payload."""

    payload: Any = None


@dataclass
class Failure:
    """A failed result holding an error."""

    error: ErrorResponse


ResponseResult = Union[Success, Failure]


def payload_to_json(payload: Any) -> Any:
    """Return the JSON value a success payload is written as."""
    if isinstance(payload, Signal):
        return None
    if isinstance(payload, Binary):
        return {
            "content_type": payload.content_type,
            "data": base64.b64encode(payload.data).decode("ascii"),
        }
    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        return dataclasses.asdict(payload)
    return payload


def result_to_dict(result: ResponseResult) -> dict[str, Any]:
    """Return the wire form of a result."""
    if isinstance(result, Success):
        return {"result": payload_to_json(result.payload)}
    if isinstance(result, Failure):
        return {"error": result.error.to_dict()}
    raise TypeError(f"not a response result: {result!r}")


def result_from_dict(data: Any) -> ResponseResult:
    """Parse the wire form of a result; success payloads come back as JSON."""
    if isinstance(data, Mapping):
        if "result" in data:
            return Success(data["result"])
        if "error" in data:
            try:
                return Failure(ErrorResponse.from_dict(data["error"]))
            except ValueError:
                pass
    raise ValueError("data did not match any variant of untagged enum ResponseResult")