"""Request payloads and their flat ``"type": "service.op"`` wire form.

On the wire a request payload is one JSON object. The ``type`` key names
either a standalone request (``ping``, ``shutdown``) or a service operation
as ``service.op``. The operation's parameters sit beside ``type`` in the
same object.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from cogwire.schema import (
    Feature,
    Field,
    FieldKind,
    Operation,
    SchemaError,
    Service,
    Struct,
    ValueType,
    flag,
    many,
    optional,
    required,
)
from cogwire.services_files import file_services
from cogwire.services_mail import mail_services


class RequestError(ValueError):
    """Raised when a request payload cannot be encoded or decoded."""


@dataclass(frozen=True)
class Ping:
    """Liveness probe."""


@dataclass(frozen=True)
class Shutdown:
    """Ask the server to stop, with an optional reason."""

    reason: str | None = None


@dataclass
class ServiceRequest:
    """An operation on one of the services, with its parameters."""

    service: str
    op: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str:
        """The ``service.op`` string used on the wire."""
        return f"{self.service}.{self.op}"


RequestPayload = Union[Ping, Shutdown, ServiceRequest]


class _RequiredMany(Field):
    """A list field that must be present."""

    def load(self, params: Mapping[str, Any]) -> Any:
        if self.name not in params:
            raise SchemaError(f"missing field `{self.name}`")
        return super().load(params)


def _required_many(name: str) -> Field:
    return _RequiredMany(name, FieldKind.MANY, ValueType.STRING)


def _op(name: str, *fields: Field) -> Operation:
    return Operation(name, Struct(name, fields))


_U64 = ValueType.U64

_AUTH = Service(
    "auth",
    (
        _op(
            "login",
            required("email"),
            many("services"),
            flag("readonly"),
            flag("manual"),
        ),
        _op("status"),
        _op("list", flag("check")),
        _op("remove", required("email")),
        _op("credentials", required("path"), optional("client_name")),
        _op("credentials_list"),
        _op("service_account_set", required("email"), required("key_path")),
        _op("service_account_status", required("email")),
        _op("service_account_unset", required("email")),
        _op("keyring_get"),
        _op("keyring_set", required("backend")),
        _op("alias_set", required("alias"), required("email")),
        _op("alias_list"),
        _op("alias_unset", required("alias")),
    ),
)

_MONITOR = Service(
    "monitor",
    (
        _op("subscribe", _required_many("services"), optional("interval_secs", _U64)),
        _op("unsubscribe", many("services")),
        _op("status"),
    ),
)

_INDEX = Service(
    "index",
    (
        _op(
            "query",
            required("namespace"),
            required("query"),
            optional("max_results", _U64, keep_null=True),
        ),
        _op("refresh", many("namespaces")),
        _op("status"),
    ),
)

_FEATURE_GATES = {
    "gemini": Feature.GEMINI_WEB,
    "notebooklm": Feature.NOTEBOOKLM,
}


def service_catalog(features: Iterable[Feature] = ()) -> dict[str, Service]:
    """Return the services available with ``features``, keyed by name."""
    enabled = frozenset(features)
    services = (*mail_services(), *file_services(), _AUTH, _MONITOR, _INDEX)
    return {
        service.name: service
        for service in services
        if service.name not in _FEATURE_GATES
        or _FEATURE_GATES[service.name] in enabled
    }


def payload_to_dict(payload: RequestPayload) -> dict[str, Any]:
    """Return the flat wire form of a request payload, ``type`` first."""
    if isinstance(payload, Ping):
        return {"type": "ping"}
    if isinstance(payload, Shutdown):
        out: dict[str, Any] = {"type": "shutdown"}
        if payload.reason is not None:
            out["reason"] = payload.reason
        return out
    if not isinstance(payload, ServiceRequest):
        raise TypeError(f"not a request payload: {payload!r}")

    service = service_catalog(Feature).get(payload.service)
    if service is None:
        raise RequestError(f"unknown service: {payload.service}")
    try:
        params = service.dump(payload.op, payload.params)
    except SchemaError as exc:
        raise RequestError(f"invalid {payload.service}.* request: {exc}") from exc
    return {"type": payload.type, **params}


def payload_from_dict(
    data: Any, features: Iterable[Feature] = ()
) -> RequestPayload:
    """Parse the flat wire form of a request payload."""
    if not isinstance(data, Mapping):
        raise RequestError('invalid type: expected a JSON object with a "type" field')
    if "type" not in data:
        raise RequestError("missing field `type`")
    type_str = data["type"]
    if not isinstance(type_str, str):
        raise RequestError("invalid type for field `type`: expected a string")
    params = {key: value for key, value in data.items() if key != "type"}

    if type_str == "ping":
        return Ping()
    if type_str == "shutdown":
        reason = params.get("reason")
        return Shutdown(reason if isinstance(reason, str) else None)

    service_name, dot, op = type_str.partition(".")
    if not dot:
        raise RequestError(f"invalid request type: {type_str}")

    enabled = frozenset(features)
    service = service_catalog(enabled).get(service_name)
    if service is None:
        raise RequestError(f"unknown service: {service_name}")
    try:
        loaded = service.load(op, params, enabled)
    except SchemaError as exc:
        raise RequestError(f"invalid {service_name}.* request: {exc}") from exc
    return ServiceRequest(service_name, op, loaded)