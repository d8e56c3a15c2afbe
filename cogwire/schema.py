"""Declarative descriptions of service operations and their parameters.

Each service exposes a set of named operations. An operation carries a
parameter structure whose fields follow a small set of rules:

* required fields must be present;
* optional fields default to ``None`` and are left out of the wire form
  when empty (unless told to keep an explicit ``null``);
* flags default to ``False`` and are always written;
* lists default to empty and are always written;
* nested structures are required and validated recursively.

Unknown keys in incoming parameters are ignored.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


class Feature(enum.Enum):
    """Optional capabilities that unlock extra operations."""

    DESTRUCTIVE_PERMANENT = "destructive-permanent"
    DESTRUCTIVE_BULK_TRASH = "destructive-bulk-trash"
    GEMINI_WEB = "gemini-web"
    NOTEBOOKLM = "notebooklm"


class SchemaError(ValueError):
    """Raised when parameters do not fit an operation's description."""


class FieldKind(enum.Enum):
    """How a field behaves when absent and when written out."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    FLAG = "flag"
    MANY = "many"
    NESTED = "nested"


class ValueType(enum.Enum):
    """The JSON value a field holds."""

    STRING = "a string"
    BOOL = "a boolean"
    U32 = "an unsigned 32-bit integer"
    U64 = "an unsigned 64-bit integer"
    JSON = "any JSON value"

    def accepts(self, value: Any) -> bool:
        """Return whether ``value`` is a valid instance of this type."""
        if self is ValueType.JSON:
            return True
        if self is ValueType.STRING:
            return isinstance(value, str)
        if self is ValueType.BOOL:
            return isinstance(value, bool)
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        limit = _U32_MAX if self is ValueType.U32 else _U64_MAX
        return 0 <= value <= limit


@dataclass(frozen=True)
class Field:
    """One named parameter of an operation or structure."""

    name: str
    kind: FieldKind
    type_: ValueType = ValueType.STRING
    keep_null: bool = False
    struct: Struct | None = None

    def _check(self, value: Any) -> Any:
        if not self.type_.accepts(value):
            raise SchemaError(
                f"invalid type for field `{self.name}`: expected {self.type_.value}"
            )
        return value

    def _missing(self) -> SchemaError:
        return SchemaError(f"missing field `{self.name}`")

    def load(self, params: Mapping[str, Any]) -> Any:
        """Extract and validate this field's value from ``params``."""
        present = self.name in params
        value = params.get(self.name)

        if self.kind is FieldKind.REQUIRED:
            if not present:
                raise self._missing()
            return self._check(value)

        if self.kind is FieldKind.NESTED:
            if not present:
                raise self._missing()
            if self.struct is None:
                raise SchemaError(f"field `{self.name}` has no structure")
            return self.struct.load(value)

        if self.kind is FieldKind.OPTIONAL:
            return None if value is None else self._check(value)

        if self.kind is FieldKind.FLAG:
            return self._check(value) if present else False

        if not present:
            return []
        if not isinstance(value, list):
            raise SchemaError(
                f"invalid type for field `{self.name}`: "
                f"expected a sequence of {self.type_.value}"
            )
        return [self._check(item) for item in value]

    def should_emit(self, value: Any) -> bool:
        """Return whether ``value`` belongs in the wire form."""
        return not (
            self.kind is FieldKind.OPTIONAL and value is None and not self.keep_null
        )


@dataclass(frozen=True)
class Struct:
    """An ordered collection of fields."""

    name: str
    fields: tuple[Field, ...] = ()

    def load(self, params: Any) -> dict[str, Any]:
        """Validate ``params`` and return every field with defaults filled in."""
        if not isinstance(params, Mapping):
            raise SchemaError(f"invalid type: expected struct {self.name}")
        return {f.name: f.load(params) for f in self.fields}

    def dump(self, params: Any) -> dict[str, Any]:
        """Validate ``params`` and return the wire form, in declaration order."""
        values = self.load(params)
        out: dict[str, Any] = {}
        for f in self.fields:
            value = values[f.name]
            if not f.should_emit(value):
                continue
            if f.kind is FieldKind.NESTED and f.struct is not None:
                value = f.struct.dump(value)
            out[f.name] = value
        return out


@dataclass(frozen=True)
class Operation:
    """A named operation, possibly available only with a feature enabled."""

    name: str
    struct: Struct
    feature: Feature | None = None


@dataclass(frozen=True)
class Service:
    """A service and the operations it offers."""

    name: str
    operations: tuple[Operation, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for op in self.operations:
            if op.name in seen:
                raise SchemaError(
                    f"duplicate operation `{op.name}` in service `{self.name}`"
                )
            seen.add(op.name)

    def operation(self, name: str, features: Iterable[Feature] = ()) -> Operation:
        """Find an operation that is available with the given features."""
        enabled = frozenset(features)
        available = [
            op
            for op in self.operations
            if op.feature is None or op.feature in enabled
        ]
        for op in available:
            if op.name == name:
                return op
        expected = ", ".join(f"`{op.name}`" for op in available)
        raise SchemaError(f"unknown variant `{name}`, expected one of {expected}")

    def load(
        self, op: str, params: Any, features: Iterable[Feature] = ()
    ) -> dict[str, Any]:
        """Validate the parameters of operation ``op``."""
        return self.operation(op, features).struct.load(params)

    def dump(self, op: str, params: Any) -> dict[str, Any]:
        """Return the wire form of the parameters of operation ``op``."""
        return self.operation(op, Feature).struct.dump(params)


def required(name: str, type_: ValueType = ValueType.STRING) -> Field:
    """A field that must be present."""
    return Field(name, FieldKind.REQUIRED, type_)


def optional(
    name: str, type_: ValueType = ValueType.STRING, keep_null: bool = False
) -> Field:
    """A field that may be absent or null."""
    return Field(name, FieldKind.OPTIONAL, type_, keep_null=keep_null)


def flag(name: str) -> Field:
    """A boolean field that defaults to false."""
    return Field(name, FieldKind.FLAG, ValueType.BOOL)


def many(name: str, type_: ValueType = ValueType.STRING) -> Field:
    """A list field that defaults to empty."""
    return Field(name, FieldKind.MANY, type_)


def nested(name: str, struct: Struct) -> Field:
    """A required field holding a structure of its own."""
    return Field(name, FieldKind.NESTED, ValueType.JSON, struct=struct)