"""Field definitions and their initial values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, Optional, Union
import copy
import inspect

from .errors import SchemaError

_DEFINITION_KEYS = {"name", "title", "description", "type", "optional", "initial_value"}


class FieldType(str, Enum):
    """Closed set of value types a field may hold."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"


@dataclass(frozen=True)
class LiteralDefault:
    """Initial value given as a plain literal."""

    value: Any = None

    async def resolve(self) -> Any:
        # Each instance gets its own copy of object defaults.
        return copy.deepcopy(self.value)


@dataclass(frozen=True)
class GeneratorDefault:
    """Initial value produced by calling a zero-argument function.

    The function may be synchronous or return an awaitable; both are
    resolved the same way during instance construction.
    """

    func: Callable[[], Union[Any, Awaitable[Any]]]

    async def resolve(self) -> Any:
        result = self.func()
        if inspect.isawaitable(result):
            result = await result
        return result


InitialValue = Union[LiteralDefault, GeneratorDefault]


def make_initial_value(raw: Any) -> InitialValue:
    """Wrap a raw ``initial_value`` into the tagged default union."""
    if isinstance(raw, (LiteralDefault, GeneratorDefault)):
        return raw
    if callable(raw):
        return GeneratorDefault(raw)
    return LiteralDefault(raw)


def check_name(name: Any, kind: str) -> str:
    if not isinstance(name, str) or not name:
        raise SchemaError(f"{kind} name must be a non-empty string, got {name!r}")
    if "." in name:
        raise SchemaError(f"{kind} name '{name}' must not contain '.'")
    return name


@dataclass(frozen=True)
class FieldDefinition:
    """Metadata describing one configurable value."""

    name: str
    group_name: str
    type: FieldType
    optional: bool = False
    initial_value: InitialValue = LiteralDefault(None)
    title: str = ""
    description: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.group_name}.{self.name}"

    @property
    def has_generator(self) -> bool:
        return isinstance(self.initial_value, GeneratorDefault)


def make_definition(
    literal: Mapping[str, Any], group_name: str
) -> FieldDefinition:
    """Build a FieldDefinition from a field definition literal."""
    unknown = set(literal) - _DEFINITION_KEYS
    if unknown:
        raise SchemaError(
            f"Unknown keys in definition for group '{group_name}': "
            + ", ".join(sorted(unknown))
        )
    name = check_name(literal.get("name"), "Field")

    raw_type = literal.get("type")
    try:
        field_type = FieldType(raw_type)
    except ValueError:
        allowed = ", ".join(t.value for t in FieldType)
        raise SchemaError(
            f"Field '{group_name}.{name}' has unsupported type {raw_type!r} "
            f"(expected one of: {allowed})"
        ) from None

    optional = bool(literal.get("optional", False))
    has_initial = literal.get("initial_value") is not None
    if not optional and not has_initial:
        raise SchemaError(
            f"Field '{group_name}.{name}' is not optional and has no initial value"
        )

    title: Optional[str] = literal.get("title")
    return FieldDefinition(
        name=name,
        group_name=group_name,
        type=field_type,
        optional=optional,
        initial_value=make_initial_value(literal.get("initial_value")),
        title=title if title is not None else name,
        description=literal.get("description") or "",
    )
