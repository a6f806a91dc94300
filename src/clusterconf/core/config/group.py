"""Config groups: named, ordered collections of field definitions.

A group starts open and accepts ``define()`` calls. ``finalize()`` locks
it for the rest of the process; after that its definitions are read-only
and may be registered into a ``ConfigSchema``.

Usage:
    group = ConfigGroup("master")
    group.define({"name": "http_port", "type": "number", "optional": True})
    group.finalize()
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, ClassVar, Dict, Iterator, Mapping, Optional

from clusterconf.core.utils.logger import log_debug

from .definition import FieldDefinition, LiteralDefault, check_name, make_definition
from .errors import SchemaError
from .validation import validate


class ConfigGroup:
    """A named group of field definitions with an open/locked lifecycle."""

    plugin_extensible: ClassVar[bool] = False

    def __init__(self, group_name: str):
        self._group_name = check_name(group_name, "Group")
        self._definitions: Dict[str, FieldDefinition] = {}
        self._locked = False

    @property
    def group_name(self) -> str:
        return self._group_name

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def definitions(self) -> Mapping[str, FieldDefinition]:
        """Read-only ordered view of name -> definition."""
        return MappingProxyType(self._definitions)

    def define(
        self, literal: Optional[Mapping[str, Any]] = None, **fields: Any
    ) -> FieldDefinition:
        """Add a field definition to this group.

        Accepts a field definition literal as a mapping, keyword
        arguments, or both (keywords win).

        Raises:
            SchemaError: if the group is locked, the name is already
                defined, or the definition itself is malformed.
        """
        merged: Dict[str, Any] = {**(literal or {}), **fields}
        if self._locked:
            raise SchemaError(
                f"Cannot define '{merged.get('name')}' on locked group "
                f"'{self._group_name}'"
            )
        definition = make_definition(merged, self._group_name)
        if definition.name in self._definitions:
            raise SchemaError(
                f"Field '{definition.full_name}' is already defined"
            )
        if isinstance(definition.initial_value, LiteralDefault):
            errors = validate(definition.initial_value.value, definition)
            if errors:
                raise SchemaError(
                    f"Initial value for '{definition.full_name}' is invalid: "
                    + "; ".join(error.message for error in errors)
                )
        self._definitions[definition.name] = definition
        return definition

    def finalize(self) -> None:
        """Lock the group. Calling this more than once is a no-op."""
        if self._locked:
            return
        self._locked = True
        log_debug(
            "config",
            f"Finalized group '{self._group_name}'",
            f"{len(self._definitions)} field(s)",
        )

    def get(self, name: str) -> Optional[FieldDefinition]:
        return self._definitions.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        state = "locked" if self._locked else "open"
        return (
            f"{type(self).__name__}({self._group_name!r}, "
            f"fields={len(self._definitions)}, {state})"
        )


class PluginConfigGroup(ConfigGroup):
    """Group type plugins use to contribute their own namespace.

    Its group name must equal the name of the plugin that supplies it.
    """

    plugin_extensible: ClassVar[bool] = True


def is_plugin_config_group(obj: Any) -> bool:
    """Check the plugin-extensible capability marker."""
    return getattr(obj, "plugin_extensible", False) is True
