"""Config schemas: the class-level group registry of a top-level config."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from clusterconf.core.utils.logger import log_debug

from .definition import FieldDefinition
from .errors import SchemaError
from .group import ConfigGroup


class ConfigSchema:
    """Ordered set of finalized groups shared by every instance of a config.

    Groups are registered while the schema is open. ``finalize()`` locks
    the group set; only a finalized schema can be used to construct
    ``Config`` instances.
    """

    def __init__(self, name: str):
        self.name = name
        self._groups: Dict[str, ConfigGroup] = {}
        self._locked = False

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def groups(self) -> Mapping[str, ConfigGroup]:
        return MappingProxyType(self._groups)

    def register_group(self, group: ConfigGroup) -> None:
        """Attach a finalized group under its group name.

        Raises:
            SchemaError: if this schema is locked, a group with the same
                name is registered, or the group is still open.
        """
        if self._locked:
            raise SchemaError(
                f"Cannot register group '{group.group_name}' on locked "
                f"{self.name} config"
            )
        if not group.locked:
            raise SchemaError(
                f"Group '{group.group_name}' must be finalized before it is "
                f"registered"
            )
        if group.group_name in self._groups:
            raise SchemaError(
                f"Group '{group.group_name}' is already registered on "
                f"{self.name} config"
            )
        self._groups[group.group_name] = group
        log_debug("config", f"Registered group '{group.group_name}' on {self.name} config")

    def finalize(self) -> None:
        """Lock the group set. Calling this more than once is a no-op."""
        if self._locked:
            return
        self._locked = True
        log_debug(
            "config",
            f"Finalized {self.name} config",
            f"groups: {', '.join(self._groups) or '(none)'}",
        )

    def find(self, full_name: str) -> Optional[FieldDefinition]:
        """Resolve a fully-qualified name, or return None."""
        if not isinstance(full_name, str):
            return None
        group_name, sep, field_name = full_name.partition(".")
        if not sep:
            return None
        group = self._groups.get(group_name)
        if group is None:
            return None
        return group.get(field_name)

    def iter_definitions(self) -> Iterator[FieldDefinition]:
        """Yield every definition in group then field order."""
        for group in self._groups.values():
            yield from group

    def __contains__(self, group_name: object) -> bool:
        return group_name in self._groups

    def __repr__(self) -> str:
        state = "locked" if self._locked else "open"
        return f"ConfigSchema({self.name!r}, groups={list(self._groups)}, {state})"
