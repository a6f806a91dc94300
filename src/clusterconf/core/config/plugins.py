"""Plugin descriptors consumed by config group registration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional
import importlib

from .errors import SchemaError
from .group import ConfigGroup

# Descriptor keys as plugins may spell them, mapped to PluginInfo fields.
_DESCRIPTOR_KEYS = {
    "name": "name",
    "master_config_group": "master_config_group",
    "MasterConfigGroup": "master_config_group",
    "instance_config_group": "instance_config_group",
    "InstanceConfigGroup": "instance_config_group",
    "instance_entrypoint": "instance_entrypoint",
    "instanceEntrypoint": "instance_entrypoint",
}


@dataclass(frozen=True)
class PluginInfo:
    """What a plugin declares about its configuration namespaces."""

    name: str
    master_config_group: Optional[ConfigGroup] = None
    instance_config_group: Optional[ConfigGroup] = None
    instance_entrypoint: Optional[str] = None


def plugin_info_from_mapping(descriptor: Mapping[str, Any]) -> PluginInfo:
    """Build a PluginInfo from a descriptor mapping.

    Keys not related to configuration (version, description, ...) are
    ignored.
    """
    kwargs = {}
    for key, value in descriptor.items():
        field_name = _DESCRIPTOR_KEYS.get(key)
        if field_name is not None:
            kwargs[field_name] = value
    if not isinstance(kwargs.get("name"), str) or not kwargs["name"]:
        raise SchemaError(f"Plugin descriptor has no name: {dict(descriptor)!r}")
    return PluginInfo(**kwargs)


def as_plugin_info(obj: Any) -> PluginInfo:
    if isinstance(obj, PluginInfo):
        return obj
    if isinstance(obj, Mapping):
        return plugin_info_from_mapping(obj)
    raise SchemaError(f"Expected a plugin descriptor, got {type(obj).__name__}")


def load_plugin_infos(module_names: Iterable[str]) -> List[PluginInfo]:
    """Import plugin modules and collect their ``plugin_info`` attribute."""
    infos: List[PluginInfo] = []
    for module_name in module_names:
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise SchemaError(f"Unable to import plugin module '{module_name}': {exc}") from exc
        if not hasattr(module, "plugin_info"):
            raise SchemaError(f"Plugin module '{module_name}' has no plugin_info")
        infos.append(as_plugin_info(module.plugin_info))
    return infos
