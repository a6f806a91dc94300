"""Configuration schema, registry and value engine."""

from .definition import (
    FieldDefinition,
    FieldType,
    GeneratorDefault,
    LiteralDefault,
)
from .definitions import (
    ConfigSchemas,
    build_schemas,
    create_instance_schema,
    create_master_schema,
    create_slave_schema,
    finalize_configs,
    register_plugin_config_groups,
)
from .errors import (
    ConfigError,
    ConstructionError,
    InvalidField,
    InvalidValue,
    SchemaError,
)
from .group import ConfigGroup, PluginConfigGroup, is_plugin_config_group
from .instance import Config
from .persistence import (
    CONFIG_SCHEMA_VERSION,
    get_default_config_path,
    load_config_safe,
    load_or_create,
    save_config,
    save_config_atomic,
)
from .plugins import PluginInfo, load_plugin_infos, plugin_info_from_mapping
from .registry import flatten
from .schema import ConfigSchema
from .validation import ValidationError, validate, validate_values

__all__ = [
    "CONFIG_SCHEMA_VERSION",
    "Config",
    "ConfigError",
    "ConfigGroup",
    "ConfigSchema",
    "ConfigSchemas",
    "ConstructionError",
    "FieldDefinition",
    "FieldType",
    "GeneratorDefault",
    "InvalidField",
    "InvalidValue",
    "LiteralDefault",
    "PluginConfigGroup",
    "PluginInfo",
    "SchemaError",
    "ValidationError",
    "build_schemas",
    "create_instance_schema",
    "create_master_schema",
    "create_slave_schema",
    "finalize_configs",
    "flatten",
    "get_default_config_path",
    "is_plugin_config_group",
    "load_config_safe",
    "load_or_create",
    "load_plugin_infos",
    "plugin_info_from_mapping",
    "register_plugin_config_groups",
    "save_config",
    "save_config_atomic",
    "validate",
    "validate_values",
]
