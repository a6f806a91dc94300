"""Core definitions for the master, slave and instance configs.

Start-up order:

1. ``create_*_schema()`` builds each schema with its base groups.
2. ``register_plugin_config_groups()`` adds one namespace per plugin.
3. ``finalize_configs()`` locks the schemas; instances can now be built.

``build_schemas()`` runs the whole sequence and is what entry points use.
"""

from __future__ import annotations

import asyncio
import base64
import random
import secrets
from typing import Any, Iterable, NamedTuple, Optional

from clusterconf.core.utils.logger import log_info

from .errors import SchemaError
from .group import ConfigGroup, PluginConfigGroup, is_plugin_config_group
from .plugins import PluginInfo, as_plugin_info
from .schema import ConfigSchema


async def generate_auth_secret() -> str:
    log_info("config", "Generating new master authentication secret")
    data = await asyncio.to_thread(secrets.token_bytes, 256)
    return base64.b64encode(data).decode("ascii")


def generate_id() -> int:
    return random.getrandbits(31)


def _master_group() -> ConfigGroup:
    group = ConfigGroup("master")
    group.define(
        name="database_directory",
        title="Database directory",
        description="Directory where item and configuration data is stored.",
        type="string",
        initial_value="database",
    )
    group.define(
        name="factorio_directory",
        description="Path to directory to look for factorio installs",
        type="string",
        initial_value="factorio",
    )
    group.define(
        name="http_port",
        title="HTTP Port",
        description="Port to listen for HTTP connections on, set to null to not listen for HTTP connections.",
        type="number",
        optional=True,
    )
    group.define(
        name="https_port",
        title="HTTPS Port",
        description="Port to listen for HTTPS connection on, set to null to not listen for HTTPS connections.",
        type="number",
        optional=True,
        initial_value=8443,
    )
    group.define(
        name="web_root",
        title="Web Root",
        description="Sub-path to where the web interface is hosted.  Needed when proxying the web interface.",
        type="string",
        initial_value="/",
    )
    group.define(
        name="tls_certificate",
        title="TLS Certificate",
        description="Path to the certificate to use for HTTPS.",
        type="string",
        optional=True,
        initial_value="database/certificates/cert.crt",
    )
    group.define(
        name="tls_private_key",
        title="TLS Private Key",
        description="Path to the private key to use for HTTPS.",
        type="string",
        optional=True,
        initial_value="database/certificates/cert.key",
    )
    group.define(
        name="tls_bits",
        title="TLS Bits",
        description="Number of bits to use for auto generated TLS certificate.",
        type="number",
        initial_value=2048,
    )
    group.define(
        name="auth_secret",
        title="Master Authentication Secret",
        description=(
            "Secret used to generate and verify authentication tokens."
            "  Should be a long string of random letters and numbers."
            "  Do not share this."
        ),
        type="string",
        initial_value=generate_auth_secret,
    )
    group.define(
        name="heartbeat_interval",
        title="Heartbeat Interval",
        description="Interval heartbeats are sent out on WebSocket connections",
        type="number",
        initial_value=60,
    )
    group.define(
        name="connector_shutdown_timeout",
        title="Connector Shutdown Timeout",
        description="Timeout in seconds for connectors to properly disconnect on shutdown",
        type="number",
        initial_value=30,
    )
    group.finalize()
    return group


def _slave_group() -> ConfigGroup:
    group = ConfigGroup("slave")
    group.define(name="name", description="Name of the slave", type="string", initial_value="New Slave")
    group.define(name="id", description="ID of the slave", type="number", initial_value=generate_id)
    group.define(
        name="factorio_directory",
        description="Path to directory to look for factorio installs",
        type="string",
        initial_value="factorio",
    )
    group.define(
        name="instances_directory",
        description="Path to directory to store instances in.",
        type="string",
        initial_value="instances",
    )
    group.define(
        name="master_url",
        description="URL to connect to the master server at",
        type="string",
        initial_value="https://localhost:8443/",
    )
    group.define(
        name="master_token",
        description="Token to authenticate to master server with.",
        type="string",
        initial_value="enter token here",
    )
    group.define(
        name="public_address",
        description="Public facing address players should connect to in order to join instances on this slave",
        type="string",
        initial_value="localhost",
    )
    group.define(
        name="reconnect_delay",
        title="Reconnect Delay",
        description="Maximum delay to wait before attempting to reconnect WebSocket",
        type="number",
        initial_value=5,
    )
    group.finalize()
    return group


def _instance_group() -> ConfigGroup:
    group = ConfigGroup("instance")
    group.define(name="name", type="string", initial_value="New Instance")
    group.define(name="id", description="ID of the instance", type="number", initial_value=generate_id)
    group.define(name="assigned_slave", type="number", optional=True)
    group.finalize()
    return group


def _factorio_group() -> ConfigGroup:
    group = ConfigGroup("factorio")
    group.define(
        name="version",
        description="Version of the game to run, use latest to run the latest installed version",
        type="string",
        initial_value="latest",
    )
    group.define(
        name="game_port",
        description="UDP port to run game on, uses a random port if null",
        type="number",
        optional=True,
    )
    group.define(
        name="rcon_port",
        description="TCP port to run RCON on, uses a random port if null",
        type="number",
        optional=True,
    )
    group.define(
        name="rcon_password",
        description="Password for RCON, randomly generated if null",
        type="string",
        optional=True,
    )
    group.define(
        name="settings",
        description="Settings overridden in server-settings.json",
        type="object",
        initial_value={"tags": ["clusterio"], "auto_pause": False},
    )
    group.finalize()
    return group


def create_master_schema() -> ConfigSchema:
    schema = ConfigSchema("master")
    schema.register_group(_master_group())
    return schema


def create_slave_schema() -> ConfigSchema:
    schema = ConfigSchema("slave")
    schema.register_group(_slave_group())
    return schema


def create_instance_schema() -> ConfigSchema:
    schema = ConfigSchema("instance")
    schema.register_group(_instance_group())
    schema.register_group(_factorio_group())
    return schema


def _validate_group(plugin: PluginInfo, attribute: str, group: Any) -> None:
    if not is_plugin_config_group(group):
        raise SchemaError(
            f"Expected {attribute} for {plugin.name} to be a PluginConfigGroup"
        )
    if group.group_name != plugin.name:
        raise SchemaError(
            f"Expected {attribute} for {plugin.name} to be named after the plugin"
        )
    if not group.locked:
        raise SchemaError(
            f"Expected {attribute} for {plugin.name} to be finalized"
        )


def _empty_plugin_group(name: str) -> PluginConfigGroup:
    group = PluginConfigGroup(name)
    group.finalize()
    return group


def register_plugin_config_groups(
    plugin_infos: Iterable[Any],
    master: ConfigSchema,
    instance: ConfigSchema,
) -> None:
    """Register the config groups for the provided plugin descriptors.

    Every plugin gets exactly one namespace on the master config, and one
    on the instance config when it has an instance entrypoint. Plugins
    without a group of their own get an empty one named after them.

    Raises:
        SchemaError: for a group that is not plugin-extensible, not named
            after its plugin, or not finalized, and for registration on a
            finalized schema.
    """
    for raw_info in plugin_infos:
        plugin = as_plugin_info(raw_info)

        # Check everything this plugin supplies before attaching anything.
        if plugin.master_config_group is not None:
            _validate_group(plugin, "MasterConfigGroup", plugin.master_config_group)
        if plugin.instance_entrypoint and plugin.instance_config_group is not None:
            _validate_group(plugin, "InstanceConfigGroup", plugin.instance_config_group)

        if plugin.master_config_group is not None:
            master.register_group(plugin.master_config_group)
        else:
            master.register_group(_empty_plugin_group(plugin.name))
            log_info("config", f"Created empty master config group for plugin '{plugin.name}'")

        if plugin.instance_entrypoint:
            if plugin.instance_config_group is not None:
                instance.register_group(plugin.instance_config_group)
            else:
                instance.register_group(_empty_plugin_group(plugin.name))
                log_info("config", f"Created empty instance config group for plugin '{plugin.name}'")


def finalize_configs(*schemas: ConfigSchema) -> None:
    """Lock schemas from adding more groups and make them usable."""
    for schema in schemas:
        schema.finalize()


class ConfigSchemas(NamedTuple):
    master: ConfigSchema
    slave: ConfigSchema
    instance: ConfigSchema

    def for_kind(self, kind: str) -> ConfigSchema:
        if kind not in self._fields:
            raise ValueError(f"Unknown config kind '{kind}'")
        return getattr(self, kind)


def build_schemas(plugin_infos: Optional[Iterable[Any]] = None) -> ConfigSchemas:
    """Create, extend with plugins, and finalize all three schemas."""
    schemas = ConfigSchemas(
        master=create_master_schema(),
        slave=create_slave_schema(),
        instance=create_instance_schema(),
    )
    register_plugin_config_groups(plugin_infos or [], schemas.master, schemas.instance)
    finalize_configs(*schemas)
    return schemas
