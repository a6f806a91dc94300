"""
Config commands for the clusterconf CLI.

Provides ``list``, ``show`` and ``set`` over the master, slave or instance
config. ``set`` persists the whole serialized document after a successful
change and leaves the stored file untouched when validation fails.
"""

import asyncio
import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Tuple

import typer
from rich.console import Console

from ..core.config import (
    Config,
    InvalidField,
    InvalidValue,
    build_schemas,
    get_default_config_path,
    load_or_create,
    load_plugin_infos,
    save_config,
)
from ..core.utils.logger import get_logger
from .exit_codes import CliExit

logger = get_logger()
console = Console()
err_console = Console(stderr=True)

config_app = typer.Typer(
    name="config",
    help="List, show and set configuration fields",
    no_args_is_help=True,
)


class ConfigKind(str, Enum):
    MASTER = "master"
    SLAVE = "slave"
    INSTANCE = "instance"


@dataclass
class ConfigTarget:
    kind: ConfigKind
    path: Optional[Path] = None
    plugins: List[str] = field(default_factory=list)

    @property
    def resolved_path(self) -> Path:
        return self.path or get_default_config_path(self.kind.value)


def _print(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _print_error(text: str) -> None:
    err_console.print(text, style="red", markup=False, highlight=False, soft_wrap=True)


def _load(ctx: typer.Context) -> Tuple[Config, Path]:
    target: ConfigTarget = ctx.obj
    schemas = build_schemas(load_plugin_infos(target.plugins))
    schema = schemas.for_kind(target.kind.value)
    path = target.resolved_path
    config = asyncio.run(load_or_create(schema, path))
    return config, path


def _dump(value: Any) -> str:
    return json.dumps(value)


@config_app.callback()
def config_callback(
    ctx: typer.Context,
    kind: ConfigKind = typer.Option(
        ConfigKind.MASTER, "--kind", "-k", help="Which config to operate on"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to the config file"
    ),
    plugins: Optional[List[str]] = typer.Option(
        None, "--plugin", "-p", help="Plugin module providing a plugin_info (repeatable)"
    ),
):
    """Select the config the subcommands operate on."""
    ctx.obj = ConfigTarget(kind=kind, path=config_path, plugins=list(plugins or []))


@config_app.command("list")
def list_fields(ctx: typer.Context):
    """List all configuration fields and their values."""
    config, _ = _load(ctx)
    for full_name, value in config.items():
        _print(f"{full_name} {_dump(value)}")


@config_app.command("show")
def show_field(
    ctx: typer.Context,
    field_name: str = typer.Argument(..., metavar="FIELD", help="Fully-qualified field name"),
):
    """Show value of the given config field."""
    config, _ = _load(ctx)
    try:
        value = config.get(field_name)
    except InvalidField as e:
        _print_error(str(e))
        raise CliExit.config_error()
    _print(_dump(value))


@config_app.command("set")
def set_field(
    ctx: typer.Context,
    field_name: str = typer.Argument(..., metavar="FIELD", help="Fully-qualified field name"),
    value: Optional[str] = typer.Argument(
        None, help="New value; omit to set the field to null"
    ),
):
    """Set config field."""
    config, path = _load(ctx)
    try:
        config.set(field_name, value)
    except (InvalidField, InvalidValue) as e:
        _print_error(str(e))
        raise CliExit.config_error()
    save_config(config, path)
    logger.debug(f"Saved {ctx.obj.kind.value} config to {path}")
