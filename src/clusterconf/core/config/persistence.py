"""Config file persistence utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

from clusterconf.core.utils.logger import log_file_operation

from .instance import Config
from .schema import ConfigSchema

CONFIG_SCHEMA_VERSION = 1
CONFIG_DIR_ENV = "CLUSTERCONF_CONFIG_DIR"
CONFIG_KINDS = ("master", "slave", "instance")


def _wrap_config(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    return {"schema_version": CONFIG_SCHEMA_VERSION, "config": config_dict}


def _unwrap_config(payload: Dict[str, Any]) -> Dict[str, Any]:
    if "config" in payload and isinstance(payload["config"], dict):
        return payload["config"]
    return payload


def get_config_dir() -> Path:
    return Path(os.getenv(CONFIG_DIR_ENV) or Path.cwd())


def get_default_config_path(kind: str) -> Path:
    if kind not in CONFIG_KINDS:
        raise ValueError(f"Unknown config kind '{kind}'")
    return get_config_dir() / f"config-{kind}.json"


def save_config_atomic(config_dict: Dict[str, Any], target_path: Path) -> None:
    target_path = Path(target_path)
    target_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = target_path.with_suffix(target_path.suffix + ".tmp")
    payload = _wrap_config(config_dict)
    try:
        temp_path.write_text(json.dumps(payload, indent=4), encoding="utf-8")
        temp_path.replace(target_path)
    except OSError as exc:
        log_file_operation("write", str(target_path), False, str(exc))
        raise
    log_file_operation("write", str(target_path), True)


def load_config_safe(config_path: Path) -> Optional[Dict[str, Any]]:
    config_path = Path(config_path)
    if not config_path.exists():
        return None
    payload = json.loads(config_path.read_text(encoding="utf-8"))
    log_file_operation("read", str(config_path), True)
    return _unwrap_config(payload) if isinstance(payload, dict) else None


def save_config(config: Config, target_path: Path) -> None:
    """Persist the whole serialized document of ``config``."""
    save_config_atomic(config.serialize(), target_path)


async def load_or_create(schema: ConfigSchema, config_path: Path) -> Config:
    """Build an instance, applying the stored document when one exists."""
    return await Config.create(schema, load_config_safe(config_path))

