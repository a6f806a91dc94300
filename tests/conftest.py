"""
Shared pytest fixtures and configuration for clusterconf tests.

This module provides common fixtures used across the test suite, including
open and finalized groups, a small finalized schema covering every field
type, and sample plugin descriptors.
"""

import sys
from pathlib import Path

import pytest

# Put `src/` first so `import clusterconf` uses workspace code.
_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from clusterconf.core.config import (  # noqa: E402
    ConfigGroup,
    ConfigSchema,
    PluginConfigGroup,
    PluginInfo,
)
from clusterconf.core.utils.logger import reset_logging  # noqa: E402


# ============================================================================
# Schema Fixtures
# ============================================================================

async def _async_token() -> str:
    return "generated-token"


@pytest.fixture
def open_group() -> ConfigGroup:
    """An open group with a single numeric field."""
    group = ConfigGroup("test")
    group.define(name="count", type="number", initial_value=5)
    return group


@pytest.fixture
def sample_group() -> ConfigGroup:
    """A finalized group with one field of every type."""
    group = ConfigGroup("test")
    group.define(name="count", type="number", initial_value=5)
    group.define(name="label", type="string", initial_value="hello")
    group.define(name="enabled", type="boolean", initial_value=False)
    group.define(name="extra", type="object", initial_value={"tags": ["a"], "n": 1})
    group.define(name="port", type="number", optional=True)
    group.define(name="note", type="string", optional=True, initial_value="note")
    group.define(name="token", type="string", initial_value=_async_token)
    group.define(name="seed", type="number", initial_value=lambda: 42)
    group.finalize()
    return group


@pytest.fixture
def sample_schema(sample_group) -> ConfigSchema:
    """A finalized schema holding ``sample_group`` and an empty plugin group."""
    schema = ConfigSchema("sample")
    schema.register_group(sample_group)
    empty = PluginConfigGroup("inventory")
    empty.finalize()
    schema.register_group(empty)
    schema.finalize()
    return schema


# ============================================================================
# Plugin Fixtures
# ============================================================================

@pytest.fixture
def plugin_master_group() -> PluginConfigGroup:
    group = PluginConfigGroup("research")
    group.define(name="sync_interval", type="number", initial_value=10)
    group.finalize()
    return group


@pytest.fixture
def plugin_instance_group() -> PluginConfigGroup:
    group = PluginConfigGroup("research")
    group.define(name="enabled", type="boolean", initial_value=True)
    group.finalize()
    return group


@pytest.fixture
def research_plugin(plugin_master_group, plugin_instance_group) -> PluginInfo:
    return PluginInfo(
        name="research",
        master_config_group=plugin_master_group,
        instance_config_group=plugin_instance_group,
        instance_entrypoint="research.instance",
    )


# ============================================================================
# Environment
# ============================================================================

@pytest.fixture(autouse=True)
def clean_logging():
    """Give every test a freshly configured clusterconf logger."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point default config paths at a temporary directory."""
    monkeypatch.setenv("CLUSTERCONF_CONFIG_DIR", str(tmp_path))
    return tmp_path


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual functions/classes")
    config.addinivalue_line("markers", "integration: Tests that run the CLI end to end")
