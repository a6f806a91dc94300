import pytest

from clusterconf.core.config.errors import SchemaError
from clusterconf.core.config.group import ConfigGroup
from clusterconf.core.config.schema import ConfigSchema


def _finalized(name: str) -> ConfigGroup:
    group = ConfigGroup(name)
    group.define(name="value", type="number", initial_value=1)
    group.finalize()
    return group


def test_register_group_keeps_order():
    schema = ConfigSchema("test")
    schema.register_group(_finalized("b"))
    schema.register_group(_finalized("a"))
    assert list(schema.groups) == ["b", "a"]
    assert [d.full_name for d in schema.iter_definitions()] == ["b.value", "a.value"]


def test_register_requires_finalized_group(open_group):
    schema = ConfigSchema("test")
    with pytest.raises(SchemaError, match="finalized"):
        schema.register_group(open_group)
    assert "test" not in schema


def test_register_rejects_duplicate_group():
    schema = ConfigSchema("test")
    schema.register_group(_finalized("a"))
    with pytest.raises(SchemaError, match="already registered"):
        schema.register_group(_finalized("a"))


def test_register_after_finalize_fails():
    schema = ConfigSchema("test")
    schema.finalize()
    schema.finalize()
    with pytest.raises(SchemaError, match="locked"):
        schema.register_group(_finalized("a"))
    assert dict(schema.groups) == {}


@pytest.mark.parametrize("name", ["test.count", "test.label"])
def test_find_resolves_full_names(sample_schema, name):
    assert sample_schema.find(name).full_name == name


@pytest.mark.parametrize("name", ["test", "test.missing", "nope.count", "", None, "inventory.anything"])
def test_find_returns_none_for_unknown_names(sample_schema, name):
    assert sample_schema.find(name) is None
