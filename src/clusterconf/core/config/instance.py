"""Config instances: per-entity value state over a finalized schema.

Instances are created with the asynchronous ``Config.create()`` because
initial values may come from asynchronous generators (secrets, IDs).
``get()`` and ``set()`` are synchronous and perform no locking; a single
instance shared between concurrent writers needs external serialization.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional, Tuple
import copy

from clusterconf.core.utils.logger import (
    log_configuration_change,
    log_debug,
    log_warning,
)

from .coercion import coerce
from .definition import FieldDefinition
from .errors import ConstructionError, InvalidField, InvalidValue, SchemaError
from .registry import flatten
from .schema import ConfigSchema
from .validation import validate, validate_values


class Config:
    """Current values for every field of a finalized ``ConfigSchema``."""

    def __init__(self, schema: ConfigSchema, values: Dict[str, Any]):
        """Wrap already-resolved values. Use ``Config.create()`` instead."""
        self._schema = schema
        self._values = values

    @classmethod
    async def create(
        cls,
        schema: ConfigSchema,
        data: Optional[Mapping[str, Any]] = None,
    ) -> "Config":
        """Construct an instance, resolving every initial value.

        Args:
            schema: A finalized schema.
            data: Optional serialized document to apply on top of the
                defaults. Fields present in it skip default generation.

        Raises:
            SchemaError: if the schema has not been finalized.
            ConstructionError: if any initial value could not be produced.
            InvalidValue: if ``data`` holds an invalid value.
        """
        if not schema.locked:
            raise SchemaError(
                f"{schema.name} config must be finalized before instances are created"
            )
        provided = flatten(dict(data)) if data else {}

        values: Dict[str, Any] = {}
        failures: Dict[str, BaseException] = {}
        for definition in schema.iter_definitions():
            full_name = definition.full_name
            if full_name in provided:
                values[full_name] = None
                continue
            try:
                value = await definition.initial_value.resolve()
            except Exception as exc:
                failures[full_name] = exc
                continue
            errors = validate(value, definition)
            if errors:
                failures[full_name] = InvalidValue(full_name, errors, value)
                continue
            if definition.has_generator:
                log_debug("config", f"Generated initial value for '{full_name}'")
            values[full_name] = value

        if failures:
            raise ConstructionError(failures)

        config = cls(schema, values)
        if provided:
            config._apply(provided)
        return config

    @property
    def schema(self) -> ConfigSchema:
        return self._schema

    def _definition(self, full_name: str) -> FieldDefinition:
        definition = self._schema.find(full_name)
        if definition is None:
            raise InvalidField(full_name)
        return definition

    def _checked(self, definition: FieldDefinition, raw: Any) -> Any:
        value = coerce(raw, definition)
        errors = validate(value, definition)
        if errors:
            raise InvalidValue(definition.full_name, errors, raw)
        return copy.deepcopy(value)

    def get(self, full_name: str) -> Any:
        """Return the current value of a field.

        Raises:
            InvalidField: if the name does not resolve to a definition.
        """
        self._definition(full_name)
        return self._values[full_name]

    def set(self, full_name: str, value: Any) -> None:
        """Validate and assign a value. Nothing changes on failure.

        Raises:
            InvalidField: if the name does not resolve to a definition.
            InvalidValue: if the value fails validation.
        """
        definition = self._definition(full_name)
        checked = self._checked(definition, value)
        old_value = self._values[full_name]
        self._values[full_name] = checked
        if old_value != checked:
            log_configuration_change(full_name, old_value, checked)

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Yield ``(full_name, value)`` pairs in schema order."""
        for definition in self._schema.iter_definitions():
            yield definition.full_name, self._values[definition.full_name]

    def serialize(self) -> Dict[str, Dict[str, Any]]:
        """Return a JSON-safe ``{group: {field: value}}`` document.

        Groups and fields appear in registration order, and every group is
        present even when it has no fields.
        """
        document: Dict[str, Dict[str, Any]] = {}
        for group_name, group in self._schema.groups.items():
            document[group_name] = {
                definition.name: copy.deepcopy(self._values[definition.full_name])
                for definition in group
            }
        return document

    def deserialize(self, data: Mapping[str, Any]) -> None:
        """Apply a serialized document on top of the current values.

        Unknown groups and fields are logged and skipped. Stored values are
        validated as they are, without the string coercion ``set()`` applies
        to user input, so ``serialize()`` output always restores unchanged.
        If any value is invalid nothing is applied.

        Raises:
            InvalidValue: for the first invalid value found.
        """
        self._apply(flatten(dict(data)))

    def _apply(self, dotmap: Dict[str, Any]) -> None:
        known: Dict[str, Any] = {}
        for full_name, value in dotmap.items():
            if self._schema.find(full_name) is None:
                log_warning(
                    "config",
                    f"Ignoring unknown field '{full_name}' in {self._schema.name} config",
                )
                continue
            known[full_name] = value
        errors = validate_values(self._schema, known)
        if errors:
            full_name, field_errors = next(iter(errors.items()))
            raise InvalidValue(full_name, field_errors, known[full_name])
        self._values.update(
            (full_name, copy.deepcopy(value)) for full_name, value in known.items()
        )

    def __contains__(self, full_name: object) -> bool:
        return isinstance(full_name, str) and self._schema.find(full_name) is not None

    def __repr__(self) -> str:
        return f"Config({self._schema.name!r}, fields={len(self._values)})"
