"""Validation utilities for configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, TYPE_CHECKING
import json
import math

from .definition import FieldDefinition, FieldType

if TYPE_CHECKING:
    from .schema import ConfigSchema


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


def _is_json_safe(value: Any) -> bool:
    try:
        json.dumps(value, allow_nan=False)
    except (TypeError, ValueError):
        return False
    return True


def _is_valid_type(value: Any, expected_type: FieldType) -> bool:
    if expected_type is FieldType.STRING:
        return isinstance(value, str)
    if expected_type is FieldType.NUMBER:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        try:
            return math.isfinite(value)
        except OverflowError:
            return False
    if expected_type is FieldType.BOOLEAN:
        return isinstance(value, bool)
    if expected_type is FieldType.OBJECT:
        return _is_json_safe(value)
    return False


def _type_label(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def validate(value: Any, definition: FieldDefinition) -> List[ValidationError]:
    errors: List[ValidationError] = []

    if value is None:
        if not definition.optional:
            errors.append(
                ValidationError(
                    definition.full_name,
                    f"Expected {definition.type.value}, got null (field is not optional).",
                )
            )
        return errors

    if not _is_valid_type(value, definition.type):
        if definition.type is FieldType.OBJECT:
            message = "Expected a JSON-serializable value."
        elif definition.type is FieldType.NUMBER and isinstance(value, str):
            message = f"Expected number, got non-numeric string {value!r}."
        elif (
            definition.type is FieldType.NUMBER
            and isinstance(value, (int, float))
            and not isinstance(value, bool)
        ):
            message = "Expected a finite number."
        else:
            message = f"Expected {definition.type.value}, got {_type_label(value)}."
        errors.append(ValidationError(definition.full_name, message))
    return errors


def validate_values(
    schema: "ConfigSchema", dotmap: Dict[str, Any]
) -> Dict[str, List[ValidationError]]:
    """Validate a dotpath value map and return errors keyed by dotpath.

    Keys that are not registered in the schema are skipped.
    """
    errors: Dict[str, List[ValidationError]] = {}
    for key, value in dotmap.items():
        definition = schema.find(key)
        if definition is None:
            continue
        field_errors = validate(value, definition)
        if field_errors:
            errors[key] = field_errors
    return errors
