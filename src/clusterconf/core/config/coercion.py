"""Value coercion utilities for configuration input."""

from __future__ import annotations

import json
import math
from typing import Any

from .definition import FieldDefinition, FieldType


def _coerce_bool(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    return value


def _coerce_number(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        trimmed = value.strip()
        # int() and float() accept digit separators; "1_000" is not a number here.
        if "_" in trimmed:
            return value
        try:
            parsed = int(trimmed)
        except ValueError:
            try:
                parsed = float(trimmed)
            except ValueError:
                return value
        # Integers beyond float range, "nan" and "inf" are not usable numbers.
        try:
            if not math.isfinite(parsed):
                return value
        except OverflowError:
            return value
        return parsed
    return value


def _coerce_object(value: Any) -> Any:
    if isinstance(value, str):
        trimmed = value.strip()
        try:
            parsed = json.loads(trimmed)
        except json.JSONDecodeError:
            return value
        if isinstance(parsed, (dict, list)):
            return parsed
    return value


def coerce(raw: Any, definition: FieldDefinition) -> Any:
    """Coerce raw value to the field's type where possible."""
    if raw is None:
        return None
    target = definition.type
    if target is FieldType.BOOLEAN:
        return _coerce_bool(raw)
    if target is FieldType.NUMBER:
        return _coerce_number(raw)
    if target is FieldType.OBJECT:
        return _coerce_object(raw)
    return raw
