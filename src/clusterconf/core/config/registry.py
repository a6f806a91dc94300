"""Dot-path helpers shared by serialization and persistence."""

from __future__ import annotations

from typing import Any, Dict


def flatten(nested: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    """Flatten a ``{group: {field: value}}`` document to a dotpath map.

    Only the first level is expanded: object-typed values are themselves
    dicts and must stay intact.
    """
    items: Dict[str, Any] = {}
    for group_name, fields in nested.items():
        if not isinstance(fields, dict):
            items[group_name] = fields
            continue
        for field_name, value in fields.items():
            items[f"{group_name}.{field_name}"] = value
    return items

