"""Exceptions raised by the configuration engine.

Three kinds of failure are distinguished:

- ``InvalidField``: a fully-qualified name that does not resolve to a
  registered definition. Recoverable at the call site.
- ``InvalidValue``: the field exists but the value fails type or
  optionality validation. Recoverable; the failed ``set()`` leaves the
  instance untouched.
- ``SchemaError``: a schema-contract violation (duplicate names, late
  registration, a misnamed plugin group). These indicate a packaging
  defect and are meant to abort start-up.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import ValidationError


class ConfigError(Exception):
    """Base class for all configuration engine errors."""


class InvalidField(ConfigError, KeyError):
    """Raised when a fully-qualified name has no registered definition."""

    def __init__(self, full_name: str, message: Optional[str] = None):
        self.full_name = full_name
        self.message = message or f"No field named '{full_name}'"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return self.message


class InvalidValue(ConfigError, ValueError):
    """Raised when a value fails validation for an existing field."""

    def __init__(
        self,
        full_name: str,
        errors: Optional[List["ValidationError"]] = None,
        value: Any = None,
    ):
        self.full_name = full_name
        self.errors = list(errors or [])
        self.value = value
        details = "; ".join(error.message for error in self.errors)
        self.message = f"Invalid value for '{full_name}'"
        if details:
            self.message += f": {details}"
        super().__init__(self.message)


class SchemaError(ConfigError):
    """Raised on schema-contract violations during start-up."""


class ConstructionError(ConfigError):
    """Raised when one or more initial values could not be produced."""

    def __init__(self, failures: Dict[str, BaseException]):
        self.failures = dict(failures)
        names = ", ".join(self.failures)
        super().__init__(f"Failed to generate initial values for: {names}")
