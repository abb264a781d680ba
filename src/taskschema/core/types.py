"""The closed set of parameter types.

Each :class:`ParamType` member bundles three things:

* a lowercase type name, whose uppercase form is the value placeholder
  shown in usage lines (``<STRING>``, ``<INT>`` ...);
* a parse rule turning one raw command-line token into a typed value;
* a validate predicate used to type-check default values when a task
  schema is built.

Every function in this module is pure.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from enum import Enum
from typing import Any

from taskschema.exceptions import InvalidArgumentValueError

_DECIMAL_INT = re.compile(r"^\d+(?:[eE]\d+)?$")
_DECIMAL_FLOAT = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)(?:[eE]\d+)?$")
_HEX = re.compile(r"^0[xX][0-9a-fA-F]+$")


# ---------------------------------------------------------------------------
# Parse rules
# ---------------------------------------------------------------------------

def _parse_string(param_name: str, raw: str) -> str:
    return raw


def _parse_boolean(param_name: str, raw: str) -> bool:
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise InvalidArgumentValueError(raw, param_name, "boolean")


def _parse_int(param_name: str, raw: str) -> int:
    """Parse a decimal or hex integer of arbitrary size.

    Decimal input may carry a non-negative exponent (``1e18``), which is
    expanded exactly rather than through a float.
    """
    if _HEX.match(raw):
        return int(raw, 16)
    if not _DECIMAL_INT.match(raw):
        raise InvalidArgumentValueError(raw, param_name, "int")
    mantissa, _, exponent = raw.lower().partition("e")
    return int(mantissa) * 10 ** int(exponent or "0")


def _parse_float(param_name: str, raw: str) -> float:
    if _HEX.match(raw):
        return float(int(raw, 16))
    if not _DECIMAL_FLOAT.match(raw):
        raise InvalidArgumentValueError(raw, param_name, "float")
    return float(raw)


def _parse_json(param_name: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise InvalidArgumentValueError(raw, param_name, "json") from exc


# ---------------------------------------------------------------------------
# Validate predicates
# ---------------------------------------------------------------------------

def _is_string(value: object) -> bool:
    return isinstance(value, str)


def _is_boolean(value: object) -> bool:
    return isinstance(value, bool)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_float(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_json(value: object) -> bool:
    return True


# ---------------------------------------------------------------------------
# Public enum
# ---------------------------------------------------------------------------

class ParamType(Enum):
    """Supported parameter types."""

    STRING = ("string", _parse_string, _is_string)
    BOOLEAN = ("boolean", _parse_boolean, _is_boolean)
    INT = ("int", _parse_int, _is_int)
    FLOAT = ("float", _parse_float, _is_float)
    JSON = ("json", _parse_json, _is_json)

    def __init__(
        self,
        type_name: str,
        parser: Callable[[str, str], Any],
        validator: Callable[[object], bool],
    ) -> None:
        self.type_name: str = type_name
        self._parser = parser
        self._validator = validator

    @property
    def display_name(self) -> str:
        """Uppercase token used as a value placeholder (e.g. ``STRING``)."""
        return self.type_name.upper()

    def parse(self, param_name: str, raw: str) -> Any:
        """Convert *raw* to this type or raise :class:`InvalidArgumentValueError`."""
        return self._parser(param_name, raw)

    def validate(self, value: object) -> bool:
        """Return whether *value* is an acceptable value of this type."""
        return self._validator(value)
