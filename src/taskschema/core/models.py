"""Domain models for taskschema.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They are built once by
:class:`~taskschema.core.definitions.TaskDefinitionBuilder` and read by
the arguments parser and the help printer, which never mutate them.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from taskschema.core.types import ParamType


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset.UNSET
"""Marks a parameter without a default value.

``None`` cannot play this role because it is a legitimate JSON default.
"""


# ---------------------------------------------------------------------------
# Parameter definition
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParamDefinition:
    """Schema for one named or positional task input."""

    name: str
    """lowerCamelCase identifier, unique within its owning scope."""

    type: ParamType = ParamType.STRING
    """Semantic type; drives parsing and the ``<TYPE>`` placeholder."""

    description: str | None = None
    """Human-readable help text, or ``None``."""

    default_value: Any = UNSET
    """Default used when the argument is omitted, or :data:`UNSET`."""

    is_optional: bool = False
    """Whether the argument may be omitted."""

    is_flag: bool = False
    """Boolean named parameter that takes no value token."""

    is_variadic: bool = False
    """Last positional parameter consuming all remaining tokens."""

    @property
    def has_default(self) -> bool:
        return self.default_value is not UNSET


# ---------------------------------------------------------------------------
# Task definition
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TaskDefinition:
    """A task's identity plus its full parameter schema."""

    name: str
    """Unique key in the task registry."""

    description: str | None = None
    """One-line summary shown in task listings, or ``None``."""

    is_internal: bool = False
    """Internal tasks are hidden from the default global help listing."""

    param_definitions: Mapping[str, ParamDefinition] = field(
        default_factory=lambda: MappingProxyType({}),
    )
    """Named parameters keyed by name.  Insertion order is irrelevant."""

    positional_param_definitions: tuple[ParamDefinition, ...] = ()
    """Positional parameters in declared order."""

    action: Callable[..., Any] | None = field(default=None, compare=False)
    """Callable receiving the resolved arguments as keyword arguments."""


TaskRegistry = Mapping[str, TaskDefinition]
"""Task name → definition.  Owned by the caller, read-only for consumers."""

ParamDefinitionsMap = Mapping[str, ParamDefinition]
"""Parameter name → definition (a task's named params, or the global set)."""
