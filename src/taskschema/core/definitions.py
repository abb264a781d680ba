"""Fluent builder for :class:`~taskschema.core.models.TaskDefinition`.

The builder is the only place that checks schema invariants.  Once
:meth:`TaskDefinitionBuilder.build` returns, the definition is frozen
and every consumer (arguments parser, help printer) may assume it is
well formed:

* parameter names are lowerCamelCase and unique across named and
  positional parameters, and do not clash with global parameters;
* mandatory parameters carry no default value;
* default values satisfy their parameter type;
* no mandatory positional parameter follows an optional one;
* at most one positional parameter is variadic, and it is the last.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from taskschema.core.models import UNSET, ParamDefinition, ParamDefinitionsMap, TaskDefinition
from taskschema.core.types import ParamType
from taskschema.exceptions import (
    DefaultInMandatoryParamError,
    DefaultValueWrongTypeError,
    InvalidParamNameError,
    MandatoryParamAfterOptionalError,
    ParamAlreadyDefinedError,
    ParamAfterVariadicError,
    ParamClashesWithGlobalParamError,
)

_PARAM_NAME = re.compile(r"^[a-z]+[a-zA-Z0-9]*$")


class TaskDefinitionBuilder:
    """Accumulates a task's parameters and produces an immutable definition.

    Parameters
    ----------
    name:
        Task name, the key it will have in the task registry.
    description:
        One-line summary shown in help output.
    is_internal:
        Hide the task from the default global help listing.
    global_params:
        Global parameter set whose names task parameters must not reuse.
    """

    def __init__(
        self,
        name: str,
        description: str | None = None,
        *,
        is_internal: bool = False,
        global_params: ParamDefinitionsMap | None = None,
    ) -> None:
        self._name = name
        self._description = description
        self._is_internal = is_internal
        self._global_params: ParamDefinitionsMap = global_params or {}
        self._params: dict[str, ParamDefinition] = {}
        self._positionals: list[ParamDefinition] = []
        self._action: Callable[..., Any] | None = None

    # ------------------------------------------------------------------
    # Named parameters
    # ------------------------------------------------------------------

    def add_param(
        self,
        name: str,
        description: str | None = None,
        default_value: Any = UNSET,
        type: ParamType = ParamType.STRING,
        is_optional: bool | None = None,
    ) -> TaskDefinitionBuilder:
        """Add a named parameter taking one value token.

        *is_optional* defaults to whether a default value was given.
        """
        if is_optional is None:
            is_optional = default_value is not UNSET

        self._validate_name(name)
        self._validate_no_default_for_mandatory(name, default_value, is_optional)
        self._validate_default_type(name, default_value, type)

        self._params[name] = ParamDefinition(
            name=name,
            type=type,
            description=description,
            default_value=default_value,
            is_optional=is_optional,
        )
        return self

    def add_optional_param(
        self,
        name: str,
        description: str | None = None,
        default_value: Any = UNSET,
        type: ParamType = ParamType.STRING,
    ) -> TaskDefinitionBuilder:
        return self.add_param(name, description, default_value, type, is_optional=True)

    def add_flag(self, name: str, description: str | None = None) -> TaskDefinitionBuilder:
        """Add a boolean parameter whose presence alone means ``True``."""
        self._validate_name(name)
        self._params[name] = ParamDefinition(
            name=name,
            type=ParamType.BOOLEAN,
            description=description,
            default_value=False,
            is_optional=True,
            is_flag=True,
        )
        return self

    # ------------------------------------------------------------------
    # Positional parameters
    # ------------------------------------------------------------------

    def add_positional_param(
        self,
        name: str,
        description: str | None = None,
        default_value: Any = UNSET,
        type: ParamType = ParamType.STRING,
        is_optional: bool | None = None,
    ) -> TaskDefinitionBuilder:
        if is_optional is None:
            is_optional = default_value is not UNSET

        self._validate_name(name)
        self._validate_not_after_variadic(name)
        self._validate_no_mandatory_after_optional(name, is_optional)
        self._validate_no_default_for_mandatory(name, default_value, is_optional)
        self._validate_default_type(name, default_value, type)

        self._positionals.append(
            ParamDefinition(
                name=name,
                type=type,
                description=description,
                default_value=default_value,
                is_optional=is_optional,
            )
        )
        return self

    def add_optional_positional_param(
        self,
        name: str,
        description: str | None = None,
        default_value: Any = UNSET,
        type: ParamType = ParamType.STRING,
    ) -> TaskDefinitionBuilder:
        return self.add_positional_param(name, description, default_value, type, is_optional=True)

    def add_variadic_positional_param(
        self,
        name: str,
        description: str | None = None,
        default_value: Any = UNSET,
        type: ParamType = ParamType.STRING,
        is_optional: bool | None = None,
    ) -> TaskDefinitionBuilder:
        """Add the last positional parameter, collecting all remaining tokens.

        A non-list default is wrapped in a one-element list.
        """
        if default_value is not UNSET and not isinstance(default_value, list):
            default_value = [default_value]
        if is_optional is None:
            is_optional = default_value is not UNSET

        self._validate_name(name)
        self._validate_not_after_variadic(name)
        self._validate_no_mandatory_after_optional(name, is_optional)
        self._validate_no_default_for_mandatory(name, default_value, is_optional)
        if default_value is not UNSET:
            for element in default_value:
                self._validate_default_type(name, element, type)

        self._positionals.append(
            ParamDefinition(
                name=name,
                type=type,
                description=description,
                default_value=default_value,
                is_optional=is_optional,
                is_variadic=True,
            )
        )
        return self

    def add_optional_variadic_positional_param(
        self,
        name: str,
        description: str | None = None,
        default_value: Any = UNSET,
        type: ParamType = ParamType.STRING,
    ) -> TaskDefinitionBuilder:
        return self.add_variadic_positional_param(
            name, description, default_value, type, is_optional=True,
        )

    # ------------------------------------------------------------------
    # Action / build
    # ------------------------------------------------------------------

    def set_action(self, action: Callable[..., Any]) -> TaskDefinitionBuilder:
        self._action = action
        return self

    def build(self) -> TaskDefinition:
        return TaskDefinition(
            name=self._name,
            description=self._description,
            is_internal=self._is_internal,
            param_definitions=MappingProxyType(dict(self._params)),
            positional_param_definitions=tuple(self._positionals),
            action=self._action,
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate_name(self, name: str) -> None:
        if not _PARAM_NAME.match(name):
            raise InvalidParamNameError(self._name, name)
        if name in self._params or any(p.name == name for p in self._positionals):
            raise ParamAlreadyDefinedError(self._name, name)
        if name in self._global_params:
            raise ParamClashesWithGlobalParamError(self._name, name)

    def _validate_no_default_for_mandatory(
        self, name: str, default_value: Any, is_optional: bool,
    ) -> None:
        if not is_optional and default_value is not UNSET:
            raise DefaultInMandatoryParamError(self._name, name)

    def _validate_default_type(self, name: str, default_value: Any, type: ParamType) -> None:
        if default_value is not UNSET and not type.validate(default_value):
            raise DefaultValueWrongTypeError(self._name, name, type.type_name)

    def _validate_not_after_variadic(self, name: str) -> None:
        if self._positionals and self._positionals[-1].is_variadic:
            raise ParamAfterVariadicError(self._name, name)

    def _validate_no_mandatory_after_optional(self, name: str, is_optional: bool) -> None:
        if not is_optional and self._positionals and self._positionals[-1].is_optional:
            raise MandatoryParamAfterOptionalError(self._name, name)
