"""Command-line argument resolution against task schemas.

Two stages, both pure:

1. :meth:`ArgumentsParser.parse_global_arguments` splits a raw argument
   list into global arguments, the task name and the tokens left for
   the task.
2. :meth:`ArgumentsParser.parse_task_arguments` resolves those tokens
   against one :class:`~taskschema.core.models.TaskDefinition`,
   filling defaults and parsing every value through its
   :class:`~taskschema.core.types.ParamType`.

Named parameters are spelled ``--kebab-case`` on the command line; see
:func:`param_name_to_cla`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from taskschema.core.models import ParamDefinition, ParamDefinitionsMap, TaskDefinition
from taskschema.exceptions import (
    MissingPositionalArgumentError,
    MissingTaskArgumentError,
    RepeatedParamError,
    UnrecognizedCommandLineArgError,
    UnrecognizedParamNameError,
    UnrecognizedPositionalArgumentError,
)

logger = logging.getLogger(__name__)

_CLA_PREFIX = "--"
_UPPERCASE_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


# ---------------------------------------------------------------------------
# Name formatting
# ---------------------------------------------------------------------------

def param_name_to_cla(param_name: str) -> str:
    """Return the command-line spelling of *param_name*.

    ``showStackTraces`` → ``--show-stack-traces``
    """
    return _CLA_PREFIX + _UPPERCASE_BOUNDARY.sub("-", param_name).lower()


def cla_to_param_name(cla: str) -> str:
    """Inverse of :func:`param_name_to_cla`.

    ``--show-stack-traces`` → ``showStackTraces``
    """
    first, *rest = cla[len(_CLA_PREFIX):].split("-")
    return first.lower() + "".join(part[:1].upper() + part[1:].lower() for part in rest)


def has_cla_param_name_format(token: str) -> bool:
    return token.startswith(_CLA_PREFIX)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GlobalArgumentsResult:
    """Outcome of the first resolution stage."""

    global_arguments: dict[str, Any]
    """Resolved global arguments, command line taking precedence over env."""

    task_name: str | None
    """First bare token, or ``None`` when the command line names no task."""

    unparsed_args: tuple[str, ...]
    """Tokens after the task name that were not global parameters."""


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class ArgumentsParser:
    """Stateless resolver of raw command-line tokens."""

    def parse_global_arguments(
        self,
        global_params: ParamDefinitionsMap,
        env_arguments: Mapping[str, Any],
        raw_args: Sequence[str],
    ) -> GlobalArgumentsResult:
        """Extract global arguments and the task name from *raw_args*.

        Before the task name, every ``--param`` token must be a global
        parameter.  After it, global parameters are still recognised;
        everything else is handed to the task stage untouched.

        Raises
        ------
        UnrecognizedCommandLineArgError
            For an unknown ``--param`` preceding the task name.
        """
        global_arguments: dict[str, Any] = {}
        task_name: str | None = None
        unparsed: list[str] = []

        index = 0
        while index < len(raw_args):
            token = raw_args[index]
            if task_name is None:
                if not has_cla_param_name_format(token):
                    task_name = token
                    index += 1
                    continue
                if not self._is_cla_param_name(token, global_params):
                    raise UnrecognizedCommandLineArgError(token)
                index = self._parse_argument(global_params, raw_args, index, global_arguments)
            elif self._is_cla_param_name(token, global_params):
                index = self._parse_argument(global_params, raw_args, index, global_arguments)
            else:
                unparsed.append(token)
            index += 1

        logger.debug("Resolved task name %r with global arguments %r", task_name, global_arguments)
        return GlobalArgumentsResult(
            global_arguments={**env_arguments, **global_arguments},
            task_name=task_name,
            unparsed_args=tuple(unparsed),
        )

    def parse_task_arguments(
        self,
        task: TaskDefinition,
        raw_args: Sequence[str],
    ) -> dict[str, Any]:
        """Resolve *raw_args* into the keyword arguments of *task*.

        Raises
        ------
        UnrecognizedParamNameError
            For a ``--param`` the task does not declare.
        RepeatedParamError
            When a named parameter is given twice.
        MissingTaskArgumentError
            When a mandatory named parameter, or a named value, is missing.
        MissingPositionalArgumentError
            When a mandatory positional parameter is missing.
        UnrecognizedPositionalArgumentError
            When more positional tokens are given than declared.
        InvalidArgumentValueError
            When a value cannot be parsed as its parameter's type.
        """
        named, raw_positionals = self._parse_named_arguments(task, raw_args)
        positionals = self._parse_positional_arguments(
            raw_positionals,
            task.positional_param_definitions,
        )
        return {**positionals, **named}

    # ------------------------------------------------------------------
    # Named parameters
    # ------------------------------------------------------------------

    def _parse_named_arguments(
        self,
        task: TaskDefinition,
        raw_args: Sequence[str],
    ) -> tuple[dict[str, Any], list[str]]:
        named: dict[str, Any] = {}
        raw_positionals: list[str] = []

        index = 0
        while index < len(raw_args):
            token = raw_args[index]
            if not has_cla_param_name_format(token):
                raw_positionals.append(token)
            elif not self._is_cla_param_name(token, task.param_definitions):
                raise UnrecognizedParamNameError(token)
            else:
                index = self._parse_argument(task.param_definitions, raw_args, index, named)
            index += 1

        self._add_default_arguments(task.param_definitions, named)
        return named, raw_positionals

    @staticmethod
    def _add_default_arguments(
        param_definitions: ParamDefinitionsMap,
        named: dict[str, Any],
    ) -> None:
        for name, definition in param_definitions.items():
            if name in named:
                continue
            if not definition.is_optional:
                raise MissingTaskArgumentError(param_name_to_cla(name))
            if definition.has_default:
                named[name] = definition.default_value
            else:
                named[name] = None

    @staticmethod
    def _is_cla_param_name(token: str, param_definitions: ParamDefinitionsMap) -> bool:
        if not has_cla_param_name_format(token):
            return False
        name = cla_to_param_name(token)
        # Only the canonical spelling matches: "--VERBOSE" is not "--verbose".
        return name in param_definitions and param_name_to_cla(name) == token

    @staticmethod
    def _parse_argument(
        param_definitions: ParamDefinitionsMap,
        raw_args: Sequence[str],
        index: int,
        parsed: dict[str, Any],
    ) -> int:
        """Consume the parameter at *index* (and its value); return the last index used."""
        token = raw_args[index]
        name = cla_to_param_name(token)
        definition = param_definitions[name]

        if name in parsed:
            raise RepeatedParamError(token)

        if definition.is_flag:
            parsed[name] = True
            return index

        index += 1
        if index >= len(raw_args):
            raise MissingTaskArgumentError(param_name_to_cla(name))
        parsed[name] = definition.type.parse(name, raw_args[index])
        return index

    # ------------------------------------------------------------------
    # Positional parameters
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_positional_arguments(
        raw_positionals: Sequence[str],
        definitions: Sequence[ParamDefinition],
    ) -> dict[str, Any]:
        resolved: dict[str, Any] = {}

        for position, definition in enumerate(definitions):
            if position >= len(raw_positionals):
                if not definition.is_optional:
                    raise MissingPositionalArgumentError(definition.name)
                resolved[definition.name] = (
                    definition.default_value if definition.has_default else None
                )
            elif definition.is_variadic:
                resolved[definition.name] = [
                    definition.type.parse(definition.name, raw)
                    for raw in raw_positionals[position:]
                ]
            else:
                resolved[definition.name] = definition.type.parse(
                    definition.name,
                    raw_positionals[position],
                )

        has_variadic = bool(definitions) and definitions[-1].is_variadic
        if not has_variadic and len(raw_positionals) > len(definitions):
            raise UnrecognizedPositionalArgumentError(raw_positionals[len(definitions)])

        return resolved
