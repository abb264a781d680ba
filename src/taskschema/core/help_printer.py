"""Help rendering driven entirely by task and parameter definitions.

:class:`HelpPrinter` produces two documents:

* **global help** — program header, usage line, the global options and
  the list of available tasks;
* **task help** — the usage line of one task followed by its options
  and positional arguments.

Layout rules
------------
* Named parameters are listed sorted by their (pre-formatting) name and
  spelled ``--kebab-case``; positional parameters keep declared order
  and render their bare name.
* Detail lines are ``"  <name padded to column width>\\t<details>"``,
  where the column width is the longest rendered name (0 when empty).
* ``(default: <JSON>)`` is appended to an optional parameter with a
  default value, except for flags, whose default is their absence.
* A description is always followed by one space, so a detail line may
  end with trailing whitespace.

Guarantees
----------
* Read-only: the task registry and parameter mappings are never mutated
  or copied, so each call reflects the registry as it is at call time.
* Idempotent: rendering twice yields identical lines.
* All output goes through the injected :class:`LineSink`.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from taskschema.core.arguments import param_name_to_cla
from taskschema.core.models import ParamDefinition, ParamDefinitionsMap, TaskRegistry
from taskschema.core.protocols import LineSink
from taskschema.exceptions import UnrecognizedTaskError


def _integral_floats_as_ints(value: object) -> object:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _integral_floats_as_ints(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_integral_floats_as_ints(item) for item in value]
    return value


def _format_default(value: object) -> str:
    # JSON numbers carry no int/float distinction: 1.0 is written as 1.
    rendered = json.dumps(
        _integral_floats_as_ints(value),
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return f"(default: {rendered})"


class HelpPrinter:
    """Renders usage text for the whole program or a single task.

    Parameters
    ----------
    program_name:
        Executable name used in headers and usage lines.
    version:
        Program version shown in the header.
    global_params:
        Parameters accepted regardless of the chosen task.
    tasks:
        Task registry.  Held by reference and never mutated.
    sink:
        Destination of the rendered lines.
    """

    def __init__(
        self,
        program_name: str,
        version: str,
        global_params: ParamDefinitionsMap,
        tasks: TaskRegistry,
        sink: LineSink,
    ) -> None:
        self._program_name = program_name
        self._version = version
        self._global_params = global_params
        self._tasks = tasks
        self._sink = sink

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def print_global_help(self, include_internal_tasks: bool = False) -> None:
        """Render the program header, global options and task list."""
        write = self._sink.write_line

        self._print_header()
        write(f"Usage: {self._program_name} [GLOBAL OPTIONS] <TASK> [TASK OPTIONS]")
        write()
        write("GLOBAL OPTIONS:")
        write()

        self._print_param_details(self._global_params)

        write()
        write()
        write("AVAILABLE TASKS:")
        write()

        tasks_to_show = sorted(
            name
            for name, definition in self._tasks.items()
            if include_internal_tasks or not definition.is_internal
        )
        name_length = max((len(name) for name in tasks_to_show), default=0)

        for name in tasks_to_show:
            description = self._tasks[name].description or ""
            write(f"  {name.ljust(name_length)}\t{description}")

        write()
        write(f"For tasks' specific help run: {self._program_name} help [task]")
        write()

    def print_task_help(self, task_name: str) -> None:
        """Render the usage, options and positional arguments of one task.

        Raises
        ------
        UnrecognizedTaskError
            If *task_name* is not in the registry.  Nothing is written.
        """
        task = self._tasks.get(task_name)
        if task is None:
            raise UnrecognizedTaskError(task_name)

        write = self._sink.write_line
        description = task.description or ""

        self._print_header()
        write(
            f"Usage: {self._program_name} [GLOBAL OPTIONS] {task.name}"
            f"{self._get_params_list(task.param_definitions)}"
            f"{self._get_positional_params_list(task.positional_param_definitions)}"
        )
        write()

        if task.param_definitions:
            write("OPTIONS:")
            write()
            self._print_param_details(task.param_definitions)
            write()

        if task.positional_param_definitions:
            write("POSITIONAL ARGUMENTS:")
            write()
            self._print_positional_param_details(task.positional_param_definitions)
            write()

        write(f"Help for task {task.name}: {description}")
        write()
        write(f"For global options help run: {self._program_name} help")
        write()

    # ------------------------------------------------------------------
    # Usage-line fragments
    # ------------------------------------------------------------------

    @staticmethod
    def _get_param_value_description(definition: ParamDefinition) -> str:
        return f"<{definition.type.display_name}>"

    def _get_params_list(self, param_definitions: ParamDefinitionsMap) -> str:
        """``" [--output <STRING>] --verbose"`` for the usage line."""
        params_list = ""

        for name in sorted(param_definitions):
            definition = param_definitions[name]

            fragment = param_name_to_cla(name)
            if not definition.is_flag:
                fragment += f" {self._get_param_value_description(definition)}"
            if definition.has_default:
                fragment = f"[{fragment}]"

            params_list += f" {fragment}"

        return params_list

    @staticmethod
    def _get_positional_params_list(definitions: Sequence[ParamDefinition]) -> str:
        """``" src [...rest]"`` for the usage line."""
        params_list = ""

        for definition in definitions:
            fragment = f"...{definition.name}" if definition.is_variadic else definition.name
            if definition.has_default:
                fragment = f"[{fragment}]"

            params_list += f" {fragment}"

        return params_list

    # ------------------------------------------------------------------
    # Detail sections
    # ------------------------------------------------------------------

    def _print_header(self) -> None:
        self._sink.write_line(f"{self._program_name} version {self._version}")
        self._sink.write_line()

    def _print_param_details(self, param_definitions: ParamDefinitionsMap) -> None:
        name_length = max(
            (len(param_name_to_cla(name)) for name in param_definitions),
            default=0,
        )

        for name in sorted(param_definitions):
            definition = param_definitions[name]

            msg = f"  {param_name_to_cla(name).ljust(name_length)}\t"
            if definition.description is not None:
                msg += f"{definition.description} "
            if definition.is_optional and definition.has_default and not definition.is_flag:
                msg += _format_default(definition.default_value)

            self._sink.write_line(msg)

    def _print_positional_param_details(self, definitions: Sequence[ParamDefinition]) -> None:
        name_length = max((len(d.name) for d in definitions), default=0)

        for definition in definitions:
            msg = f"  {definition.name.ljust(name_length)}\t"
            if definition.description is not None:
                msg += f"{definition.description} "
            if definition.is_optional and definition.has_default:
                msg += _format_default(definition.default_value)

            self._sink.write_line(msg)
