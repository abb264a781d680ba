"""CLI application entry point and task routing for taskschema.

This module is the **sole error boundary** for the entire application.
It catches :class:`~taskschema.exceptions.TaskSchemaError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Resolution flow
---------------
1. Global arguments are read from ``TASKSCHEMA_*`` environment variables.
2. The command line is split into global arguments, the task name and
   the task's own tokens; the command line overrides the environment.
3. ``--version`` prints the version and stops.
4. ``--help <task>`` is rewritten to ``help <task>``; no task at all
   means ``help``.
5. The task's tokens are resolved against its schema and its action is
   invoked with the resolved arguments.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import Any

from taskschema.cli import exit_codes
from taskschema.cli.console import ConsoleSink, console
from taskschema.cli.tasks import TASK_HELP, build_help_task
from taskschema.core.arguments import ArgumentsParser, param_name_to_cla
from taskschema.core.env import get_env_global_arguments, param_name_to_env_variable
from taskschema.core.global_params import GLOBAL_PARAM_DEFINITIONS
from taskschema.core.help_printer import HelpPrinter
from taskschema.core.models import TaskDefinition, TaskRegistry
from taskschema.core.protocols import LineSink
from taskschema.core.types import ParamType
from taskschema.exceptions import (
    InvalidArgumentValueError,
    TaskActionNotSetError,
    TaskSchemaError,
    UnrecognizedTaskError,
)
from taskschema.version import PROGRAM_NAME, __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _build_registry(
    tasks: TaskRegistry | None,
    sink: LineSink,
) -> dict[str, TaskDefinition]:
    """Combine the built-in tasks with *tasks*; user tasks win on name clashes."""
    registry: dict[str, TaskDefinition] = {}
    printer = HelpPrinter(PROGRAM_NAME, __version__, GLOBAL_PARAM_DEFINITIONS, registry, sink)
    registry[TASK_HELP] = build_help_task(printer)
    registry.update(tasks or {})
    return registry


def run_task(task: TaskDefinition, arguments: dict[str, Any]) -> None:
    """Invoke *task*'s action with its resolved *arguments*.

    Raises
    ------
    TaskActionNotSetError
        If the task was defined without an action.
    """
    if task.action is None:
        raise TaskActionNotSetError(task.name)
    logger.debug("Running task %s with arguments %r", task.name, arguments)
    task.action(**arguments)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    tasks: TaskRegistry | None = None,
    environ: Mapping[str, str] | None = None,
    sink: LineSink | None = None,
) -> int:
    """Run the taskschema CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    tasks:
        Additional tasks to expose next to the built-in ``help`` task.
    environ:
        Environment used for ``TASKSCHEMA_*`` variables.  Defaults to
        ``os.environ``.
    sink:
        Destination of help and version text.  Defaults to stdout.

    Returns
    -------
    int
        OS process exit code.
    """
    raw_args = sys.argv[1:] if argv is None else argv
    env = os.environ if environ is None else environ
    out = sink if sink is not None else ConsoleSink()

    parser = ArgumentsParser()
    env_arguments = get_env_global_arguments(GLOBAL_PARAM_DEFINITIONS, env)
    resolved = parser.parse_global_arguments(GLOBAL_PARAM_DEFINITIONS, env_arguments, raw_args)
    global_arguments = resolved.global_arguments

    _configure_logging(bool(global_arguments.get("verbose")))

    if global_arguments.get("version"):
        out.write_line(f"{PROGRAM_NAME} version {__version__}")
        return exit_codes.SUCCESS

    registry = _build_registry(tasks, out)
    task_name = resolved.task_name if resolved.task_name is not None else TASK_HELP

    if global_arguments.get("help") and task_name != TASK_HELP:
        task_arguments: dict[str, Any] = {"task": task_name}
        task_name = TASK_HELP
    else:
        task = registry.get(task_name)
        if task is None:
            raise UnrecognizedTaskError(task_name)
        task_arguments = parser.parse_task_arguments(task, resolved.unparsed_args)

    run_task(registry[task_name], task_arguments)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _wants_stack_traces(argv: list[str], environ: Mapping[str, str]) -> bool:
    """Whether ``--show-stack-traces`` is requested on the command line or env."""
    if param_name_to_cla("showStackTraces") in argv:
        return True
    raw = environ.get(param_name_to_env_variable("showStackTraces"))
    if raw is None:
        return False
    try:
        return bool(ParamType.BOOLEAN.parse("showStackTraces", raw))
    except InvalidArgumentValueError:
        return False


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage, unless
    ``--show-stack-traces`` asks for one.
    """
    show_stack_traces = _wants_stack_traces(sys.argv[1:], os.environ)
    try:
        code = main()
        sys.exit(code)
    except TaskSchemaError as exc:
        if show_stack_traces:
            raise
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        if show_stack_traces:
            raise
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
