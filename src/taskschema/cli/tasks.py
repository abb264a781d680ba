"""Built-in tasks shipped with every task registry."""

from __future__ import annotations

from taskschema.core.definitions import TaskDefinitionBuilder
from taskschema.core.global_params import GLOBAL_PARAM_DEFINITIONS
from taskschema.core.help_printer import HelpPrinter
from taskschema.core.models import TaskDefinition

TASK_HELP: str = "help"


def build_help_task(printer: HelpPrinter) -> TaskDefinition:
    """Return the ``help [task]`` task bound to *printer*.

    Without a task name the global help is printed; otherwise the help
    of that task, which fails with
    :class:`~taskschema.exceptions.UnrecognizedTaskError` for unknown names.
    """

    def print_help(task: str) -> None:
        if task:
            printer.print_task_help(task)
        else:
            printer.print_global_help()

    return (
        TaskDefinitionBuilder(
            TASK_HELP,
            "Prints this message",
            global_params=GLOBAL_PARAM_DEFINITIONS,
        )
        .add_optional_positional_param("task", "An optional task to print more info about", "")
        .set_action(print_help)
        .build()
    )
