"""Parameters accepted by the program regardless of the chosen task."""

from __future__ import annotations

from types import MappingProxyType

from taskschema.core.models import ParamDefinition, ParamDefinitionsMap
from taskschema.core.types import ParamType


def _flag(name: str, description: str) -> ParamDefinition:
    return ParamDefinition(
        name=name,
        type=ParamType.BOOLEAN,
        description=description,
        default_value=False,
        is_optional=True,
        is_flag=True,
    )


GLOBAL_PARAM_DEFINITIONS: ParamDefinitionsMap = MappingProxyType(
    {
        "config": ParamDefinition(
            name="config",
            type=ParamType.STRING,
            description="A config file.",
            is_optional=True,
        ),
        "help": _flag("help", "Shows this message, or a task's help if its name is provided"),
        "showStackTraces": _flag("showStackTraces", "Show stack traces."),
        "verbose": _flag("verbose", "Enables verbose logging"),
        "version": _flag("version", "Shows version and exit."),
    }
)
