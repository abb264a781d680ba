"""Core layer — task schemas, argument resolution and help rendering.

Rules
-----
* No ``print()`` calls; output goes through a :class:`LineSink`.
* No filesystem or network I/O; the environment is passed in as a mapping.
* No imports from ``cli``.
"""

from taskschema.core.arguments import (
    ArgumentsParser,
    GlobalArgumentsResult,
    cla_to_param_name,
    param_name_to_cla,
)
from taskschema.core.definitions import TaskDefinitionBuilder
from taskschema.core.env import get_env_global_arguments, param_name_to_env_variable
from taskschema.core.global_params import GLOBAL_PARAM_DEFINITIONS
from taskschema.core.help_printer import HelpPrinter
from taskschema.core.models import UNSET, ParamDefinition, TaskDefinition
from taskschema.core.protocols import LineSink
from taskschema.core.types import ParamType

__all__: list[str] = [
    "GLOBAL_PARAM_DEFINITIONS",
    "UNSET",
    "ArgumentsParser",
    "GlobalArgumentsResult",
    "HelpPrinter",
    "LineSink",
    "ParamDefinition",
    "ParamType",
    "TaskDefinition",
    "TaskDefinitionBuilder",
    "cla_to_param_name",
    "get_env_global_arguments",
    "param_name_to_cla",
    "param_name_to_env_variable",
]
