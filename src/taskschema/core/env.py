"""Environment-variable configuration of global parameters.

Every global parameter ``fooBar`` may be preset through the variable
``TASKSCHEMA_FOO_BAR``.  Values are parsed with the parameter's own
type, so ``TASKSCHEMA_VERBOSE=true`` enables the ``--verbose`` flag.
Command-line arguments always win over these values.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from taskschema.core.models import ParamDefinitionsMap
from taskschema.exceptions import InvalidArgumentValueError, InvalidEnvironmentValueError

logger = logging.getLogger(__name__)

ENV_PREFIX: str = "TASKSCHEMA_"

_UPPERCASE = re.compile(r"([A-Z])")


def param_name_to_env_variable(param_name: str, prefix: str = ENV_PREFIX) -> str:
    """``showStackTraces`` → ``TASKSCHEMA_SHOW_STACK_TRACES``"""
    return prefix + _UPPERCASE.sub(r"_\1", param_name).upper()


def get_env_global_arguments(
    global_params: ParamDefinitionsMap,
    environ: Mapping[str, str],
    prefix: str = ENV_PREFIX,
) -> dict[str, Any]:
    """Read global arguments from *environ*.

    Parameters without a matching variable take their default value, or
    are left out when they have none.

    Raises
    ------
    InvalidEnvironmentValueError
        When a variable's value cannot be parsed as the parameter's type.
    """
    arguments: dict[str, Any] = {}

    for name, definition in global_params.items():
        variable = param_name_to_env_variable(name, prefix)
        raw = environ.get(variable)
        if raw is None:
            if definition.has_default:
                arguments[name] = definition.default_value
            continue
        try:
            arguments[name] = definition.type.parse(name, raw)
        except InvalidArgumentValueError as exc:
            raise InvalidEnvironmentValueError(variable, raw) from exc
        logger.debug("Global argument %s set from %s", name, variable)

    return arguments
