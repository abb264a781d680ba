"""Tests for environment-variable configuration (core/env.py)."""

from __future__ import annotations

import pytest

from taskschema.core.env import get_env_global_arguments, param_name_to_env_variable
from taskschema.core.global_params import GLOBAL_PARAM_DEFINITIONS
from taskschema.exceptions import InvalidEnvironmentValueError


class TestVariableNames:
    def test_camel_case_to_upper_snake(self) -> None:
        assert param_name_to_env_variable("showStackTraces") == "TASKSCHEMA_SHOW_STACK_TRACES"

    def test_custom_prefix(self) -> None:
        assert param_name_to_env_variable("config", prefix="APP_") == "APP_CONFIG"


class TestGetEnvGlobalArguments:
    def test_empty_environment_yields_defaults(self) -> None:
        args = get_env_global_arguments(GLOBAL_PARAM_DEFINITIONS, {})
        assert args == {
            "help": False,
            "showStackTraces": False,
            "verbose": False,
            "version": False,
        }

    def test_values_are_parsed_by_type(self) -> None:
        args = get_env_global_arguments(
            GLOBAL_PARAM_DEFINITIONS,
            {"TASKSCHEMA_VERBOSE": "true", "TASKSCHEMA_CONFIG": "tasks.json"},
        )
        assert args["verbose"] is True
        assert args["config"] == "tasks.json"

    def test_unrelated_variables_ignored(self) -> None:
        args = get_env_global_arguments(GLOBAL_PARAM_DEFINITIONS, {"VERBOSE": "true"})
        assert args["verbose"] is False

    def test_invalid_value(self) -> None:
        with pytest.raises(InvalidEnvironmentValueError) as exc_info:
            get_env_global_arguments(GLOBAL_PARAM_DEFINITIONS, {"TASKSCHEMA_VERBOSE": "maybe"})
        assert exc_info.value.variable == "TASKSCHEMA_VERBOSE"
        assert exc_info.value.value == "maybe"
