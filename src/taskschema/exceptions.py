"""Custom exception hierarchy for taskschema.

Every user-visible error condition maps to a subclass of
:class:`TaskSchemaError` so that the CLI error boundary can render a
clean message without leaking internal stack traces.  Each error keeps
the offending name or value as an attribute for programmatic callers.

Hierarchy
---------
TaskSchemaError
├── UnrecognizedTaskError
├── TaskActionNotSetError
├── InvalidEnvironmentValueError
├── EnvironmentError
├── TaskDefinitionError
│   ├── InvalidParamNameError
│   ├── ParamAlreadyDefinedError
│   ├── ParamClashesWithGlobalParamError
│   ├── DefaultInMandatoryParamError
│   ├── MandatoryParamAfterOptionalError
│   ├── ParamAfterVariadicError
│   └── DefaultValueWrongTypeError
└── ArgumentsError
    ├── UnrecognizedCommandLineArgError
    ├── UnrecognizedParamNameError
    ├── RepeatedParamError
    ├── MissingTaskArgumentError
    ├── MissingPositionalArgumentError
    ├── UnrecognizedPositionalArgumentError
    └── InvalidArgumentValueError
"""

from __future__ import annotations


class TaskSchemaError(Exception):
    """Base exception for all taskschema errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Task lookup / execution -----------------------------------------------

class UnrecognizedTaskError(TaskSchemaError):
    """Raised when a task name is not present in the task registry."""

    def __init__(self, task_name: str) -> None:
        super().__init__(
            f"Unrecognized task {task_name}",
            hint="Run 'help' to list the available tasks.",
        )
        self.task_name: str = task_name


class TaskActionNotSetError(TaskSchemaError):
    """Raised when a task without an action is asked to run."""

    def __init__(self, task_name: str) -> None:
        super().__init__(f"No action set for task {task_name}")
        self.task_name: str = task_name


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TaskSchemaError):
    """Raised when a required runtime dependency is not available."""


class InvalidEnvironmentValueError(TaskSchemaError):
    """Raised when an environment variable holds a value of the wrong type."""

    def __init__(self, variable: str, value: str) -> None:
        super().__init__(f"Invalid environment variable {variable}'s value: {value}")
        self.variable: str = variable
        self.value: str = value


# --- Task definition (schema construction) ---------------------------------

class TaskDefinitionError(TaskSchemaError):
    """Base class for malformed task schemas, raised at build time."""

    def __init__(self, message: str, *, task_name: str, param_name: str) -> None:
        super().__init__(message)
        self.task_name: str = task_name
        self.param_name: str = param_name


class InvalidParamNameError(TaskDefinitionError):
    """Raised when a parameter name is not a lowerCamelCase identifier."""

    def __init__(self, task_name: str, param_name: str) -> None:
        super().__init__(
            f"Invalid param name {param_name} in task {task_name}. "
            "Param names must be camelCase.",
            task_name=task_name,
            param_name=param_name,
        )


class ParamAlreadyDefinedError(TaskDefinitionError):
    def __init__(self, task_name: str, param_name: str) -> None:
        super().__init__(
            f"Could not set param {param_name} for task {task_name} "
            "because it's already defined.",
            task_name=task_name,
            param_name=param_name,
        )


class ParamClashesWithGlobalParamError(TaskDefinitionError):
    def __init__(self, task_name: str, param_name: str) -> None:
        super().__init__(
            f"Could not set param {param_name} for task {task_name} "
            "because its name is used as a global param.",
            task_name=task_name,
            param_name=param_name,
        )


class DefaultInMandatoryParamError(TaskDefinitionError):
    def __init__(self, task_name: str, param_name: str) -> None:
        super().__init__(
            f"Default value for param {param_name} of task {task_name} "
            "shouldn't be set because it's mandatory.",
            task_name=task_name,
            param_name=param_name,
        )


class MandatoryParamAfterOptionalError(TaskDefinitionError):
    def __init__(self, task_name: str, param_name: str) -> None:
        super().__init__(
            f"Could not add mandatory positional param {param_name} to task "
            f"{task_name} because it comes after an optional one.",
            task_name=task_name,
            param_name=param_name,
        )


class ParamAfterVariadicError(TaskDefinitionError):
    def __init__(self, task_name: str, param_name: str) -> None:
        super().__init__(
            f"Could not set positional param {param_name} for task {task_name} "
            "because there is already a variadic positional param and it has "
            "to be the last positional one.",
            task_name=task_name,
            param_name=param_name,
        )


class DefaultValueWrongTypeError(TaskDefinitionError):
    def __init__(self, task_name: str, param_name: str, type_name: str) -> None:
        super().__init__(
            f"Default value for param {param_name} of task {task_name} "
            f"doesn't match the param type {type_name}.",
            task_name=task_name,
            param_name=param_name,
        )


# --- Command-line argument resolution --------------------------------------

class ArgumentsError(TaskSchemaError):
    """Base class for command lines that do not fit the task schema."""


class UnrecognizedCommandLineArgError(ArgumentsError):
    def __init__(self, argument: str) -> None:
        super().__init__(
            f"Unrecognised command line argument {argument}.",
            hint="Global options must come before the task name.",
        )
        self.argument: str = argument


class UnrecognizedParamNameError(ArgumentsError):
    def __init__(self, param: str) -> None:
        super().__init__(f"Unrecognized param {param}")
        self.param: str = param


class RepeatedParamError(ArgumentsError):
    def __init__(self, param: str) -> None:
        super().__init__(f"Param {param} was specified more than once")
        self.param: str = param


class MissingTaskArgumentError(ArgumentsError):
    def __init__(self, param: str) -> None:
        super().__init__(f"Missing task argument {param}")
        self.param: str = param


class MissingPositionalArgumentError(ArgumentsError):
    def __init__(self, param: str) -> None:
        super().__init__(f"Missing positional argument {param}")
        self.param: str = param


class UnrecognizedPositionalArgumentError(ArgumentsError):
    def __init__(self, argument: str) -> None:
        super().__init__(f"Unrecognized positional argument {argument}")
        self.argument: str = argument


class InvalidArgumentValueError(ArgumentsError):
    """Raised when a raw value cannot be parsed as its parameter's type."""

    def __init__(self, value: str, param_name: str, type_name: str) -> None:
        super().__init__(
            f"Invalid value {value} for argument {param_name} of type {type_name}"
        )
        self.value: str = value
        self.param_name: str = param_name
        self.type_name: str = type_name
