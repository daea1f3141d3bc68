"""GitLab project CI/CD variable models and the conversions between states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, runtime_checkable

_ERR_VARIABLE_NOT_FOUND = "404 Variable Not Found"


class VariableType(str, Enum):
    """Kind of a CI/CD variable."""

    ENV_VAR = "env_var"
    FILE = "file"


@runtime_checkable
class VariableClient(Protocol):
    """Project variable operations of a GitLab API; methods raise on failure."""

    def get_variable(self, pid, key: str) -> "ProjectVariable": ...

    def create_variable(self, pid, opt: "CreateProjectVariableOptions") -> "ProjectVariable": ...

    def update_variable(
        self, pid, key: str, opt: "UpdateProjectVariableOptions"
    ) -> "ProjectVariable": ...

    def remove_variable(self, pid, key: str) -> None: ...


def is_error_variable_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports a missing variable."""
    return err is not None and _ERR_VARIABLE_NOT_FOUND in str(err)


@dataclass
class ProjectVariable:
    """A project variable as the GitLab API reports it."""

    key: str = ""
    value: str = ""
    variable_type: VariableType = VariableType.ENV_VAR
    protected: bool = False
    masked: bool = False
    environment_scope: str = ""


@dataclass
class VariableParameters:
    """Desired state of a project variable."""

    key: str = ""
    value: str = ""
    project_id: Optional[int] = None
    variable_type: Optional[VariableType] = None
    protected: Optional[bool] = None
    masked: Optional[bool] = None
    environment_scope: Optional[str] = None


@dataclass
class CreateProjectVariableOptions:
    key: Optional[str] = None
    value: Optional[str] = None
    variable_type: Optional[VariableType] = None
    protected: Optional[bool] = None
    masked: Optional[bool] = None
    environment_scope: Optional[str] = None


@dataclass
class UpdateProjectVariableOptions:
    value: Optional[str] = None
    variable_type: Optional[VariableType] = None
    protected: Optional[bool] = None
    masked: Optional[bool] = None
    environment_scope: Optional[str] = None


def late_initialize_variable(
    params: VariableParameters, variable: Optional[ProjectVariable]
) -> None:
    """Fill the unset fields of ``params`` in place from the variable GitLab reports."""
    if variable is None:
        return
    if params.variable_type is None:
        params.variable_type = variable.variable_type
    if params.protected is None:
        params.protected = variable.protected
    if params.masked is None:
        params.masked = variable.masked
    if params.environment_scope is None:
        params.environment_scope = variable.environment_scope


def variable_to_parameters(variable: ProjectVariable) -> VariableParameters:
    """Express a variable reported by GitLab as desired-state parameters."""
    return VariableParameters(
        key=variable.key,
        value=variable.value,
        variable_type=variable.variable_type,
        protected=variable.protected,
        masked=variable.masked,
        environment_scope=variable.environment_scope,
    )


def generate_create_variable_options(params: VariableParameters) -> CreateProjectVariableOptions:
    """Build the options for creating a project variable."""
    return CreateProjectVariableOptions(
        key=params.key,
        value=params.value,
        variable_type=params.variable_type,
        protected=params.protected,
        masked=params.masked,
        environment_scope=params.environment_scope,
    )


def generate_update_variable_options(params: VariableParameters) -> UpdateProjectVariableOptions:
    """Build the options for updating a project variable."""
    return UpdateProjectVariableOptions(
        value=params.value,
        variable_type=params.variable_type,
        protected=params.protected,
        masked=params.masked,
        environment_scope=params.environment_scope,
    )


def is_variable_up_to_date(
    params: Optional[VariableParameters], variable: ProjectVariable
) -> bool:
    """Tell whether ``params`` match the variable, leaving the project id aside."""
    if params is None:
        return True
    observed = variable_to_parameters(variable)
    observed.project_id = params.project_id
    return params == observed