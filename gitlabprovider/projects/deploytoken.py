"""GitLab project deploy token models and conversions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from gitlabprovider.projects.project import is_error_project_not_found


@runtime_checkable
class DeployTokenClient(Protocol):
    """Project deploy token operations of a GitLab API; methods raise on failure."""

    def list_project_deploy_tokens(self, pid, opt) -> list: ...

    def create_project_deploy_token(
        self, pid, opt: "CreateProjectDeployTokenOptions"
    ): ...

    def delete_project_deploy_token(self, pid, deploy_token: int) -> None: ...


def is_error_project_deploy_token_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports a missing project for a deploy token."""
    return is_error_project_not_found(err)


@dataclass
class DeployTokenParameters:
    """Desired state of a project deploy token."""

    scopes: list[str] = field(default_factory=list)
    project_id: Optional[int] = None
    username: Optional[str] = None
    expires_at: Optional[datetime] = None


@dataclass
class CreateProjectDeployTokenOptions:
    name: Optional[str] = None
    username: Optional[str] = None
    expires_at: Optional[datetime] = None
    scopes: Optional[list[str]] = None


def generate_create_project_deploy_token_options(
    name: str, params: DeployTokenParameters
) -> CreateProjectDeployTokenOptions:
    """Build the options for creating a project deploy token."""
    return CreateProjectDeployTokenOptions(
        name=name,
        username=params.username,
        expires_at=params.expires_at,
        scopes=list(params.scopes),
    )