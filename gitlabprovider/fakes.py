"""Configurable stand-ins for the GitLab group and project clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

__all__ = ["MockNotConfiguredError", "GroupMockClient", "ProjectMockClient"]


class MockNotConfiguredError(RuntimeError):
    """Raised when a mock operation is called without a behaviour set for it."""


def _invoke(owner: object, attr: str, *args: Any) -> Any:
    behaviour: Optional[Callable[..., Any]] = getattr(owner, attr)
    if behaviour is None:
        raise MockNotConfiguredError(
            f"{type(owner).__name__}.{attr} is not configured"
        )
    return behaviour(*args)


@dataclass
class GroupMockClient:
    """Group, group member and group deploy token client whose calls go to given callables.

    Each callable returns what the operation returns, or raises to report failure.
    """

    mock_get_group: Optional[Callable[..., Any]] = None
    mock_create_group: Optional[Callable[..., Any]] = None
    mock_update_group: Optional[Callable[..., Any]] = None
    mock_delete_group: Optional[Callable[..., Any]] = None

    mock_get_member: Optional[Callable[..., Any]] = None
    mock_add_member: Optional[Callable[..., Any]] = None
    mock_edit_member: Optional[Callable[..., Any]] = None
    mock_remove_member: Optional[Callable[..., Any]] = None

    mock_list_deploy_tokens: Optional[Callable[..., Any]] = None
    mock_create_deploy_token: Optional[Callable[..., Any]] = None
    mock_delete_deploy_token: Optional[Callable[..., Any]] = None

    def get_group(self, pid):
        return _invoke(self, "mock_get_group", pid)

    def create_group(self, opt):
        return _invoke(self, "mock_create_group", opt)

    def update_group(self, pid, opt):
        return _invoke(self, "mock_update_group", pid, opt)

    def delete_group(self, pid):
        return _invoke(self, "mock_delete_group", pid)

    def get_group_member(self, gid, user):
        return _invoke(self, "mock_get_member", gid, user)

    def add_group_member(self, gid, opt):
        return _invoke(self, "mock_add_member", gid, opt)

    def edit_group_member(self, gid, user, opt):
        return _invoke(self, "mock_edit_member", gid, user, opt)

    def remove_group_member(self, gid, user):
        return _invoke(self, "mock_remove_member", gid, user)

    def list_group_deploy_tokens(self, gid, opt):
        return _invoke(self, "mock_list_deploy_tokens", gid, opt)

    def create_group_deploy_token(self, gid, opt):
        return _invoke(self, "mock_create_deploy_token", gid, opt)

    def delete_group_deploy_token(self, gid, deploy_token):
        return _invoke(self, "mock_delete_deploy_token", gid, deploy_token)


@dataclass
class ProjectMockClient:
    """Project, hook, member, deploy token and variable client whose calls go to given callables.

    Each callable returns what the operation returns, or raises to report failure.
    """

    mock_get_project: Optional[Callable[..., Any]] = None
    mock_create_project: Optional[Callable[..., Any]] = None
    mock_edit_project: Optional[Callable[..., Any]] = None
    mock_delete_project: Optional[Callable[..., Any]] = None

    mock_get_hook: Optional[Callable[..., Any]] = None
    mock_add_hook: Optional[Callable[..., Any]] = None
    mock_edit_hook: Optional[Callable[..., Any]] = None
    mock_delete_hook: Optional[Callable[..., Any]] = None

    mock_get_member: Optional[Callable[..., Any]] = None
    mock_add_member: Optional[Callable[..., Any]] = None
    mock_edit_member: Optional[Callable[..., Any]] = None
    mock_delete_member: Optional[Callable[..., Any]] = None

    mock_list_deploy_tokens: Optional[Callable[..., Any]] = None
    mock_create_deploy_token: Optional[Callable[..., Any]] = None
    mock_delete_deploy_token: Optional[Callable[..., Any]] = None

    mock_get_variable: Optional[Callable[..., Any]] = None
    mock_create_variable: Optional[Callable[..., Any]] = None
    mock_update_variable: Optional[Callable[..., Any]] = None
    mock_remove_variable: Optional[Callable[..., Any]] = None

    def get_project(self, pid, opt):
        return _invoke(self, "mock_get_project", pid, opt)

    def create_project(self, opt):
        return _invoke(self, "mock_create_project", opt)

    def edit_project(self, pid, opt):
        return _invoke(self, "mock_edit_project", pid, opt)

    def delete_project(self, pid):
        return _invoke(self, "mock_delete_project", pid)

    def get_project_hook(self, pid, hook):
        return _invoke(self, "mock_get_hook", pid, hook)

    def add_project_hook(self, pid, opt):
        return _invoke(self, "mock_add_hook", pid, opt)

    def edit_project_hook(self, pid, hook, opt):
        return _invoke(self, "mock_edit_hook", pid, hook, opt)

    def delete_project_hook(self, pid, hook):
        return _invoke(self, "mock_delete_hook", pid, hook)

    def get_project_member(self, pid, user):
        return _invoke(self, "mock_get_member", pid, user)

    def add_project_member(self, pid, opt):
        return _invoke(self, "mock_add_member", pid, opt)

    def edit_project_member(self, pid, user, opt):
        return _invoke(self, "mock_edit_member", pid, user, opt)

    def delete_project_member(self, pid, user):
        return _invoke(self, "mock_delete_member", pid, user)

    def list_project_deploy_tokens(self, pid, opt):
        return _invoke(self, "mock_list_deploy_tokens", pid, opt)

    def create_project_deploy_token(self, pid, opt):
        return _invoke(self, "mock_create_deploy_token", pid, opt)

    def delete_project_deploy_token(self, pid, deploy_token):
        return _invoke(self, "mock_delete_deploy_token", pid, deploy_token)

    def get_variable(self, pid, key):
        return _invoke(self, "mock_get_variable", pid, key)

    def create_variable(self, pid, opt):
        return _invoke(self, "mock_create_variable", pid, opt)

    def update_variable(self, pid, key, opt):
        return _invoke(self, "mock_update_variable", pid, key, opt)

    def remove_variable(self, pid, key):
        return _invoke(self, "mock_remove_variable", pid, key)