"""GitLab project hook models and the conversions between desired and observed state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from gitlabprovider.common import is_bool_equal, late_initialize_string, string_to_optional

_ERR_HOOK_NOT_FOUND = "404 Not found"

_EVENT_FIELDS = (
    "confidential_note_events",
    "push_events",
    "issues_events",
    "confidential_issues_events",
    "merge_requests_events",
    "tag_push_events",
    "note_events",
    "job_events",
    "pipeline_events",
    "wiki_page_events",
    "enable_ssl_verification",
)


@runtime_checkable
class HookClient(Protocol):
    """Project hook operations of a GitLab API; methods raise on failure."""

    def get_project_hook(self, pid, hook: int) -> "ProjectHook": ...

    def add_project_hook(self, pid, opt: "AddProjectHookOptions") -> "ProjectHook": ...

    def edit_project_hook(
        self, pid, hook: int, opt: "EditProjectHookOptions"
    ) -> "ProjectHook": ...

    def delete_project_hook(self, pid, hook: int) -> None: ...


def is_error_hook_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports a missing hook."""
    return err is not None and _ERR_HOOK_NOT_FOUND in str(err)


@dataclass
class ProjectHook:
    """A project hook as the GitLab API reports it."""

    id: int = 0
    url: str = ""
    project_id: int = 0
    confidential_note_events: bool = False
    push_events: bool = False
    push_events_branch_filter: str = ""
    issues_events: bool = False
    confidential_issues_events: bool = False
    merge_requests_events: bool = False
    tag_push_events: bool = False
    note_events: bool = False
    job_events: bool = False
    pipeline_events: bool = False
    wiki_page_events: bool = False
    enable_ssl_verification: bool = False
    created_at: Optional[datetime] = None


@dataclass
class HookParameters:
    """Desired state of a project hook."""

    project_id: Optional[int] = None
    url: Optional[str] = None
    confidential_note_events: Optional[bool] = None
    push_events: Optional[bool] = None
    push_events_branch_filter: Optional[str] = None
    issues_events: Optional[bool] = None
    confidential_issues_events: Optional[bool] = None
    merge_requests_events: Optional[bool] = None
    tag_push_events: Optional[bool] = None
    note_events: Optional[bool] = None
    job_events: Optional[bool] = None
    pipeline_events: Optional[bool] = None
    wiki_page_events: Optional[bool] = None
    enable_ssl_verification: Optional[bool] = None
    token: Optional[str] = None


@dataclass
class HookObservation:
    """Observed state of a project hook."""

    id: int = 0
    created_at: Optional[datetime] = None


@dataclass
class _HookOptions:
    url: Optional[str] = None
    confidential_note_events: Optional[bool] = None
    push_events: Optional[bool] = None
    push_events_branch_filter: Optional[str] = None
    issues_events: Optional[bool] = None
    confidential_issues_events: Optional[bool] = None
    merge_requests_events: Optional[bool] = None
    tag_push_events: Optional[bool] = None
    note_events: Optional[bool] = None
    job_events: Optional[bool] = None
    pipeline_events: Optional[bool] = None
    wiki_page_events: Optional[bool] = None
    enable_ssl_verification: Optional[bool] = None
    token: Optional[str] = None


@dataclass
class AddProjectHookOptions(_HookOptions):
    """Request body for adding a project hook."""


@dataclass
class EditProjectHookOptions(_HookOptions):
    """Request body for editing a project hook."""


def late_initialize_hook(params: HookParameters, hook: Optional[ProjectHook]) -> None:
    """Fill the unset fields of ``params`` in place from the hook GitLab reports."""
    if hook is None:
        return
    for name in _EVENT_FIELDS:
        if getattr(params, name) is None:
            setattr(params, name, getattr(hook, name))
    params.push_events_branch_filter = late_initialize_string(
        params.push_events_branch_filter, hook.push_events_branch_filter
    )


def generate_hook_observation(hook: Optional[ProjectHook]) -> HookObservation:
    """Build a HookObservation from a hook reported by GitLab."""
    if hook is None:
        return HookObservation()
    return HookObservation(id=hook.id, created_at=hook.created_at)


def _option_values(params: HookParameters) -> dict:
    values = {name: getattr(params, name) for name in _EVENT_FIELDS}
    values.update(
        url=params.url,
        push_events_branch_filter=params.push_events_branch_filter,
        token=params.token,
    )
    return values


def generate_create_hook_options(params: HookParameters) -> AddProjectHookOptions:
    """Build the options for adding a project hook."""
    return AddProjectHookOptions(**_option_values(params))


def generate_edit_hook_options(params: HookParameters) -> EditProjectHookOptions:
    """Build the options for editing a project hook."""
    return EditProjectHookOptions(**_option_values(params))


def is_hook_up_to_date(params: HookParameters, hook: ProjectHook) -> bool:
    """Tell whether every modifiable field of the hook matches ``params``."""
    if params.url != string_to_optional(hook.url):
        return False
    if params.push_events_branch_filter != string_to_optional(hook.push_events_branch_filter):
        return False
    return all(
        is_bool_equal(getattr(params, name), getattr(hook, name)) for name in _EVENT_FIELDS
    )