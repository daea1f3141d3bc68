"""GitLab project member models and the conversions between desired and observed state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

_ERR_MEMBER_NOT_FOUND = "404 Project Member Not Found"


@runtime_checkable
class MemberClient(Protocol):
    """Project member operations of a GitLab API; methods raise on failure."""

    def get_project_member(self, pid, user: int) -> "ProjectMember": ...

    def add_project_member(self, pid, opt: "AddProjectMemberOptions") -> "ProjectMember": ...

    def edit_project_member(
        self, pid, user: int, opt: "EditProjectMemberOptions"
    ) -> "ProjectMember": ...

    def delete_project_member(self, pid, user: int) -> None: ...


def is_error_member_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports a missing project member."""
    return err is not None and _ERR_MEMBER_NOT_FOUND in str(err)


@dataclass
class ProjectMember:
    """A project member as the GitLab API reports it."""

    id: int = 0
    username: str = ""
    email: str = ""
    name: str = ""
    state: str = ""
    created_at: Optional[datetime] = None
    expires_at: Optional[str] = None
    access_level: int = 0
    web_url: str = ""
    avatar_url: str = ""


@dataclass
class MemberParameters:
    """Desired state of a project member."""

    user_id: int = 0
    access_level: int = 0
    project_id: Optional[int] = None
    expires_at: Optional[str] = None


@dataclass
class MemberObservation:
    """Observed state of a project member."""

    username: str = ""
    email: str = ""
    name: str = ""
    state: str = ""
    created_at: Optional[datetime] = None
    avatar_url: str = ""
    web_url: str = ""


@dataclass
class AddProjectMemberOptions:
    user_id: Optional[int] = None
    access_level: Optional[int] = None
    expires_at: Optional[str] = None


@dataclass
class EditProjectMemberOptions:
    access_level: Optional[int] = None
    expires_at: Optional[str] = None


def generate_member_observation(member: Optional[ProjectMember]) -> MemberObservation:
    """Build a MemberObservation from a project member reported by GitLab."""
    if member is None:
        return MemberObservation()
    return MemberObservation(
        username=member.username,
        email=member.email,
        name=member.name,
        state=member.state,
        created_at=member.created_at,
        avatar_url=member.avatar_url,
        web_url=member.web_url,
    )


def generate_add_member_options(params: MemberParameters) -> AddProjectMemberOptions:
    """Build the options for adding a project member."""
    return AddProjectMemberOptions(
        user_id=params.user_id,
        access_level=params.access_level,
        expires_at=params.expires_at,
    )


def generate_edit_member_options(params: MemberParameters) -> EditProjectMemberOptions:
    """Build the options for editing a project member."""
    return EditProjectMemberOptions(
        access_level=params.access_level,
        expires_at=params.expires_at,
    )