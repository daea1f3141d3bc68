"""GitLab group, group member and group deploy token models and conversions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from gitlabprovider.common import VisibilityValue

_ERR_GROUP_NOT_FOUND = "404 Group Not Found"
_ERR_MEMBER_NOT_FOUND = "404 Group Member Not Found"


@runtime_checkable
class GroupClient(Protocol):
    """Group operations of a GitLab API; methods raise on failure."""

    def get_group(self, pid) -> "Group": ...

    def create_group(self, opt: "CreateGroupOptions") -> "Group": ...

    def update_group(self, gid, opt: "UpdateGroupOptions") -> "Group": ...

    def delete_group(self, gid) -> None: ...


@runtime_checkable
class MemberClient(Protocol):
    """Group member operations of a GitLab API; methods raise on failure."""

    def get_group_member(self, gid, user: int) -> "GroupMember": ...

    def add_group_member(self, gid, opt: "AddGroupMemberOptions") -> "GroupMember": ...

    def edit_group_member(
        self, gid, user: int, opt: "EditGroupMemberOptions"
    ) -> "GroupMember": ...

    def remove_group_member(self, gid, user: int) -> None: ...


@runtime_checkable
class DeployTokenClient(Protocol):
    """Group deploy token operations of a GitLab API; methods raise on failure."""

    def list_group_deploy_tokens(self, gid, opt) -> list: ...

    def create_group_deploy_token(
        self, gid, opt: "CreateGroupDeployTokenOptions"
    ): ...

    def delete_group_deploy_token(self, gid, deploy_token: int) -> None: ...


def _contains(err: Optional[BaseException], marker: str) -> bool:
    return err is not None and marker in str(err)


def is_error_group_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports a missing group."""
    return _contains(err, _ERR_GROUP_NOT_FOUND)


def is_error_member_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports a missing group member."""
    return _contains(err, _ERR_MEMBER_NOT_FOUND)


def is_error_group_deploy_token_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports a missing group for a deploy token."""
    return _contains(err, _ERR_GROUP_NOT_FOUND)


@dataclass
class StorageStatistics:
    storage_size: int = 0
    repository_size: int = 0
    lfs_objects_size: int = 0
    job_artifacts_size: int = 0


@dataclass
class CustomAttribute:
    key: str = ""
    value: str = ""


@dataclass
class SharedWithGroup:
    group_id: int = 0
    group_name: str = ""
    group_full_path: str = ""
    group_access_level: int = 0
    expires_at: Optional[datetime] = None


@dataclass
class LDAPGroupLink:
    cn: str = ""
    group_access: int = 0
    provider: str = ""


@dataclass
class Group:
    """A group as the GitLab API reports it."""

    id: int = 0
    name: str = ""
    path: str = ""
    description: str = ""
    visibility: str = ""
    avatar_url: str = ""
    web_url: str = ""
    full_name: str = ""
    full_path: str = ""
    ldap_cn: str = ""
    ldap_access: int = 0
    created_at: Optional[datetime] = None
    marked_for_deletion_on: Optional[datetime] = None
    statistics: Optional[StorageStatistics] = None
    custom_attributes: list[CustomAttribute] = field(default_factory=list)
    shared_with_groups: list[SharedWithGroup] = field(default_factory=list)
    ldap_group_links: list[LDAPGroupLink] = field(default_factory=list)


@dataclass
class GroupObservation:
    """Observed state of a group."""

    id: int = 0
    avatar_url: str = ""
    web_url: str = ""
    full_name: str = ""
    full_path: str = ""
    ldap_cn: str = ""
    ldap_access: int = 0
    created_at: Optional[datetime] = None
    marked_for_deletion_on: Optional[datetime] = None
    statistics: Optional[StorageStatistics] = None
    custom_attributes: list[CustomAttribute] = field(default_factory=list)
    shared_with_groups: list[SharedWithGroup] = field(default_factory=list)
    ldap_group_links: list[LDAPGroupLink] = field(default_factory=list)


@dataclass
class GroupParameters:
    """Desired state of a group."""

    path: str = ""
    name: Optional[str] = None
    description: Optional[str] = None
    membership_lock: Optional[bool] = None
    visibility: Optional[VisibilityValue] = None
    share_with_group_lock: Optional[bool] = None
    require_two_factor_auth: Optional[bool] = None
    two_factor_grace_period: Optional[int] = None
    project_creation_level: Optional[str] = None
    auto_devops_enabled: Optional[bool] = None
    subgroup_creation_level: Optional[str] = None
    emails_disabled: Optional[bool] = None
    mentions_disabled: Optional[bool] = None
    lfs_enabled: Optional[bool] = None
    request_access_enabled: Optional[bool] = None
    parent_id: Optional[int] = None
    shared_runners_minutes_limit: Optional[int] = None
    extra_shared_runners_minutes_limit: Optional[int] = None


@dataclass
class _GroupOptions:
    name: Optional[str] = None
    path: Optional[str] = None
    description: Optional[str] = None
    membership_lock: Optional[bool] = None
    visibility: Optional[VisibilityValue] = None
    share_with_group_lock: Optional[bool] = None
    require_two_factor_auth: Optional[bool] = None
    two_factor_grace_period: Optional[int] = None
    project_creation_level: Optional[str] = None
    auto_devops_enabled: Optional[bool] = None
    subgroup_creation_level: Optional[str] = None
    emails_disabled: Optional[bool] = None
    mentions_disabled: Optional[bool] = None
    lfs_enabled: Optional[bool] = None
    request_access_enabled: Optional[bool] = None
    parent_id: Optional[int] = None
    shared_runners_minutes_limit: Optional[int] = None
    extra_shared_runners_minutes_limit: Optional[int] = None


@dataclass
class CreateGroupOptions(_GroupOptions):
    """Request body for creating a group."""


@dataclass
class UpdateGroupOptions(_GroupOptions):
    """Request body for updating a group."""


@dataclass
class MemberSAMLIdentity:
    extern_uid: str = ""
    provider: str = ""
    saml_provider_id: int = 0


@dataclass
class GroupMember:
    """A group member as the GitLab API reports it."""

    id: int = 0
    username: str = ""
    email: str = ""
    name: str = ""
    state: str = ""
    avatar_url: str = ""
    web_url: str = ""
    created_at: Optional[datetime] = None
    expires_at: Optional[str] = None
    access_level: int = 0
    group_saml_identity: Optional[MemberSAMLIdentity] = None


@dataclass
class MemberObservation:
    """Observed state of a group member."""

    username: str = ""
    name: str = ""
    state: str = ""
    avatar_url: str = ""
    web_url: str = ""
    group_saml_identity: Optional[MemberSAMLIdentity] = None


@dataclass
class MemberParameters:
    """Desired state of a group member."""

    user_id: int = 0
    access_level: int = 0
    group_id: Optional[int] = None
    expires_at: Optional[str] = None


@dataclass
class AddGroupMemberOptions:
    user_id: Optional[int] = None
    access_level: Optional[int] = None
    expires_at: Optional[str] = None


@dataclass
class EditGroupMemberOptions:
    access_level: Optional[int] = None
    expires_at: Optional[str] = None


@dataclass
class DeployTokenParameters:
    """Desired state of a group deploy token."""

    scopes: list[str] = field(default_factory=list)
    group_id: Optional[int] = None
    username: Optional[str] = None
    expires_at: Optional[datetime] = None


@dataclass
class CreateGroupDeployTokenOptions:
    name: Optional[str] = None
    username: Optional[str] = None
    expires_at: Optional[datetime] = None
    scopes: Optional[list[str]] = None


def generate_observation(group: Optional[Group]) -> GroupObservation:
    """Build a GroupObservation from a group reported by GitLab."""
    if group is None:
        return GroupObservation()

    statistics = None
    if group.statistics is not None:
        statistics = StorageStatistics(
            storage_size=group.statistics.storage_size,
            repository_size=group.statistics.repository_size,
            lfs_objects_size=group.statistics.lfs_objects_size,
            job_artifacts_size=group.statistics.job_artifacts_size,
        )

    return GroupObservation(
        id=group.id,
        avatar_url=group.avatar_url,
        web_url=group.web_url,
        full_name=group.full_name,
        full_path=group.full_path,
        ldap_cn=group.ldap_cn,
        created_at=group.created_at,
        marked_for_deletion_on=group.marked_for_deletion_on,
        statistics=statistics,
        custom_attributes=[
            CustomAttribute(key=c.key, value=c.value) for c in group.custom_attributes
        ],
        shared_with_groups=[
            SharedWithGroup(
                group_id=s.group_id,
                group_name=s.group_name,
                group_full_path=s.group_full_path,
                group_access_level=s.group_access_level,
                expires_at=s.expires_at,
            )
            for s in group.shared_with_groups
        ],
        ldap_group_links=[
            LDAPGroupLink(cn=link.cn, group_access=link.group_access, provider=link.provider)
            for link in group.ldap_group_links
        ],
    )


def _group_option_values(name: str, params: GroupParameters) -> dict:
    # The name in the parameters takes precedence over the resource name.
    if params.name is not None:
        name = params.name
    return dict(
        name=name,
        path=params.path,
        description=params.description,
        membership_lock=params.membership_lock,
        visibility=params.visibility,
        share_with_group_lock=params.share_with_group_lock,
        require_two_factor_auth=params.require_two_factor_auth,
        two_factor_grace_period=params.two_factor_grace_period,
        project_creation_level=params.project_creation_level,
        auto_devops_enabled=params.auto_devops_enabled,
        subgroup_creation_level=params.subgroup_creation_level,
        emails_disabled=params.emails_disabled,
        mentions_disabled=params.mentions_disabled,
        lfs_enabled=params.lfs_enabled,
        request_access_enabled=params.request_access_enabled,
        parent_id=params.parent_id,
        shared_runners_minutes_limit=params.shared_runners_minutes_limit,
        extra_shared_runners_minutes_limit=params.extra_shared_runners_minutes_limit,
    )


def generate_create_group_options(name: str, params: GroupParameters) -> CreateGroupOptions:
    """Build the options for creating a group."""
    return CreateGroupOptions(**_group_option_values(name, params))


def generate_edit_group_options(name: str, params: GroupParameters) -> UpdateGroupOptions:
    """Build the options for updating a group."""
    return UpdateGroupOptions(**_group_option_values(name, params))


def generate_member_observation(member: Optional[GroupMember]) -> MemberObservation:
    """Build a MemberObservation from a group member reported by GitLab."""
    if member is None:
        return MemberObservation()
    identity = member.group_saml_identity
    return MemberObservation(
        username=member.username,
        name=member.name,
        state=member.state,
        avatar_url=member.avatar_url,
        web_url=member.web_url,
        group_saml_identity=dataclasses.replace(identity) if identity is not None else None,
    )


def generate_add_member_options(params: MemberParameters) -> AddGroupMemberOptions:
    """Build the options for adding a group member."""
    return AddGroupMemberOptions(
        user_id=params.user_id,
        access_level=params.access_level,
        expires_at=params.expires_at,
    )


def generate_edit_member_options(params: MemberParameters) -> EditGroupMemberOptions:
    """Build the options for editing a group member."""
    return EditGroupMemberOptions(
        access_level=params.access_level,
        expires_at=params.expires_at,
    )


def generate_create_group_deploy_token_options(
    name: str, params: DeployTokenParameters
) -> CreateGroupDeployTokenOptions:
    """Build the options for creating a group deploy token."""
    return CreateGroupDeployTokenOptions(
        name=name,
        username=params.username,
        expires_at=params.expires_at,
        scopes=list(params.scopes),
    )