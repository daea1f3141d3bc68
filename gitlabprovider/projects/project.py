"""GitLab project models and the conversions between desired and observed state."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol, TypeVar, runtime_checkable

from gitlabprovider.common import AccessControlValue, MergeMethodValue, VisibilityValue

_ERR_PROJECT_NOT_FOUND = "404 Project Not Found"

__all__ = [
    "ProjectClient",
    "StorageStatistics",
    "ProjectStatistics",
    "CustomAttribute",
    "SharedWithGroup",
    "ContainerExpirationPolicy",
    "ContainerExpirationPolicyAttributes",
    "ProjectLicense",
    "Links",
    "ForkParent",
    "ProjectAccess",
    "GroupAccess",
    "Permissions",
    "ProjectNamespace",
    "Identity",
    "User",
    "Project",
    "ProjectObservation",
    "ProjectParameters",
    "CreateProjectOptions",
    "EditProjectOptions",
    "is_error_project_not_found",
    "generate_observation",
    "generate_create_project_options",
    "generate_edit_project_options",
]


@runtime_checkable
class ProjectClient(Protocol):
    """Project operations of a GitLab API; methods raise on failure."""

    def get_project(self, pid, opt) -> "Project": ...

    def create_project(self, opt: "CreateProjectOptions") -> "Project": ...

    def edit_project(self, pid, opt: "EditProjectOptions") -> "Project": ...

    def delete_project(self, pid) -> None: ...


def is_error_project_not_found(err: Optional[BaseException]) -> bool:
    """Tell whether ``err`` reports a missing project."""
    return err is not None and _ERR_PROJECT_NOT_FOUND in str(err)


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
class ProjectStatistics:
    storage_statistics: StorageStatistics = field(default_factory=StorageStatistics)
    commit_count: int = 0


@dataclass
class SharedWithGroup:
    group_id: int = 0
    group_name: str = ""
    group_access_level: int = 0


@dataclass
class ContainerExpirationPolicy:
    cadence: str = ""
    keep_n: int = 0
    older_than: str = ""
    name_regex_delete: str = ""
    name_regex_keep: str = ""
    enabled: bool = False
    next_run_at: Optional[datetime] = None


@dataclass
class ContainerExpirationPolicyAttributes:
    cadence: Optional[str] = None
    keep_n: Optional[int] = None
    older_than: Optional[str] = None
    name_regex_delete: Optional[str] = None
    name_regex_keep: Optional[str] = None
    enabled: Optional[bool] = None


@dataclass
class ProjectLicense:
    key: str = ""
    name: str = ""
    nickname: str = ""
    html_url: str = ""
    source_url: str = ""


@dataclass
class Links:
    self: str = ""
    issues: str = ""
    merge_requests: str = ""
    repo_branches: str = ""
    labels: str = ""
    events: str = ""
    members: str = ""


@dataclass
class ForkParent:
    http_url_to_repo: str = ""
    id: int = 0
    name: str = ""
    name_with_namespace: str = ""
    path: str = ""
    path_with_namespace: str = ""
    web_url: str = ""


@dataclass
class ProjectAccess:
    access_level: int = 0
    notification_level: int = 0


@dataclass
class GroupAccess:
    access_level: int = 0
    notification_level: int = 0


@dataclass
class Permissions:
    project_access: Optional[ProjectAccess] = None
    group_access: Optional[GroupAccess] = None


@dataclass
class ProjectNamespace:
    id: int = 0
    name: str = ""
    path: str = ""
    kind: str = ""
    full_path: str = ""
    avatar_url: str = ""
    web_url: str = ""


@dataclass
class Identity:
    provider: str = ""
    extern_uid: str = ""


@dataclass
class User:
    id: int = 0
    username: str = ""
    email: str = ""
    name: str = ""
    state: str = ""
    web_url: str = ""
    created_at: Optional[datetime] = None
    bio: str = ""
    location: str = ""
    public_email: str = ""
    skype: str = ""
    linkedin: str = ""
    twitter: str = ""
    website_url: str = ""
    organization: str = ""
    extern_uid: str = ""
    provider: str = ""
    theme_id: int = 0
    last_activity_on: Optional[datetime] = None
    color_scheme_id: int = 0
    is_admin: bool = False
    avatar_url: str = ""
    can_create_group: bool = False
    can_create_project: bool = False
    projects_limit: int = 0
    current_sign_in_at: Optional[datetime] = None
    last_sign_in_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    two_factor_enabled: bool = False
    identities: list[Identity] = field(default_factory=list)
    external: bool = False
    private_profile: bool = False
    shared_runners_minutes_limit: int = 0
    custom_attributes: list[CustomAttribute] = field(default_factory=list)


@dataclass
class Project:
    """A project as the GitLab API reports it."""

    id: int = 0
    name: str = ""
    path: str = ""
    description: str = ""
    default_branch: str = ""
    visibility: str = ""
    public: bool = False
    ssh_url_to_repo: str = ""
    http_url_to_repo: str = ""
    web_url: str = ""
    readme_url: str = ""
    tag_list: list[str] = field(default_factory=list)
    owner: Optional[User] = None
    name_with_namespace: str = ""
    path_with_namespace: str = ""
    issues_enabled: bool = False
    open_issues_count: int = 0
    merge_requests_enabled: bool = False
    jobs_enabled: bool = False
    wiki_enabled: bool = False
    snippets_enabled: bool = False
    container_expiration_policy: Optional[ContainerExpirationPolicy] = None
    created_at: Optional[datetime] = None
    last_activity_at: Optional[datetime] = None
    creator_id: int = 0
    namespace: Optional[ProjectNamespace] = None
    import_status: str = ""
    import_error: str = ""
    permissions: Optional[Permissions] = None
    marked_for_deletion_at: Optional[datetime] = None
    empty_repo: bool = False
    archived: bool = False
    avatar_url: str = ""
    license_url: str = ""
    license: Optional[ProjectLicense] = None
    forks_count: int = 0
    star_count: int = 0
    forked_from_project: Optional[ForkParent] = None
    service_desk_address: str = ""
    shared_with_groups: list[SharedWithGroup] = field(default_factory=list)
    statistics: Optional[ProjectStatistics] = None
    links: Optional[Links] = None
    ci_default_git_depth: int = 0
    custom_attributes: list[CustomAttribute] = field(default_factory=list)
    compliance_frameworks: list[str] = field(default_factory=list)


@dataclass
class ProjectObservation:
    """Observed state of a project."""

    id: int = 0
    public: bool = False
    ssh_url_to_repo: str = ""
    http_url_to_repo: str = ""
    web_url: str = ""
    readme_url: str = ""
    owner: Optional[User] = None
    name_with_namespace: str = ""
    path_with_namespace: str = ""
    issues_enabled: bool = False
    open_issues_count: int = 0
    merge_requests_enabled: bool = False
    jobs_enabled: bool = False
    wiki_enabled: bool = False
    snippets_enabled: bool = False
    container_expiration_policy: Optional[ContainerExpirationPolicy] = None
    created_at: Optional[datetime] = None
    last_activity_at: Optional[datetime] = None
    creator_id: int = 0
    namespace: Optional[ProjectNamespace] = None
    import_status: str = ""
    import_error: str = ""
    permissions: Optional[Permissions] = None
    marked_for_deletion_at: Optional[datetime] = None
    empty_repo: bool = False
    archived: bool = False
    avatar_url: str = ""
    license_url: str = ""
    license: Optional[ProjectLicense] = None
    forks_count: int = 0
    star_count: int = 0
    forked_from_project: Optional[ForkParent] = None
    service_desk_address: str = ""
    shared_with_groups: list[SharedWithGroup] = field(default_factory=list)
    statistics: Optional[ProjectStatistics] = None
    links: Optional[Links] = None
    custom_attributes: list[CustomAttribute] = field(default_factory=list)
    compliance_frameworks: list[str] = field(default_factory=list)


@dataclass
class ProjectParameters:
    """Desired state of a project."""

    name: Optional[str] = None
    path: Optional[str] = None
    namespace_id: Optional[int] = None
    default_branch: Optional[str] = None
    description: Optional[str] = None
    issues_access_level: Optional[AccessControlValue] = None
    repository_access_level: Optional[AccessControlValue] = None
    merge_requests_access_level: Optional[AccessControlValue] = None
    forking_access_level: Optional[AccessControlValue] = None
    builds_access_level: Optional[AccessControlValue] = None
    wiki_access_level: Optional[AccessControlValue] = None
    snippets_access_level: Optional[AccessControlValue] = None
    pages_access_level: Optional[AccessControlValue] = None
    operations_access_level: Optional[AccessControlValue] = None
    emails_disabled: Optional[bool] = None
    resolve_outdated_diff_discussions: Optional[bool] = None
    container_expiration_policy_attributes: Optional[ContainerExpirationPolicyAttributes] = None
    container_registry_enabled: Optional[bool] = None
    shared_runners_enabled: Optional[bool] = None
    visibility: Optional[VisibilityValue] = None
    import_url: Optional[str] = None
    public_builds: Optional[bool] = None
    allow_merge_on_skipped_pipeline: Optional[bool] = None
    only_allow_merge_if_pipeline_succeeds: Optional[bool] = None
    only_allow_merge_if_all_discussions_are_resolved: Optional[bool] = None
    merge_method: Optional[MergeMethodValue] = None
    remove_source_branch_after_merge: Optional[bool] = None
    lfs_enabled: Optional[bool] = None
    request_access_enabled: Optional[bool] = None
    tag_list: list[str] = field(default_factory=list)
    printing_merge_request_link_enabled: Optional[bool] = None
    build_git_strategy: Optional[str] = None
    build_timeout: Optional[int] = None
    auto_cancel_pending_pipelines: Optional[str] = None
    build_coverage_regex: Optional[str] = None
    ci_config_path: Optional[str] = None
    ci_forward_deployment_enabled: Optional[bool] = None
    ci_default_git_depth: Optional[int] = None
    auto_devops_enabled: Optional[bool] = None
    auto_devops_deploy_strategy: Optional[str] = None
    approvals_before_merge: Optional[int] = None
    external_authorization_classification_label: Optional[str] = None
    mirror: Optional[bool] = None
    mirror_user_id: Optional[int] = None
    mirror_trigger_builds: Optional[bool] = None
    only_mirror_protected_branches: Optional[bool] = None
    mirror_overwrites_diverged_branches: Optional[bool] = None
    initialize_with_readme: Optional[bool] = None
    template_name: Optional[str] = None
    template_project_id: Optional[int] = None
    use_custom_template: Optional[bool] = None
    group_with_project_templates_id: Optional[int] = None
    packages_enabled: Optional[bool] = None
    service_desk_enabled: Optional[bool] = None
    autoclose_referenced_issues: Optional[bool] = None
    suggestion_commit_message: Optional[str] = None
    issues_template: Optional[str] = None
    merge_requests_template: Optional[str] = None


@dataclass
class _ProjectOptions:
    """Fields that both the create and the edit request carry."""

    name: Optional[str] = None
    path: Optional[str] = None
    default_branch: Optional[str] = None
    description: Optional[str] = None
    issues_access_level: Optional[AccessControlValue] = None
    repository_access_level: Optional[AccessControlValue] = None
    merge_requests_access_level: Optional[AccessControlValue] = None
    forking_access_level: Optional[AccessControlValue] = None
    builds_access_level: Optional[AccessControlValue] = None
    wiki_access_level: Optional[AccessControlValue] = None
    snippets_access_level: Optional[AccessControlValue] = None
    pages_access_level: Optional[AccessControlValue] = None
    operations_access_level: Optional[AccessControlValue] = None
    emails_disabled: Optional[bool] = None
    resolve_outdated_diff_discussions: Optional[bool] = None
    container_expiration_policy_attributes: Optional[ContainerExpirationPolicyAttributes] = None
    container_registry_enabled: Optional[bool] = None
    shared_runners_enabled: Optional[bool] = None
    visibility: Optional[VisibilityValue] = None
    import_url: Optional[str] = None
    public_builds: Optional[bool] = None
    allow_merge_on_skipped_pipeline: Optional[bool] = None
    only_allow_merge_if_pipeline_succeeds: Optional[bool] = None
    only_allow_merge_if_all_discussions_are_resolved: Optional[bool] = None
    merge_method: Optional[MergeMethodValue] = None
    remove_source_branch_after_merge: Optional[bool] = None
    lfs_enabled: Optional[bool] = None
    request_access_enabled: Optional[bool] = None
    tag_list: Optional[list[str]] = None
    build_git_strategy: Optional[str] = None
    build_timeout: Optional[int] = None
    auto_cancel_pending_pipelines: Optional[str] = None
    build_coverage_regex: Optional[str] = None
    ci_config_path: Optional[str] = None
    ci_forward_deployment_enabled: Optional[bool] = None
    auto_devops_enabled: Optional[bool] = None
    auto_devops_deploy_strategy: Optional[str] = None
    approvals_before_merge: Optional[int] = None
    external_authorization_classification_label: Optional[str] = None
    mirror: Optional[bool] = None
    mirror_trigger_builds: Optional[bool] = None
    packages_enabled: Optional[bool] = None
    service_desk_enabled: Optional[bool] = None
    autoclose_referenced_issues: Optional[bool] = None
    suggestion_commit_message: Optional[str] = None
    issues_template: Optional[str] = None
    merge_requests_template: Optional[str] = None


@dataclass
class CreateProjectOptions(_ProjectOptions):
    """Request body for creating a project."""

    namespace_id: Optional[int] = None
    printing_merge_request_link_enabled: Optional[bool] = None
    initialize_with_readme: Optional[bool] = None
    template_name: Optional[str] = None
    template_project_id: Optional[int] = None
    use_custom_template: Optional[bool] = None
    group_with_project_templates_id: Optional[int] = None


@dataclass
class EditProjectOptions(_ProjectOptions):
    """Request body for editing a project."""

    ci_default_git_depth: Optional[int] = None
    mirror_user_id: Optional[int] = None
    only_mirror_protected_branches: Optional[bool] = None
    mirror_overwrites_diverged_branches: Optional[bool] = None


def _observe_owner(owner: User) -> User:
    return User(
        id=owner.id,
        username=owner.username,
        email=owner.email,
        name=owner.name,
        # The observed state mirrors the owner's name, as the API mapping always has.
        state=owner.name,
        web_url=owner.web_url,
        created_at=owner.created_at,
        bio=owner.bio,
        location=owner.location,
        public_email=owner.public_email,
        skype=owner.skype,
        linkedin=owner.linkedin,
        twitter=owner.twitter,
        website_url=owner.website_url,
        organization=owner.organization,
        extern_uid=owner.extern_uid,
        provider=owner.provider,
        theme_id=owner.theme_id,
        last_activity_on=owner.last_activity_on,
        color_scheme_id=owner.color_scheme_id,
        is_admin=owner.is_admin,
        avatar_url=owner.avatar_url,
        can_create_group=owner.can_create_group,
        can_create_project=owner.can_create_project,
        projects_limit=owner.projects_limit,
        current_sign_in_at=owner.current_sign_in_at,
        last_sign_in_at=owner.last_sign_in_at,
        confirmed_at=owner.confirmed_at,
        two_factor_enabled=owner.two_factor_enabled,
        identities=[Identity(provider=i.provider, extern_uid=i.extern_uid) for i in owner.identities],
        external=owner.external,
        private_profile=owner.private_profile,
        shared_runners_minutes_limit=owner.shared_runners_minutes_limit,
        custom_attributes=[
            CustomAttribute(key=c.key, value=c.value) for c in owner.custom_attributes
        ],
    )


def _observe_permissions(permissions: Permissions) -> Permissions:
    observed = Permissions()
    if permissions.project_access is not None:
        observed.project_access = ProjectAccess(
            access_level=permissions.project_access.access_level,
            notification_level=permissions.project_access.notification_level,
        )
    if permissions.group_access is not None:
        observed.group_access = GroupAccess(
            access_level=permissions.group_access.access_level,
            notification_level=permissions.group_access.notification_level,
        )
    return observed


def _copy(value):
    return dataclasses.replace(value) if value is not None else None


def generate_observation(project: Optional[Project]) -> ProjectObservation:
    """Build a ProjectObservation from a project reported by GitLab."""
    if project is None:
        return ProjectObservation()

    statistics = None
    if project.statistics is not None:
        stats = project.statistics.storage_statistics
        statistics = ProjectStatistics(
            storage_statistics=StorageStatistics(
                storage_size=stats.storage_size,
                repository_size=stats.repository_size,
                lfs_objects_size=stats.lfs_objects_size,
                job_artifacts_size=stats.job_artifacts_size,
            )
        )

    return ProjectObservation(
        id=project.id,
        public=project.public,
        ssh_url_to_repo=project.ssh_url_to_repo,
        http_url_to_repo=project.http_url_to_repo,
        web_url=project.web_url,
        readme_url=project.readme_url,
        owner=_observe_owner(project.owner) if project.owner is not None else None,
        name_with_namespace=project.name_with_namespace,
        path_with_namespace=project.path_with_namespace,
        issues_enabled=project.issues_enabled,
        open_issues_count=project.open_issues_count,
        merge_requests_enabled=project.merge_requests_enabled,
        jobs_enabled=project.jobs_enabled,
        wiki_enabled=project.wiki_enabled,
        snippets_enabled=project.snippets_enabled,
        container_expiration_policy=_copy(project.container_expiration_policy),
        created_at=project.created_at,
        last_activity_at=project.last_activity_at,
        creator_id=project.creator_id,
        namespace=_copy(project.namespace),
        import_status=project.import_status,
        import_error=project.import_error,
        permissions=(
            _observe_permissions(project.permissions) if project.permissions is not None else None
        ),
        marked_for_deletion_at=project.marked_for_deletion_at,
        empty_repo=project.empty_repo,
        archived=project.archived,
        avatar_url=project.avatar_url,
        license_url=project.license_url,
        license=_copy(project.license),
        forks_count=project.forks_count,
        star_count=project.star_count,
        forked_from_project=_copy(project.forked_from_project),
        service_desk_address=project.service_desk_address,
        shared_with_groups=[
            SharedWithGroup(
                group_id=s.group_id,
                group_name=s.group_name,
                group_access_level=s.group_access_level,
            )
            for s in project.shared_with_groups
        ],
        statistics=statistics,
        links=_copy(project.links),
        custom_attributes=[
            CustomAttribute(key=c.key, value=c.value) for c in project.custom_attributes
        ],
        compliance_frameworks=list(project.compliance_frameworks),
    )


_Options = TypeVar("_Options", CreateProjectOptions, EditProjectOptions)


def _build_options(cls: type[_Options], name: str, params: ProjectParameters) -> _Options:
    values = {f.name: getattr(params, f.name) for f in dataclasses.fields(cls)}
    # The name in the parameters takes precedence over the resource name.
    values["name"] = params.name if params.name is not None else name
    values["tag_list"] = list(params.tag_list)
    return cls(**values)


def generate_create_project_options(name: str, params: ProjectParameters) -> CreateProjectOptions:
    """Build the options for creating a project."""
    return _build_options(CreateProjectOptions, name, params)


def generate_edit_project_options(name: str, params: ProjectParameters) -> EditProjectOptions:
    """Build the options for editing a project."""
    return _build_options(EditProjectOptions, name, params)