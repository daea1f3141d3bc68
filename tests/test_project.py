from datetime import datetime

import pytest

from gitlabprovider.common import AccessControlValue, MergeMethodValue, VisibilityValue
from gitlabprovider.projects.project import (
    ContainerExpirationPolicy,
    ContainerExpirationPolicyAttributes,
    CreateProjectOptions,
    CustomAttribute,
    EditProjectOptions,
    ForkParent,
    GroupAccess,
    Links,
    Permissions,
    Project,
    ProjectAccess,
    ProjectLicense,
    ProjectNamespace,
    ProjectObservation,
    ProjectParameters,
    ProjectStatistics,
    SharedWithGroup,
    StorageStatistics,
    User,
    generate_create_project_options,
    generate_edit_project_options,
    generate_observation,
    is_error_project_not_found,
)

NAME = "my-project"
OVERRIDE_NAME = "My Project"
PATH = "path/to/project"
TAG_LIST = ["tag1", "tag2"]
NOW = datetime(2021, 5, 4, 12, 30, 0)

POLICY_ATTRIBUTES = ContainerExpirationPolicyAttributes(
    cadence="Cadence",
    keep_n=1,
    older_than="OlderThan",
    name_regex_delete="NameRegexDelete",
    name_regex_keep="NameRegexKeep",
    enabled=False,
)

SHARED_VALUES = dict(
    path=PATH,
    default_branch="main",
    description="my awesome project",
    issues_access_level=AccessControlValue.ENABLED,
    repository_access_level=AccessControlValue.ENABLED,
    merge_requests_access_level=AccessControlValue.ENABLED,
    forking_access_level=AccessControlValue.ENABLED,
    builds_access_level=AccessControlValue.DISABLED,
    wiki_access_level=AccessControlValue.PRIVATE,
    snippets_access_level=AccessControlValue.PUBLIC,
    pages_access_level=AccessControlValue.ENABLED,
    operations_access_level=AccessControlValue.PUBLIC,
    emails_disabled=True,
    resolve_outdated_diff_discussions=True,
    container_expiration_policy_attributes=POLICY_ATTRIBUTES,
    container_registry_enabled=True,
    shared_runners_enabled=True,
    visibility=VisibilityValue.PRIVATE,
    import_url="import.url",
    public_builds=False,
    allow_merge_on_skipped_pipeline=False,
    only_allow_merge_if_pipeline_succeeds=True,
    only_allow_merge_if_all_discussions_are_resolved=True,
    merge_method=MergeMethodValue.MERGE,
    remove_source_branch_after_merge=False,
    lfs_enabled=True,
    request_access_enabled=True,
    build_git_strategy="strategy",
    build_timeout=60,
    auto_cancel_pending_pipelines="enabled",
    build_coverage_regex="some-regex",
    ci_config_path="path/to/ci/config",
    ci_forward_deployment_enabled=False,
    auto_devops_enabled=True,
    auto_devops_deploy_strategy="continuous",
    approvals_before_merge=0,
    external_authorization_classification_label="authz-label",
    mirror=False,
    mirror_trigger_builds=True,
    packages_enabled=True,
    service_desk_enabled=True,
    autoclose_referenced_issues=True,
    suggestion_commit_message="SuggestionCommitMessage",
    issues_template="IssuesTemplate",
    merge_requests_template="MergeRequestsTemplate",
)

CREATE_ONLY_VALUES = dict(
    namespace_id=1,
    printing_merge_request_link_enabled=True,
    initialize_with_readme=True,
    template_name="template",
    template_project_id=1,
    use_custom_template=True,
    group_with_project_templates_id=1,
)

EDIT_ONLY_VALUES = dict(
    ci_default_git_depth=50,
    mirror_user_id=1,
    only_mirror_protected_branches=False,
    mirror_overwrites_diverged_branches=False,
)


def test_is_error_project_not_found():
    assert is_error_project_not_found(RuntimeError("GET: 404 Project Not Found")) is True
    assert is_error_project_not_found(RuntimeError("500 Internal")) is False
    assert is_error_project_not_found(None) is False


def test_generate_observation_none_gives_empty():
    assert generate_observation(None) == ProjectObservation()


def test_generate_observation_full():
    project = Project(
        id=0,
        public=True,
        ssh_url_to_repo="ssh:url",
        http_url_to_repo="http://url",
        web_url="web.url",
        readme_url="readme.url",
        owner=User(username="chief", created_at=NOW),
        path_with_namespace="path/to/cool-project",
        name_with_namespace="name/to/cool-project",
        issues_enabled=True,
        open_issues_count=3,
        merge_requests_enabled=True,
        jobs_enabled=False,
        wiki_enabled=False,
        snippets_enabled=True,
        container_expiration_policy=ContainerExpirationPolicy(
            cadence="Cadence",
            keep_n=1,
            older_than="OlderThan",
            name_regex_delete="NameRegexDelete",
            name_regex_keep="NameRegexKeep",
            enabled=False,
            next_run_at=NOW,
        ),
        created_at=NOW,
        last_activity_at=NOW,
        creator_id=1,
        namespace=ProjectNamespace(id=3),
        import_status="foo",
        import_error="none",
        permissions=Permissions(
            project_access=ProjectAccess(access_level=1, notification_level=2),
            group_access=GroupAccess(access_level=3, notification_level=4),
        ),
        marked_for_deletion_at=NOW,
        empty_repo=False,
        archived=False,
        avatar_url="https://AvatarURL",
        license_url="https://LicenseURL",
        license=ProjectLicense(
            key="Key", name="Name", nickname="Nickname", html_url="HTMLURL", source_url="SourceURL"
        ),
        forks_count=2,
        star_count=10000,
        forked_from_project=ForkParent(http_url_to_repo="http://fork.url"),
        service_desk_address="ServiceDeskAddress",
        shared_with_groups=[
            SharedWithGroup(group_id=0, group_name="sharedgroup", group_access_level=1)
        ],
        statistics=ProjectStatistics(
            storage_statistics=StorageStatistics(
                storage_size=10, repository_size=20, lfs_objects_size=30, job_artifacts_size=40
            ),
            commit_count=0,
        ),
        links=Links(self="selflink"),
        ci_default_git_depth=50,
        custom_attributes=[CustomAttribute(key="customAttrKey", value="customAttrValue")],
        compliance_frameworks=["framework1", "framework2"],
    )
    want = ProjectObservation(
        id=0,
        public=True,
        ssh_url_to_repo="ssh:url",
        http_url_to_repo="http://url",
        web_url="web.url",
        readme_url="readme.url",
        owner=User(username="chief", created_at=NOW),
        path_with_namespace="path/to/cool-project",
        name_with_namespace="name/to/cool-project",
        issues_enabled=True,
        open_issues_count=3,
        merge_requests_enabled=True,
        jobs_enabled=False,
        wiki_enabled=False,
        snippets_enabled=True,
        container_expiration_policy=ContainerExpirationPolicy(
            cadence="Cadence",
            keep_n=1,
            older_than="OlderThan",
            name_regex_delete="NameRegexDelete",
            name_regex_keep="NameRegexKeep",
            enabled=False,
            next_run_at=NOW,
        ),
        created_at=NOW,
        last_activity_at=NOW,
        creator_id=1,
        namespace=ProjectNamespace(id=3),
        import_status="foo",
        import_error="none",
        permissions=Permissions(
            project_access=ProjectAccess(access_level=1, notification_level=2),
            group_access=GroupAccess(access_level=3, notification_level=4),
        ),
        marked_for_deletion_at=NOW,
        empty_repo=False,
        archived=False,
        avatar_url="https://AvatarURL",
        license_url="https://LicenseURL",
        license=ProjectLicense(
            key="Key", name="Name", nickname="Nickname", html_url="HTMLURL", source_url="SourceURL"
        ),
        forks_count=2,
        star_count=10000,
        forked_from_project=ForkParent(http_url_to_repo="http://fork.url"),
        service_desk_address="ServiceDeskAddress",
        shared_with_groups=[
            SharedWithGroup(group_id=0, group_name="sharedgroup", group_access_level=1)
        ],
        statistics=ProjectStatistics(
            storage_statistics=StorageStatistics(
                storage_size=10, repository_size=20, lfs_objects_size=30, job_artifacts_size=40
            ),
            commit_count=0,
        ),
        links=Links(self="selflink"),
        custom_attributes=[CustomAttribute(key="customAttrKey", value="customAttrValue")],
        compliance_frameworks=["framework1", "framework2"],
    )
    assert generate_observation(project) == want


def test_generate_observation_null_permissions():
    project = Project(
        id=0,
        public=True,
        created_at=NOW,
        last_activity_at=NOW,
        namespace=ProjectNamespace(id=3),
        permissions=Permissions(
            project_access=None,
            group_access=GroupAccess(access_level=3, notification_level=4),
        ),
    )
    want = ProjectObservation(
        id=0,
        public=True,
        created_at=NOW,
        last_activity_at=NOW,
        namespace=ProjectNamespace(id=3),
        permissions=Permissions(group_access=GroupAccess(access_level=3, notification_level=4)),
    )
    assert generate_observation(project) == want


def test_generate_observation_does_not_share_nested_objects():
    project = Project(namespace=ProjectNamespace(id=7), links=Links(self="selflink"))
    observed = generate_observation(project)
    project.namespace.id = 99
    project.links.self = "changed"
    assert observed.namespace == ProjectNamespace(id=7)
    assert observed.links == Links(self="selflink")


def _all_fields_parameters():
    return ProjectParameters(
        **SHARED_VALUES, **CREATE_ONLY_VALUES, **EDIT_ONLY_VALUES, tag_list=list(TAG_LIST)
    )


def _some_fields_parameters():
    return ProjectParameters(
        path=PATH,
        issues_access_level=AccessControlValue.ENABLED,
        resolve_outdated_diff_discussions=True,
        merge_method=MergeMethodValue.MERGE,
        tag_list=list(TAG_LIST),
        build_timeout=60,
    )


@pytest.mark.parametrize(
    "params, want",
    [
        (
            _all_fields_parameters(),
            CreateProjectOptions(
                name=NAME, **SHARED_VALUES, **CREATE_ONLY_VALUES, tag_list=TAG_LIST
            ),
        ),
        (
            _some_fields_parameters(),
            CreateProjectOptions(
                name=NAME,
                path=PATH,
                issues_access_level=AccessControlValue.ENABLED,
                resolve_outdated_diff_discussions=True,
                merge_method=MergeMethodValue.MERGE,
                tag_list=TAG_LIST,
                build_timeout=60,
            ),
        ),
        (
            ProjectParameters(name=OVERRIDE_NAME, tag_list=list(TAG_LIST)),
            CreateProjectOptions(name=OVERRIDE_NAME, tag_list=TAG_LIST),
        ),
    ],
    ids=["AllFields", "SomeFields", "NameOverride"],
)
def test_generate_create_project_options(params, want):
    assert generate_create_project_options(NAME, params) == want


@pytest.mark.parametrize(
    "params, want",
    [
        (
            _all_fields_parameters(),
            EditProjectOptions(name=NAME, **SHARED_VALUES, **EDIT_ONLY_VALUES, tag_list=TAG_LIST),
        ),
        (
            _some_fields_parameters(),
            EditProjectOptions(
                name=NAME,
                path=PATH,
                issues_access_level=AccessControlValue.ENABLED,
                resolve_outdated_diff_discussions=True,
                merge_method=MergeMethodValue.MERGE,
                tag_list=TAG_LIST,
                build_timeout=60,
            ),
        ),
        (
            ProjectParameters(name=NAME, tag_list=list(TAG_LIST)),
            EditProjectOptions(name=NAME, tag_list=TAG_LIST),
        ),
    ],
    ids=["AllFields", "SomeFields", "NameOverride"],
)
def test_generate_edit_project_options(params, want):
    assert generate_edit_project_options(NAME, params) == want


def test_create_options_leave_out_edit_only_fields():
    options = generate_create_project_options(NAME, _all_fields_parameters())
    assert options.name == NAME
    assert options.template_name == "template"
    assert options.namespace_id == 1
    assert not hasattr(options, "ci_default_git_depth")
    assert not hasattr(options, "mirror_user_id")


def test_edit_options_name_override():
    options = generate_edit_project_options(NAME, ProjectParameters(name=OVERRIDE_NAME))
    assert options.name == OVERRIDE_NAME
    assert options.tag_list == []