# gitlabprovider

Helpers for keeping GitLab groups, projects, members, hooks, deploy tokens
and CI/CD variables in line with a declarative specification.

The package turns desired-state parameters into the option objects that a
GitLab API client takes. It turns what the API returns back into observations.
It also decides whether a remote object still matches its specification.
Everything is plain dataclasses and functions, with no third-party
dependencies.

## Modules

- `gitlabprovider.common`: shared values and helpers:
  - `Config`, a frozen dataclass that holds a `token` and an optional `base_url`.
  - `AccessControlValue`, `VisibilityValue` and `MergeMethodValue`, all string enums.
  - `late_initialize_string`, `late_initialize_access_control`,
    `late_initialize_visibility` and `late_initialize_merge_method`. Each one
    keeps a value that is set. An unset value is filled from a non-empty fallback.
  - `string_to_optional`, which maps `""` to `None`.
  - `is_bool_equal` and `is_int_equal`. An unset optional value matches anything.
- `gitlabprovider.groups`: groups, group members and group deploy tokens:
  - `generate_observation`
  - `generate_create_group_options` and `generate_edit_group_options`
  - `generate_member_observation`
  - `generate_add_member_options` and `generate_edit_member_options`
  - `generate_create_group_deploy_token_options`
  - `is_error_group_not_found`, `is_error_member_not_found` and
    `is_error_group_deploy_token_not_found`
  - the client protocols `GroupClient`, `MemberClient` and `DeployTokenClient`
- `gitlabprovider.projects.project`: projects:
  - `generate_observation`
  - `generate_create_project_options` and `generate_edit_project_options`
  - `is_error_project_not_found`
  - the `ProjectClient` protocol
- `gitlabprovider.projects.hook`: project hooks:
  - `late_initialize_hook`, which fills the unset fields of `HookParameters` in place
  - `generate_hook_observation`
  - `generate_create_hook_options` and `generate_edit_hook_options`
  - `is_hook_up_to_date`
  - `is_error_hook_not_found`
- `gitlabprovider.projects.member`: project members:
  - `generate_member_observation`
  - `generate_add_member_options` and `generate_edit_member_options`
  - `is_error_member_not_found`
- `gitlabprovider.projects.deploytoken`: project deploy tokens:
  - `generate_create_project_deploy_token_options`
  - `is_error_project_deploy_token_not_found`
- `gitlabprovider.projects.variable`: project CI/CD variables:
  - `late_initialize_variable`
  - `variable_to_parameters`
  - `generate_create_variable_options` and `generate_update_variable_options`
  - `is_variable_up_to_date`, which compares every field except the project id
  - `is_error_variable_not_found`
- `gitlabprovider.fakes`: the stand-in clients `GroupMockClient` and
  `ProjectMockClient`, for use in tests.
  - Each method passes its arguments to a callable that you supply as a
    `mock_*` field, and returns what that callable returns.
  - Calling a method whose callable is not set raises `MockNotConfiguredError`.

The `is_error_*` functions look for GitLab's "404 … Not Found" message in the
text of an exception. They return `False` for `None`.

## Example

```python
from gitlabprovider.groups import GroupParameters, generate_create_group_options

params = GroupParameters(path="example/path/to/group", description="group description")
options = generate_create_group_options("example-group", params)
assert options.name == "example-group"
```

If `name` is set in the parameters, it takes precedence over the resource name
passed in.

## What it does not do

- The package makes no HTTP requests and contains no GitLab API client.
  `Config` only holds settings. The client classes are protocols, which you
  implement with a client of your choice.
- There is no controller or reconcile loop, and no command-line tool.
- The package does not look up credentials from anywhere.

## Installation

```
pip install gitlabprovider
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install "gitlabprovider[test]"
pytest
```