import pytest

from gitlabprovider.common import (
    AccessControlValue,
    Config,
    MergeMethodValue,
    VisibilityValue,
    is_bool_equal,
    is_int_equal,
    late_initialize_access_control,
    late_initialize_merge_method,
    late_initialize_string,
    late_initialize_visibility,
    string_to_optional,
)


def test_config_defaults_base_url_to_empty():
    cfg = Config(token="token")
    assert cfg.token == "token"
    assert cfg.base_url == ""


def test_late_initialize_string_uses_fallback_when_unset():
    assert late_initialize_string(None, "main") == "main"


def test_late_initialize_string_keeps_value():
    assert late_initialize_string("dev", "main") == "dev"


def test_late_initialize_string_empty_fallback_keeps_none():
    assert late_initialize_string(None, "") is None


def test_late_initialize_access_control():
    assert late_initialize_access_control(None, "enabled") is AccessControlValue.ENABLED
    assert (
        late_initialize_access_control(AccessControlValue.PRIVATE, "enabled")
        is AccessControlValue.PRIVATE
    )
    assert late_initialize_access_control(None, "") is None


def test_late_initialize_access_control_rejects_unknown():
    with pytest.raises(ValueError):
        late_initialize_access_control(None, "nonsense")


def test_late_initialize_visibility():
    assert late_initialize_visibility(None, "private") is VisibilityValue.PRIVATE
    assert (
        late_initialize_visibility(VisibilityValue.PUBLIC, "private")
        is VisibilityValue.PUBLIC
    )
    assert late_initialize_visibility(None, "") is None


def test_late_initialize_merge_method():
    assert late_initialize_merge_method(None, "merge") is MergeMethodValue.MERGE
    assert (
        late_initialize_merge_method(MergeMethodValue.FF, "merge")
        is MergeMethodValue.FF
    )
    assert late_initialize_merge_method(None, "") is None


def test_enum_values_compare_as_strings():
    assert VisibilityValue("private") == "private"
    assert MergeMethodValue("rebase_merge") is MergeMethodValue.REBASE_MERGE


def test_string_to_optional():
    assert string_to_optional("") is None
    assert string_to_optional("abc") == "abc"


@pytest.mark.parametrize(
    "optional, value, expected",
    [(None, True, True), (None, False, True), (True, True, True), (False, True, False)],
)
def test_is_bool_equal(optional, value, expected):
    assert is_bool_equal(optional, value) is expected


@pytest.mark.parametrize(
    "optional, value, expected",
    [(None, 5, True), (5, 5, True), (0, 5, False), (0, 0, True)],
)
def test_is_int_equal(optional, value, expected):
    assert is_int_equal(optional, value) is expected