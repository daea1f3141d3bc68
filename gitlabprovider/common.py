"""Shared configuration, value types and comparison helpers for GitLab clients."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Settings used to authenticate against a GitLab API."""

    token: str
    base_url: str = ""


class AccessControlValue(str, Enum):
    """Access level of a project feature."""

    DISABLED = "disabled"
    ENABLED = "enabled"
    PRIVATE = "private"
    PUBLIC = "public"


class VisibilityValue(str, Enum):
    """Visibility of a project or group."""

    PRIVATE = "private"
    INTERNAL = "internal"
    PUBLIC = "public"


class MergeMethodValue(str, Enum):
    """Merge method used by a project."""

    MERGE = "merge"
    REBASE_MERGE = "rebase_merge"
    FF = "ff"


def late_initialize_string(value: Optional[str], fallback: str) -> Optional[str]:
    """Return ``fallback`` when ``value`` is unset and ``fallback`` is non-empty."""
    if value is None and fallback != "":
        return fallback
    return value


def late_initialize_access_control(
    value: Optional[AccessControlValue], fallback: str
) -> Optional[AccessControlValue]:
    """Return ``value`` if set, otherwise the non-empty ``fallback`` as an access value."""
    if value is None and fallback != "":
        return AccessControlValue(fallback)
    return value


def late_initialize_visibility(
    value: Optional[VisibilityValue], fallback: str
) -> Optional[VisibilityValue]:
    """Return ``value`` if set, otherwise the non-empty ``fallback`` as a visibility."""
    if value is None and fallback != "":
        return VisibilityValue(fallback)
    return value


def late_initialize_merge_method(
    value: Optional[MergeMethodValue], fallback: str
) -> Optional[MergeMethodValue]:
    """Return ``value`` if set, otherwise the non-empty ``fallback`` as a merge method."""
    if value is None and fallback != "":
        return MergeMethodValue(fallback)
    return value


def string_to_optional(value: str) -> Optional[str]:
    """Map the empty string to ``None`` and keep any other string."""
    return value if value != "" else None


def is_bool_equal(optional: Optional[bool], value: bool) -> bool:
    """An unset ``optional`` matches anything; a set one must equal ``value``."""
    return optional is None or optional == value


def is_int_equal(optional: Optional[int], value: int) -> bool:
    """An unset ``optional`` matches anything; a set one must equal ``value``."""
    return optional is None or optional == value