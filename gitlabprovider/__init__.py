"""Conversions between declarative GitLab resource specifications and GitLab API shapes."""

__version__ = "0.1.0"