"""Configuration and validation helpers shared by the cache and annotation packages."""

from .config_helpers import normalise_token, read_pyproject_section
from .validation import (
    is_enum_type,
    validate_enum_type,
    validate_member,
    validate_member_of,
    validate_not_none,
)

__all__ = [
    "is_enum_type",
    "normalise_token",
    "read_pyproject_section",
    "validate_enum_type",
    "validate_member",
    "validate_member_of",
    "validate_not_none",
]
