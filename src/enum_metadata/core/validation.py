"""Validation helpers shared across the cache and annotation packages.

These utilities centralize argument checks so the public entry points raise
a consistent error vocabulary (``NullArgumentError`` and
``InvalidEnumTypeError``) before any cache state is touched.
"""

from __future__ import annotations

import enum
from typing import Any

from ..utils.exceptions import InvalidEnumTypeError, NullArgumentError


def is_enum_type(value: Any) -> bool:
    """Return True when *value* is a subclass of :class:`enum.Enum`."""
    return isinstance(value, type) and issubclass(value, enum.Enum)


def validate_not_none(value: Any, name: str) -> None:
    """Raise ``NullArgumentError`` when ``value`` is ``None``."""
    if value is None:
        raise NullArgumentError(
            f"Argument '{name}' must not be None.",
            details={"param": name, "requirement": "not None"},
        )


def validate_enum_type(enum_type: Any, name: str = "enum_type") -> type[enum.Enum]:
    """Ensure that ``enum_type`` denotes an enumerated type and return it."""
    if not is_enum_type(enum_type):
        raise InvalidEnumTypeError(
            "Type is not a valid enum.",
            details={"param": name, "value": repr(enum_type), "requirement": "enum.Enum subclass"},
        )
    return enum_type


def validate_member(member: Any, name: str = "member") -> enum.Enum:
    """Ensure that ``member`` is a non-null enum member and return it."""
    validate_not_none(member, name)
    if not isinstance(member, enum.Enum):
        raise InvalidEnumTypeError(
            "Value is not a member of a valid enum.",
            details={"param": name, "type": type(member).__name__, "requirement": "enum.Enum member"},
        )
    return member


def validate_member_of(enum_type: type[enum.Enum], member: Any, name: str = "member") -> None:
    """Ensure that ``member`` belongs to ``enum_type``."""
    if not isinstance(member, enum_type):
        raise InvalidEnumTypeError(
            f"{member!r} is not a member of {enum_type.__name__}.",
            details={"param": name, "enum_type": enum_type.__name__},
        )


__all__ = [
    "is_enum_type",
    "validate_enum_type",
    "validate_member",
    "validate_member_of",
    "validate_not_none",
]
