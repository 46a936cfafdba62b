"""Derived metadata records held by the enum cache."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List

from ..utils.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class AnnotationEntry:
    """One derived metadata record of an enum member.

    Attributes
    ----------
    declared_type : type
        Type tag shared by the annotations this entry was derived from.
    value : Any
        The single value, or a non-empty tuple of values when
        ``allows_multiple`` is set.
    allows_multiple : bool
        Whether the entry collects several annotations of ``declared_type``.
    """

    declared_type: Any
    value: Any
    allows_multiple: bool = False

    def __post_init__(self) -> None:
        if not self.allows_multiple:
            return
        if not isinstance(self.value, tuple) or not self.value:
            raise ValidationError(
                "Multi-valued entries require a non-empty tuple of values.",
                details={"declared_type": repr(self.declared_type), "value": repr(self.value)},
            )

    def values(self) -> List[Any]:
        """Return the stored values as a new list (a one-element list for single entries)."""
        if self.allows_multiple:
            return list(self.value)
        return [self.value]

    def matches(self, candidate: Any) -> bool:
        """Return True when *candidate* equals the value (or any stored value)."""
        return any(_values_equal(stored, candidate) for stored in self.values())


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _values_equal(stored: Any, candidate: Any) -> bool:
    """Compare two annotation values; NaN equals NaN, uncomparable values never match."""
    if stored is candidate:
        return True
    try:
        if bool(stored == candidate):
            return True
    except (TypeError, ValueError):
        return False
    return _is_nan(stored) and _is_nan(candidate)


__all__ = ["AnnotationEntry"]
