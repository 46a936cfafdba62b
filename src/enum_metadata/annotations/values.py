"""Value annotations that can be attached to enum members.

Each annotation is a small frozen dataclass carrying a ``value`` together
with two class-level facts read by the extraction engine:

* ``declared_type``: the type tag that groups annotations of the same kind
  and selects them again in ``EnumCache.get_value(member, declared_type)``.
* ``allows_multiple``: whether several annotations of the same declared type
  on one member collapse into a list-valued entry.

Custom annotations subclass :class:`ValueAnnotation`, set both class
attributes and optionally override :meth:`ValueAnnotation.coerce`.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, ClassVar, NamedTuple

import numpy as np

from ..utils.exceptions import AnnotationError

# 64-bit declared type for ``LongValue``; kept distinct from ``int`` so the
# integer and long lookups never shadow each other.
Long = np.int64

_INT32 = np.iinfo(np.int32)
_INT64 = np.iinfo(np.int64)


class KeyValuePair(NamedTuple):
    """A string key with an arbitrary value, stored by :class:`KeyValuePairValue`."""

    key: str
    value: Any


@dataclass(frozen=True)
class ValueAnnotation:
    """Base class for all value annotations.

    Attributes
    ----------
    value : Any
        The coerced annotation payload.
    declared_type : type
        Class-level type tag of ``value``.
    allows_multiple : bool
        Class-level multiplicity flag.
    """

    value: Any

    declared_type: ClassVar[Any] = None
    allows_multiple: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if type(self).declared_type is None:
            raise AnnotationError(
                f"{type(self).__name__} must define a declared_type.",
                details={"annotation": type(self).__name__},
            )
        object.__setattr__(self, "value", self.coerce(self.value))

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Validate *value* and return the representation to store."""
        return value

    @classmethod
    def _reject(cls, value: Any, requirement: str) -> AnnotationError:
        return AnnotationError(
            f"Invalid value for {cls.__name__}: {value!r} ({requirement}).",
            details={"annotation": cls.__name__, "value": repr(value), "requirement": requirement},
        )


@dataclass(frozen=True)
class BooleanValue(ValueAnnotation):
    """Boolean value annotation."""

    declared_type: ClassVar[Any] = bool

    @classmethod
    def coerce(cls, value: Any) -> bool:
        if not isinstance(value, (bool, np.bool_)):
            raise cls._reject(value, "bool")
        return bool(value)


@dataclass(frozen=True)
class DoubleValue(ValueAnnotation):
    """Double-precision floating point value annotation."""

    declared_type: ClassVar[Any] = float

    @classmethod
    def coerce(cls, value: Any) -> float:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise cls._reject(value, "real number")
        return float(value)


@dataclass(frozen=True)
class IntegerValue(ValueAnnotation):
    """32-bit signed integer value annotation."""

    declared_type: ClassVar[Any] = int

    @classmethod
    def coerce(cls, value: Any) -> int:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
            raise cls._reject(value, "integer")
        if not _INT32.min <= int(value) <= _INT32.max:
            raise cls._reject(value, "32-bit signed range")
        return int(value)


@dataclass(frozen=True)
class LongValue(ValueAnnotation):
    """64-bit signed integer value annotation, stored as :data:`Long`."""

    declared_type: ClassVar[Any] = Long

    @classmethod
    def coerce(cls, value: Any) -> np.int64:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
            raise cls._reject(value, "integer")
        if not _INT64.min <= int(value) <= _INT64.max:
            raise cls._reject(value, "64-bit signed range")
        return Long(value)


@dataclass(frozen=True)
class StringValue(ValueAnnotation):
    """String value annotation; blank strings are rejected."""

    declared_type: ClassVar[Any] = str

    @classmethod
    def coerce(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise cls._reject(value, "non-blank str")
        return value


@dataclass(frozen=True, init=False)
class KeyValuePairValue(ValueAnnotation):
    """Key/value pair annotation; a member may carry any number of them."""

    declared_type: ClassVar[Any] = KeyValuePair
    allows_multiple: ClassVar[bool] = True

    def __init__(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise self._reject(key, "str key")
        object.__setattr__(self, "value", KeyValuePair(key, value))

    @property
    def key(self) -> str:
        return self.value.key


__all__ = [
    "BooleanValue",
    "DoubleValue",
    "IntegerValue",
    "KeyValuePair",
    "KeyValuePairValue",
    "Long",
    "LongValue",
    "StringValue",
    "ValueAnnotation",
]
