"""Protocol describing the public query surface of the enum cache."""

from __future__ import annotations

import enum
from typing import Any, List, Optional, Protocol, TypeVar, runtime_checkable

from ..annotations.values import KeyValuePair
from .entries import AnnotationEntry

E = TypeVar("E", bound=enum.Enum)


@runtime_checkable
class EnumCacheProtocol(Protocol):
    """Minimal contract implemented by :class:`~enum_metadata.cache.EnumCache`."""

    def get_boolean_value(self, member: enum.Enum) -> bool:  # pragma: no cover - protocol
        """Return the boolean value stored for *member*."""
        ...

    def get_double_value(self, member: enum.Enum) -> float:  # pragma: no cover - protocol
        """Return the double value stored for *member*."""
        ...

    def get_integer_value(self, member: enum.Enum) -> int:  # pragma: no cover - protocol
        """Return the integer value stored for *member*."""
        ...

    def get_long_value(self, member: enum.Enum) -> int:  # pragma: no cover - protocol
        """Return the 64-bit value stored for *member*."""
        ...

    def get_string_value(self, member: enum.Enum) -> Optional[str]:  # pragma: no cover - protocol
        """Return the string value stored for *member*."""
        ...

    def get_key_value_pairs(self, member: enum.Enum) -> List[KeyValuePair]:  # pragma: no cover - protocol
        """Return the key/value pairs stored for *member*."""
        ...

    def get_value(self, member: enum.Enum, declared_type: Any, default: Any = ...) -> Any:  # pragma: no cover - protocol
        """Return the single value of *declared_type* stored for *member*."""
        ...

    def get_values(self, member: enum.Enum, declared_type: Any) -> List[Any]:  # pragma: no cover - protocol
        """Return the values of *declared_type* stored for *member*."""
        ...

    def get_enum_value_by_attribute_value(
        self, enum_type: type[E], declared_type: Any, value: Any
    ) -> Optional[E]:  # pragma: no cover - protocol
        """Return the member carrying *value*, or the default member."""
        ...

    def cache_enum(self, enum_type: type[enum.Enum]) -> None:  # pragma: no cover - protocol
        """Cache every member of *enum_type*."""
        ...

    def cache_value(self, member: enum.Enum) -> List[AnnotationEntry]:  # pragma: no cover - protocol
        """Cache *member* and return its entries."""
        ...

    def is_enum_cached(self, target: Any) -> bool:  # pragma: no cover - protocol
        """Return whether *target* is cached."""
        ...


__all__ = ["EnumCacheProtocol"]
