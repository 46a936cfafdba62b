"""Query surface of the enum metadata cache.

:class:`EnumCache` composes the store, the caching policy and the extraction
engine. Arguments are validated here, before any cache state is touched;
absence of metadata is never an error and yields the declared type's zero
value (or an empty list for multi-valued lookups).

Examples
--------
>>> import enum
>>> from enum_metadata.annotations import AnnotationRegistry, StringValue
>>> registry = AnnotationRegistry()
>>> @registry.annotate(RED=StringValue("FF0000"))
... class Color(enum.Enum):
...     RED = 1
...     GREEN = 2
>>> cache = EnumCache(registry, CachingMethod.ON_FIRST_USE)
>>> cache.get_string_value(Color.RED)
'FF0000'
>>> cache.get_integer_value(Color.RED)
0
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict, List, Optional, TypeVar

from ..annotations.registry import AnnotationSource
from ..annotations.values import KeyValuePair, Long
from ..core.validation import (
    is_enum_type,
    validate_enum_type,
    validate_member,
    validate_not_none,
)
from .entries import AnnotationEntry
from .policy import CachingMethod, CachingPolicyController, EnumCacheOptions
from .store import CacheMetrics, Entries, EnumMetadataStore

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=enum.Enum)

_MISSING = object()

_ZERO_VALUES: Dict[Any, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    Long: Long(0),
}


def zero_value(declared_type: Any) -> Any:
    """Return the "not found" value for *declared_type* (``None`` for non-numeric types)."""
    return _ZERO_VALUES.get(declared_type)


def _coerce_options(options: EnumCacheOptions | CachingMethod | str | None) -> EnumCacheOptions:
    if options is None:
        return EnumCacheOptions()
    if isinstance(options, EnumCacheOptions):
        return options
    return EnumCacheOptions(caching_method=CachingMethod.parse(options))


class EnumCache:
    """Caching system for enum members annotated with value annotations.

    Parameters
    ----------
    source : AnnotationSource
        Where member annotations are read from, typically an
        :class:`~enum_metadata.annotations.AnnotationRegistry`.
    options : EnumCacheOptions, CachingMethod or str, optional
        Caching configuration. Defaults to ``CachingMethod.EXPLICIT``.
    """

    def __init__(
        self,
        source: AnnotationSource,
        options: EnumCacheOptions | CachingMethod | str | None = None,
    ) -> None:
        validate_not_none(source, "source")
        self.options = _coerce_options(options)
        self._store = EnumMetadataStore(telemetry=self.options.telemetry)
        self._policy = CachingPolicyController(self.options.caching_method, self._store, source)

    @property
    def caching_method(self) -> CachingMethod:
        """Return the method fixed at construction."""
        return self.options.caching_method

    @property
    def metrics(self) -> CacheMetrics:
        """Return the telemetry counters of the underlying store."""
        return self._store.metrics

    # ------------------------------------------------------------------
    # Typed getters
    # ------------------------------------------------------------------
    def get_boolean_value(self, member: enum.Enum) -> bool:
        """Get the boolean value of *member*, ``False`` when absent."""
        return self.get_value(member, bool)

    def get_double_value(self, member: enum.Enum) -> float:
        """Get the double value of *member*, ``0.0`` when absent."""
        return self.get_value(member, float)

    def get_integer_value(self, member: enum.Enum) -> int:
        """Get the integer value of *member*, ``0`` when absent."""
        return self.get_value(member, int)

    def get_long_value(self, member: enum.Enum) -> int:
        """Get the 64-bit value of *member* as a Python ``int``, ``0`` when absent."""
        return int(self.get_value(member, Long))

    def get_string_value(self, member: enum.Enum) -> Optional[str]:
        """Get the string value of *member*, ``None`` when absent."""
        return self.get_value(member, str)

    def get_key_value_pairs(self, member: enum.Enum) -> List[KeyValuePair]:
        """Get the key/value pairs of *member* in declaration order."""
        return self.get_values(member, KeyValuePair)

    def get_value(self, member: enum.Enum, declared_type: Any, default: Any = _MISSING) -> Any:
        """Return the single-valued entry of *declared_type* for *member*.

        Parameters
        ----------
        member : enum.Enum
            Member to look up; populated per the caching method on a miss.
        declared_type : type
            Declared type of the wanted annotation (``str``, ``int``, ...).
        default : Any, optional
            Returned when no such entry exists. Defaults to the zero value of
            *declared_type*.

        Raises
        ------
        NullArgumentError
            If *member* is ``None``.
        """
        for entry in self._entries_for(member):
            if entry.declared_type == declared_type and not entry.allows_multiple:
                return entry.value
        return zero_value(declared_type) if default is _MISSING else default

    def get_values(self, member: enum.Enum, declared_type: Any) -> List[Any]:
        """Return the non-``None`` values of the multi-valued entry of *declared_type*, or ``[]``."""
        for entry in self._entries_for(member):
            if entry.declared_type == declared_type and entry.allows_multiple:
                return [value for value in entry.values() if value is not None]
        return []

    # ------------------------------------------------------------------
    # Reverse lookup
    # ------------------------------------------------------------------
    def find_enum_value_by_attribute_value(
        self, enum_type: type[E], declared_type: Any, value: Any
    ) -> Optional[E]:
        """Return the first member carrying *value* as *declared_type*, else ``None``.

        The type must be cached with :meth:`cache_enum` unless the caching
        method is ``WHOLE_TYPE_ON_FIRST_USE``, which populates it first.
        Multi-valued entries match when any of their values equals *value*.

        Raises
        ------
        InvalidEnumTypeError
            If *enum_type* is not an enum.
        """
        validate_enum_type(enum_type)
        if not self._policy.ensure_type_for_reverse_lookup(enum_type):
            logger.debug("Reverse lookup on uncached %s", enum_type.__name__)
            return None
        members = self._store.scan_members(enum_type)
        for member in enum_type:
            for entry in members.get(member, ()):
                if entry.declared_type == declared_type and entry.matches(value):
                    return member
        return None

    def get_enum_value_by_attribute_value(
        self, enum_type: type[E], declared_type: Any, value: Any
    ) -> Optional[E]:
        """Like :meth:`find_enum_value_by_attribute_value`, but fall back to the default member.

        The default member is the first declared member of *enum_type*, so a
        miss cannot be told apart from a match on that member; prefer the
        ``find_`` variant when the difference matters.
        """
        found = self.find_enum_value_by_attribute_value(enum_type, declared_type, value)
        if found is not None:
            return found
        return next(iter(enum_type), None)

    # ------------------------------------------------------------------
    # Explicit population and probes
    # ------------------------------------------------------------------
    def cache_enum(self, enum_type: type[enum.Enum]) -> None:
        """Cache every member of *enum_type*; a no-op when it is already cached.

        Raises
        ------
        NotAnEnumTypeError
            If *enum_type* is not an enum.
        """
        validate_enum_type(enum_type)
        self._policy.populate_type(enum_type)

    def cache_value(self, member: enum.Enum) -> List[AnnotationEntry]:
        """Cache *member* if needed and return its entries.

        Raises
        ------
        NullArgumentError
            If *member* is ``None``.
        NotAnEnumTypeError
            If *member* is not an enum member.
        """
        validate_member(member)
        return list(self._policy.populate_member(member))

    def is_enum_cached(self, target: Any) -> bool:
        """Return whether *target* is cached; never raises.

        For an enum type this means the whole type was cached; for a member,
        that its own entries were committed.
        """
        if target is None:
            return False
        if is_enum_type(target):
            return self._store.is_type_cached(target)
        if isinstance(target, enum.Enum):
            return self._store.is_member_cached(type(target), target)
        return False

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    def _entries_for(self, member: enum.Enum) -> Entries:
        validate_member(member)
        entries = self._policy.resolve(member)
        return entries if entries is not None else ()


__all__ = ["EnumCache", "zero_value"]
