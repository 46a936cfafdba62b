"""Thread-safe storage for derived enum metadata.

The store is a two-level mapping ``enum type -> member -> entries``. It is the
only place where cache state changes, and it only ever grows:

* entries committed for a member are never replaced (first committer wins);
* whole-type commits swap in a fully built member map under the lock, so a
  reader sees either the previous map or the complete new one;
* a type counts as cached only once it went through :meth:`put_whole_type`.

Member maps are copy-on-write ``MappingProxyType`` views, which lets reverse
lookups scan a committed map without holding the lock.
"""

from __future__ import annotations

import contextlib
import enum
import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Set, Tuple

from .entries import AnnotationEntry

logger = logging.getLogger(__name__)

TelemetryCallback = Callable[[str, Mapping[str, Any]], None]

Entries = Tuple[AnnotationEntry, ...]

_EMPTY: Mapping[enum.Enum, Entries] = MappingProxyType({})


@dataclass(slots=True)
class CacheMetrics:
    """Telemetry counters aggregated by :class:`EnumMetadataStore`."""

    hits: int = 0
    misses: int = 0
    member_populations: int = 0
    type_populations: int = 0
    reverse_lookups: int = 0

    def snapshot(self) -> Mapping[str, int]:
        """Return a dictionary suitable for logging or JSON serialisation."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "member_populations": self.member_populations,
            "type_populations": self.type_populations,
            "reverse_lookups": self.reverse_lookups,
        }


class EnumMetadataStore:
    """Two-level mapping of enum types to member entries, safe for concurrent use."""

    def __init__(self, *, telemetry: TelemetryCallback | None = None) -> None:
        self._cache: Dict[type[enum.Enum], Mapping[enum.Enum, Entries]] = {}
        self._whole_types: Set[type[enum.Enum]] = set()
        self._population_locks: Dict[type[enum.Enum], threading.RLock] = {}
        self._lock = threading.RLock()
        self._telemetry = telemetry
        self.metrics = CacheMetrics()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def try_get(self, enum_type: type[enum.Enum], member: enum.Enum) -> Tuple[Entries, bool]:
        """Return ``(entries, found)`` for *member* without populating anything."""
        with self._lock:
            entries = self._cache.get(enum_type, _EMPTY).get(member)
            if entries is None:
                self.metrics.misses += 1
            else:
                self.metrics.hits += 1
        if entries is None:
            self._emit("cache_miss", {"enum_type": enum_type.__name__, "member": member.name})
            return (), False
        self._emit("cache_hit", {"enum_type": enum_type.__name__, "member": member.name})
        return entries, True

    def peek(self, enum_type: type[enum.Enum], member: enum.Enum) -> Entries | None:
        """Return the committed entries of *member* or ``None``, without touching metrics."""
        with self._lock:
            return self._cache.get(enum_type, _EMPTY).get(member)

    def is_type_cached(self, enum_type: type[enum.Enum]) -> bool:
        """Return True when *enum_type* was populated through :meth:`put_whole_type`."""
        with self._lock:
            return enum_type in self._whole_types

    def is_member_cached(self, enum_type: type[enum.Enum], member: enum.Enum) -> bool:
        """Return True when entries for *member* have been committed."""
        with self._lock:
            return member in self._cache.get(enum_type, _EMPTY)

    def scan_members(self, enum_type: type[enum.Enum]) -> Mapping[enum.Enum, Entries]:
        """Return the committed member map of *enum_type* for a reverse-lookup scan."""
        with self._lock:
            self.metrics.reverse_lookups += 1
            return self._cache.get(enum_type, _EMPTY)

    # ------------------------------------------------------------------
    # Commits
    # ------------------------------------------------------------------
    def put(self, enum_type: type[enum.Enum], member: enum.Enum, entries: Iterable[AnnotationEntry]) -> Entries:
        """Commit *entries* for *member* unless already present; return the committed entries."""
        with self._lock:
            current = self._cache.get(enum_type, _EMPTY)
            existing = current.get(member)
            if existing is not None:
                return existing
            committed = tuple(entries)
            updated = dict(current)
            updated[member] = committed
            self._cache[enum_type] = MappingProxyType(updated)
            self.metrics.member_populations += 1
        self._emit(
            "cache_populate_member",
            {"enum_type": enum_type.__name__, "member": member.name, "entries": len(committed)},
        )
        return committed

    def put_whole_type(
        self, enum_type: type[enum.Enum], member_entries: Mapping[enum.Enum, Iterable[AnnotationEntry]]
    ) -> None:
        """Commit the full member map of *enum_type* in one step.

        Members already committed individually keep their entries.
        """
        built = {member: tuple(entries) for member, entries in member_entries.items()}
        with self._lock:
            if enum_type in self._whole_types:
                return
            current = self._cache.get(enum_type, _EMPTY)
            merged = {member: current.get(member, entries) for member, entries in built.items()}
            for member, entries in current.items():
                merged.setdefault(member, entries)
            self._cache[enum_type] = MappingProxyType(merged)
            self._whole_types.add(enum_type)
            self.metrics.type_populations += 1
        self._emit("cache_populate_type", {"enum_type": enum_type.__name__, "members": len(merged)})

    @contextlib.contextmanager
    def population_lock(self, enum_type: type[enum.Enum]) -> Iterator[None]:
        """Serialize population of *enum_type* so concurrent misses extract once."""
        with self._lock:
            lock = self._population_locks.setdefault(enum_type, threading.RLock())
        with lock:
            yield

    def __len__(self) -> int:
        """Return the number of enum types with at least one committed member."""
        with self._lock:
            return len(self._cache)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    def _emit(self, event: str, payload: Mapping[str, Any]) -> None:
        """Send telemetry events when a callback is registered."""
        if self._telemetry is None:
            return
        try:  # telemetry is optional best effort
            self._telemetry(event, payload)
        except Exception as exc:
            logger.debug("Telemetry callback failed for %s: %s", event, exc)


__all__ = ["CacheMetrics", "EnumMetadataStore", "TelemetryCallback"]
