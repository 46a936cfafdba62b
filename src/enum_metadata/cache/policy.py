"""Caching policy: when a cache miss triggers population, and how much.

``CachingMethod.EXPLICIT``
    Misses are never populated automatically; callers use
    ``EnumCache.cache_enum`` or ``EnumCache.cache_value`` first.
``CachingMethod.ON_FIRST_USE``
    A miss on one member populates that member only.
``CachingMethod.WHOLE_TYPE_ON_FIRST_USE``
    A miss on any member populates every member of its type in one commit.

Reverse lookups scan every member of a type, so only
``WHOLE_TYPE_ON_FIRST_USE`` populates before a reverse lookup; under the other
methods the type must already have been cached with ``cache_enum``.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

from ..annotations.registry import AnnotationSource
from ..core.config_helpers import normalise_token, read_pyproject_section
from ..logging import describe_type, logging_context
from ..utils.exceptions import ConfigurationError
from .extraction import extract_entries, extract_enum
from .store import Entries, EnumMetadataStore, TelemetryCallback

logger = logging.getLogger(__name__)

ENV_VAR = "EM_CACHING_METHOD"
PYPROJECT_SECTION = ("tool", "enum_metadata")


class CachingMethod(enum.Enum):
    """Method used to populate the enum cache on a miss."""

    EXPLICIT = "explicit"
    ON_FIRST_USE = "on_first_use"
    WHOLE_TYPE_ON_FIRST_USE = "whole_type_on_first_use"

    @classmethod
    def parse(cls, value: Any) -> "CachingMethod":
        """Return the method named by *value* (a member, or its value in any case/dash style)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = normalise_token(value)
            for method in cls:
                if token in (method.value, method.name.lower()):
                    return method
        raise ConfigurationError(
            f"Unknown caching method: {value!r}.",
            details={"value": repr(value), "allowed": [method.value for method in cls]},
        )


@dataclass(frozen=True)
class EnumCacheOptions:
    """Configuration settings for :class:`~enum_metadata.cache.EnumCache`.

    Parameters
    ----------
    caching_method : CachingMethod
        When misses are populated. Default: ``CachingMethod.EXPLICIT``.
    telemetry : TelemetryCallback | None
        Optional callback for cache events. Default: None.
    """

    caching_method: CachingMethod = CachingMethod.EXPLICIT
    telemetry: TelemetryCallback | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "caching_method", CachingMethod.parse(self.caching_method))

    @classmethod
    def from_env(cls, base: "EnumCacheOptions | None" = None) -> "EnumCacheOptions":
        """Merge an ``EM_CACHING_METHOD`` override with ``base`` defaults."""
        cfg = base if base is not None else cls()
        raw = os.getenv(ENV_VAR)
        if raw is None or not raw.strip():
            return cfg
        return replace(cfg, caching_method=CachingMethod.parse(raw))

    @classmethod
    def from_pyproject(
        cls, base: "EnumCacheOptions | None" = None, *, root: Path | None = None
    ) -> "EnumCacheOptions":
        """Merge ``[tool.enum_metadata]`` settings from ``pyproject.toml`` with ``base``."""
        cfg = base if base is not None else cls()
        section: Mapping[str, Any] = read_pyproject_section(PYPROJECT_SECTION, root=root)
        if "caching_method" not in section:
            return cfg
        return replace(cfg, caching_method=CachingMethod.parse(section["caching_method"]))

    @classmethod
    def resolve(cls, *, root: Path | None = None) -> "EnumCacheOptions":
        """Return defaults overlaid with pyproject settings, then the environment."""
        return cls.from_env(cls.from_pyproject(root=root))


class CachingPolicyController:
    """Decide and perform population on a cache miss according to the configured method."""

    def __init__(
        self, caching_method: CachingMethod, store: EnumMetadataStore, source: AnnotationSource
    ) -> None:
        self.caching_method = caching_method
        self._store = store
        self._source = source

    def resolve(self, member: enum.Enum) -> Entries | None:
        """Return the entries of *member*, populating per policy; ``None`` when refused."""
        enum_type = type(member)
        entries, found = self._store.try_get(enum_type, member)
        if found:
            return entries
        if self.caching_method is CachingMethod.ON_FIRST_USE:
            return self.populate_member(member)
        if self.caching_method is CachingMethod.WHOLE_TYPE_ON_FIRST_USE:
            self.populate_type(enum_type)
            committed = self._store.peek(enum_type, member)
            return committed if committed is not None else ()
        return None

    def ensure_type_for_reverse_lookup(self, enum_type: type[enum.Enum]) -> bool:
        """Populate *enum_type* when the method allows it; return whether it is type-cached."""
        if self._store.is_type_cached(enum_type):
            return True
        if self.caching_method is CachingMethod.WHOLE_TYPE_ON_FIRST_USE:
            self.populate_type(enum_type)
            return True
        return False

    def populate_member(self, member: enum.Enum) -> Entries:
        """Extract and commit *member*; concurrent callers adopt the first commit."""
        enum_type = type(member)
        with self._store.population_lock(enum_type):
            committed = self._store.peek(enum_type, member)
            if committed is not None:
                return committed
            with logging_context(
                enum_type=describe_type(enum_type),
                member=member.name,
                caching_method=self.caching_method.value,
                operation="populate_member",
            ):
                extracted = extract_entries(enum_type, member, self._source)
                logger.debug("Caching %d entries for %s", len(extracted), member)
                return self._store.put(enum_type, member, extracted)

    def populate_type(self, enum_type: type[enum.Enum]) -> None:
        """Extract every member of *enum_type* and commit them together."""
        with self._store.population_lock(enum_type):
            if self._store.is_type_cached(enum_type):
                return
            with logging_context(
                enum_type=describe_type(enum_type),
                caching_method=self.caching_method.value,
                operation="populate_type",
            ):
                extracted = extract_enum(enum_type, self._source)
                logger.debug("Caching %d members of %s", len(extracted), enum_type.__name__)
                self._store.put_whole_type(enum_type, extracted)


__all__ = ["CachingMethod", "CachingPolicyController", "EnumCacheOptions"]
