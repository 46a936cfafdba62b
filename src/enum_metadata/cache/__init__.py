"""Cache entry points.

Only the stable cache interfaces are exposed from the package root; symbols
are resolved lazily so importing a light-weight contract does not pull in
the whole cache implementation.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import-time only
    from .contracts import EnumCacheProtocol
    from .entries import AnnotationEntry
    from .enum_cache import EnumCache, zero_value
    from .extraction import extract_entries, extract_enum
    from .policy import CachingMethod, CachingPolicyController, EnumCacheOptions
    from .store import CacheMetrics, EnumMetadataStore, TelemetryCallback


__all__ = (
    "AnnotationEntry",
    "CacheMetrics",
    "CachingMethod",
    "CachingPolicyController",
    "EnumCache",
    "EnumCacheOptions",
    "EnumCacheProtocol",
    "EnumMetadataStore",
    "TelemetryCallback",
    "extract_entries",
    "extract_enum",
    "zero_value",
)

_NAME_TO_MODULE = {
    "AnnotationEntry": ("entries", "AnnotationEntry"),
    "CacheMetrics": ("store", "CacheMetrics"),
    "CachingMethod": ("policy", "CachingMethod"),
    "CachingPolicyController": ("policy", "CachingPolicyController"),
    "EnumCache": ("enum_cache", "EnumCache"),
    "EnumCacheOptions": ("policy", "EnumCacheOptions"),
    "EnumCacheProtocol": ("contracts", "EnumCacheProtocol"),
    "EnumMetadataStore": ("store", "EnumMetadataStore"),
    "TelemetryCallback": ("store", "TelemetryCallback"),
    "extract_entries": ("extraction", "extract_entries"),
    "extract_enum": ("extraction", "extract_enum"),
    "zero_value": ("enum_cache", "zero_value"),
}


def __getattr__(name: str) -> Any:
    """Lazily expose cache interfaces from the package root."""
    if name not in __all__:
        raise AttributeError(name)

    module_name, attr_name = _NAME_TO_MODULE[name]
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
