"""
Enum metadata (enum_metadata).

Attach typed value annotations to the members of Python enums and look them
up, forwards and in reverse, through a thread-safe cache with a configurable
population policy.
"""

import importlib
import logging as _logging

# Provide a default no-op handler to avoid "No handler" warnings for library users.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AnnotationRegistry",
    "BooleanValue",
    "CachingMethod",
    "DoubleValue",
    "EnumCache",
    "EnumCacheOptions",
    "IntegerValue",
    "KeyValuePair",
    "KeyValuePairValue",
    "Long",
    "LongValue",
    "StringValue",
    "ValueAnnotation",
]

_NAME_TO_MODULE = {
    "AnnotationRegistry": "annotations",
    "BooleanValue": "annotations",
    "DoubleValue": "annotations",
    "IntegerValue": "annotations",
    "KeyValuePair": "annotations",
    "KeyValuePairValue": "annotations",
    "Long": "annotations",
    "LongValue": "annotations",
    "StringValue": "annotations",
    "ValueAnnotation": "annotations",
    "CachingMethod": "cache",
    "EnumCache": "cache",
    "EnumCacheOptions": "cache",
}


def __getattr__(name: str):
    """Lazy import of the public API."""
    if name not in _NAME_TO_MODULE:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = importlib.import_module(f"{__name__}.{_NAME_TO_MODULE[name]}")
    value = getattr(module, name)
    globals()[name] = value
    return value
