"""Shared utilities used across enum_metadata.

Re-exports the exception hierarchy so callers can import directly from
``enum_metadata.utils``.
"""

from .exceptions import (
    AnnotationError,
    ConfigurationError,
    EnumMetadataError,
    InvalidEnumTypeError,
    NotAnEnumTypeError,
    NullArgumentError,
    ValidationError,
    explain_exception,
)

__all__ = [
    "AnnotationError",
    "ConfigurationError",
    "EnumMetadataError",
    "InvalidEnumTypeError",
    "NotAnEnumTypeError",
    "NullArgumentError",
    "ValidationError",
    "explain_exception",
]
