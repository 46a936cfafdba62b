"""Custom exception hierarchy for enum_metadata.

These exceptions standardize error signaling across the library.

All exceptions inherit from EnumMetadataError and support structured error
payloads via the ``details`` kwarg. Argument errors additionally inherit from
``TypeError`` so callers that already guard against the builtin keep working.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "EnumMetadataError",
    "ValidationError",
    "NullArgumentError",
    "InvalidEnumTypeError",
    "NotAnEnumTypeError",
    "AnnotationError",
    "ConfigurationError",
    "explain_exception",
]


class EnumMetadataError(Exception):
    """Base class for library-specific errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Attach structured error details alongside the user-facing message."""
        super().__init__(message)
        self.details: dict[str, Any] | None = details

    def __repr__(self) -> str:  # pragma: no cover - repr stability check in tests
        """Return the exception representation with the message payload."""
        cls = self.__class__.__name__
        return f"{cls}({super().__str__()!r})"


class ValidationError(EnumMetadataError):
    """Inputs or configuration failed validation."""


class NullArgumentError(ValidationError, TypeError):
    """A required member or value argument was ``None``."""


class InvalidEnumTypeError(ValidationError, TypeError):
    """A supplied type (or the type of a supplied member) is not an ``enum.Enum``."""


# Name used by the caching operations for the same failure.
NotAnEnumTypeError = InvalidEnumTypeError


class AnnotationError(ValidationError):
    """An annotation declaration or registration is malformed."""


class ConfigurationError(EnumMetadataError):
    """Invalid or conflicting configuration (e.g., an unknown caching method)."""


def explain_exception(e: Exception) -> str:
    """Return a human-readable multi-line description of an exception.

    Formats library-specific ``EnumMetadataError`` instances with structured
    details for diagnostics and logging. For other exceptions, returns the
    standard string representation.

    Parameters
    ----------
    e : Exception
        The exception to format.

    Returns
    -------
    str
        Multi-line human-readable message.

    Examples
    --------
    >>> from enum_metadata.utils.exceptions import NullArgumentError, explain_exception
    >>> e = NullArgumentError("member must not be None", details={"param": "member"})
    >>> print(explain_exception(e))
    NullArgumentError: member must not be None
      Details: {'param': 'member'}
    """
    if isinstance(e, EnumMetadataError):
        lines = [f"{e.__class__.__name__}: {str(e)}"]
        if e.details is not None:
            lines.append(f"  Details: {e.details}")
        return "\n".join(lines)
    return str(e)
