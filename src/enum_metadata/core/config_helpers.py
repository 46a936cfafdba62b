"""Configuration parsing and coercion utilities for the enum cache.

This module provides helper functions for reading and parsing external
configuration sources like pyproject.toml and environment variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Sequence

try:
    import tomllib as _tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as _tomllib  # type: ignore[no-redef]


def read_pyproject_section(path: Sequence[str], *, root: Path | None = None) -> Dict[str, Any]:
    """Return a mapping from the requested ``pyproject.toml`` section.

    Parameters
    ----------
    path : Sequence[str]
        Nested keys to traverse in the pyproject.toml structure.
        For example, ``("tool", "enum_metadata")`` will navigate to
        ``[tool.enum_metadata]``.
    root : Path, optional
        Directory holding the ``pyproject.toml``. Defaults to the current
        working directory.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing the requested configuration section,
        or an empty dict if the file or the section does not exist.

    Examples
    --------
    >>> config = read_pyproject_section(("tool", "enum_metadata"))
    >>> if config:
    ...     print(f"Found config: {config}")
    """
    candidate = (root if root is not None else Path.cwd()) / "pyproject.toml"
    if not candidate.exists():
        return {}
    with candidate.open("rb") as fh:
        data = _tomllib.load(fh)

    cursor: Any = data
    for key in path:
        if isinstance(cursor, dict) and key in cursor:
            cursor = cursor[key]
        else:
            return {}
    if isinstance(cursor, dict):
        return dict(cursor)
    return {}


def normalise_token(value: str) -> str:
    """Fold a configuration token to ``lower_snake_case``.

    >>> normalise_token(" Whole-Type-On-First-Use ")
    'whole_type_on_first_use'
    """
    return value.strip().lower().replace("-", "_").replace(" ", "_")
