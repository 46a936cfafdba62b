"""Static registration table mapping enum members to their annotations.

Annotations are declared once, at import time, next to the enum they
describe::

    registry = AnnotationRegistry()

    @registry.annotate(
        RED=StringValue("FF0000"),
        COMBO=[KeyValuePairValue("a", "1"), KeyValuePairValue("b", "2")],
    )
    class Color(enum.Enum):
        RED = 1
        COMBO = 2

The registry is the introspection collaborator of the extraction engine: it
lists the members of an enum type and hands out the annotations registered
for one member, in declaration order.
"""

from __future__ import annotations

import enum
import logging
import threading
from typing import Any, Callable, Dict, Iterable, List, Protocol, Sequence, Tuple, TypeVar

from ..core.validation import validate_enum_type, validate_member
from ..utils.exceptions import AnnotationError
from .values import ValueAnnotation

_LOGGER = logging.getLogger(__name__)

E = TypeVar("E", bound=enum.Enum)


class AnnotationSource(Protocol):
    """Protocol describing what the extraction engine reads about an enum."""

    def list_members(self, enum_type: type[enum.Enum]) -> List[str]:  # pragma: no cover - protocol
        """Return member names of *enum_type* in declaration order."""
        ...

    def get_annotations(
        self, enum_type: type[enum.Enum], member_name: str
    ) -> Sequence[ValueAnnotation]:  # pragma: no cover - protocol
        """Return the annotations attached to one member, in declaration order."""
        ...


def _as_annotation_list(value: Any, *, member_name: str) -> List[ValueAnnotation]:
    """Normalise a single annotation or an iterable of annotations."""
    items: Iterable[Any] = (value,) if isinstance(value, ValueAnnotation) else value
    try:
        annotations = list(items)
    except TypeError as exc:
        raise AnnotationError(
            f"Annotations for {member_name!r} must be a ValueAnnotation or an iterable of them.",
            details={"member": member_name, "type": type(value).__name__},
        ) from exc
    for annotation in annotations:
        if not isinstance(annotation, ValueAnnotation):
            raise AnnotationError(
                f"Annotations for {member_name!r} must be ValueAnnotation instances.",
                details={"member": member_name, "type": type(annotation).__name__},
            )
    return annotations


class AnnotationRegistry:
    """Thread-safe table of ``enum type -> member name -> annotations``."""

    def __init__(self) -> None:
        self._table: Dict[type[enum.Enum], Dict[str, List[ValueAnnotation]]] = {}
        self._lock = threading.RLock()

    def register(self, member: enum.Enum, *annotations: ValueAnnotation) -> None:
        """Append *annotations* to those already registered for *member*."""
        validate_member(member)
        checked = _as_annotation_list(annotations, member_name=member.name)
        enum_type = type(member)
        with self._lock:
            by_member = self._table.setdefault(enum_type, {})
            by_member.setdefault(member.name, []).extend(checked)
        _LOGGER.debug(
            "Registered %d annotation(s) for %s.%s", len(checked), enum_type.__name__, member.name
        )

    def annotate(self, **by_member_name: Any) -> Callable[[type[E]], type[E]]:
        """Return a class decorator registering annotations by member name.

        Each keyword names a member; its value is one annotation or an
        iterable of annotations.
        """

        def decorator(enum_type: type[E]) -> type[E]:
            validate_enum_type(enum_type)
            members = enum_type.__members__
            unknown = sorted(set(by_member_name) - set(members))
            if unknown:
                raise AnnotationError(
                    f"Unknown member(s) for {enum_type.__name__}: {', '.join(unknown)}.",
                    details={"enum_type": enum_type.__name__, "members": unknown},
                )
            normalised = {
                name: _as_annotation_list(value, member_name=name)
                for name, value in by_member_name.items()
            }
            for name, annotations in normalised.items():
                self.register(members[name], *annotations)
            return enum_type

        return decorator

    def list_members(self, enum_type: type[enum.Enum]) -> List[str]:
        """Return member names of *enum_type* in declaration order (aliases excluded)."""
        return [member.name for member in enum_type]

    def get_annotations(self, enum_type: type[enum.Enum], member_name: str) -> Tuple[ValueAnnotation, ...]:
        """Return the annotations registered for ``enum_type[member_name]``."""
        with self._lock:
            return tuple(self._table.get(enum_type, {}).get(member_name, ()))

    def registered_types(self) -> Tuple[type[enum.Enum], ...]:
        """Return every enum type that has at least one registration."""
        with self._lock:
            return tuple(self._table)

    def __contains__(self, enum_type: object) -> bool:
        with self._lock:
            return enum_type in self._table


__all__ = ["AnnotationRegistry", "AnnotationSource"]
