"""Derive :class:`AnnotationEntry` records from the annotations of enum members.

The extraction is a pure read of an :class:`~enum_metadata.annotations.AnnotationSource`:

1. fetch the annotations attached to the member, in declaration order;
2. group them by ``declared_type`` (groups keep first-seen order);
3. per group, read ``allows_multiple`` from the first annotation:

   * multi-valued groups become one entry holding every value, in
     declaration order, without de-duplication;
   * single-valued groups become one entry holding the first value; any
     later annotations of that type are ignored.

A member without annotations yields an empty list.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict, List

from ..annotations.registry import AnnotationSource
from ..annotations.values import ValueAnnotation
from ..core.validation import validate_enum_type, validate_member_of
from .entries import AnnotationEntry

logger = logging.getLogger(__name__)


def _group_by_declared_type(annotations: List[ValueAnnotation]) -> Dict[Any, List[ValueAnnotation]]:
    grouped: Dict[Any, List[ValueAnnotation]] = {}
    for annotation in annotations:
        grouped.setdefault(annotation.declared_type, []).append(annotation)
    return grouped


def extract_entries(
    enum_type: type[enum.Enum], member: enum.Enum, source: AnnotationSource
) -> List[AnnotationEntry]:
    """Return the metadata entries of *member*.

    Parameters
    ----------
    enum_type : type
        The enumerated type *member* belongs to.
    member : enum.Enum
        The member to extract.
    source : AnnotationSource
        Collaborator that lists the annotations attached to a member.

    Returns
    -------
    list of AnnotationEntry
        At most one entry per declared type; empty when nothing is attached.

    Raises
    ------
    InvalidEnumTypeError
        If *enum_type* is not an enum or *member* does not belong to it.
    """
    validate_enum_type(enum_type)
    validate_member_of(enum_type, member)

    annotations = list(source.get_annotations(enum_type, member.name))
    entries: List[AnnotationEntry] = []
    for declared_type, group in _group_by_declared_type(annotations).items():
        if group[0].allows_multiple:
            entries.append(
                AnnotationEntry(
                    declared_type=declared_type,
                    value=tuple(annotation.value for annotation in group),
                    allows_multiple=True,
                )
            )
            continue
        if len(group) > 1:
            logger.debug(
                "%s.%s carries %d single-valued %r annotations; keeping the first",
                enum_type.__name__,
                member.name,
                len(group),
                declared_type,
            )
        entries.append(
            AnnotationEntry(declared_type=declared_type, value=group[0].value, allows_multiple=False)
        )
    return entries


def extract_enum(
    enum_type: type[enum.Enum], source: AnnotationSource
) -> Dict[enum.Enum, List[AnnotationEntry]]:
    """Extract every member of *enum_type*, keyed by member in declaration order."""
    validate_enum_type(enum_type)
    return {
        enum_type[name]: extract_entries(enum_type, enum_type[name], source)
        for name in source.list_members(enum_type)
    }


__all__ = ["extract_entries", "extract_enum"]
