"""Annotation declarations and the registration table that attaches them to enum members."""

from .registry import AnnotationRegistry, AnnotationSource
from .values import (
    BooleanValue,
    DoubleValue,
    IntegerValue,
    KeyValuePair,
    KeyValuePairValue,
    Long,
    LongValue,
    StringValue,
    ValueAnnotation,
)

__all__ = [
    "AnnotationRegistry",
    "AnnotationSource",
    "BooleanValue",
    "DoubleValue",
    "IntegerValue",
    "KeyValuePair",
    "KeyValuePairValue",
    "Long",
    "LongValue",
    "StringValue",
    "ValueAnnotation",
]
