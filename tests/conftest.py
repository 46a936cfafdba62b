"""Shared pytest fixtures for the enum metadata tests."""

from __future__ import annotations

import enum
from typing import Callable

import pytest

from enum_metadata.annotations import (
    AnnotationRegistry,
    BooleanValue,
    DoubleValue,
    IntegerValue,
    KeyValuePairValue,
    LongValue,
    StringValue,
)
from enum_metadata.cache import CachingMethod, EnumCache, EnumCacheOptions

SAMPLE_REGISTRY = AnnotationRegistry()


@SAMPLE_REGISTRY.annotate(
    BOOLEAN_VALUE=BooleanValue(True),
    DOUBLE_VALUE=DoubleValue(5.5),
    INTEGER_VALUE=IntegerValue(10),
    KEY_VALUE_PAIR_VALUES=[
        KeyValuePairValue("firstKey", "firstValue"),
        KeyValuePairValue("secondKey", "secondValue"),
    ],
    LONG_VALUE=LongValue(100_000_000_000_000_000),
    STRING_VALUE=StringValue("Value of the string"),
)
class SampleEnum(enum.Enum):
    UNDEFINED = 0
    BOOLEAN_VALUE = 1
    DOUBLE_VALUE = 2
    INTEGER_VALUE = 3
    KEY_VALUE_PAIR_VALUES = 4
    LONG_VALUE = 5
    STRING_VALUE = 6


@SAMPLE_REGISTRY.annotate(
    RED=StringValue("FF0000"),
    GREEN=[StringValue("00FF00"), IntegerValue(2)],
    BLUE=[StringValue("0000FF"), IntegerValue(3)],
)
class Color(enum.Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


@SAMPLE_REGISTRY.annotate(
    COMBO=[KeyValuePairValue("a", "1"), KeyValuePairValue("b", "2")],
    SINGLE=KeyValuePairValue("c", "3"),
)
class Tags(enum.Enum):
    NONE = 0
    COMBO = 1
    SINGLE = 2


class NotAnnotated(enum.Enum):
    FIRST = 1
    SECOND = 2


@pytest.fixture
def registry() -> AnnotationRegistry:
    """Registry shared by the sample enums of this module."""
    return SAMPLE_REGISTRY


@pytest.fixture
def sample_enum() -> type[SampleEnum]:
    return SampleEnum


@pytest.fixture
def color() -> type[Color]:
    return Color


@pytest.fixture
def tags() -> type[Tags]:
    return Tags


@pytest.fixture
def not_annotated() -> type[NotAnnotated]:
    return NotAnnotated


@pytest.fixture
def make_cache(registry) -> Callable[..., EnumCache]:
    """Build a fresh cache over the sample registry with the given caching method."""

    def factory(method: CachingMethod | str = CachingMethod.EXPLICIT, **kwargs) -> EnumCache:
        return EnumCache(registry, EnumCacheOptions(caching_method=method, **kwargs))

    return factory


@pytest.fixture
def explicit_cache(make_cache) -> EnumCache:
    return make_cache(CachingMethod.EXPLICIT)


@pytest.fixture
def lazy_cache(make_cache) -> EnumCache:
    return make_cache(CachingMethod.ON_FIRST_USE)


@pytest.fixture
def eager_cache(make_cache) -> EnumCache:
    return make_cache(CachingMethod.WHOLE_TYPE_ON_FIRST_USE)
