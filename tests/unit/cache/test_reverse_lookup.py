from __future__ import annotations

import enum

import numpy as np
import pytest

from enum_metadata.annotations import (
    AnnotationRegistry,
    DoubleValue,
    KeyValuePair,
    KeyValuePairValue,
    Long,
)
from enum_metadata.cache import CachingMethod, EnumCache
from enum_metadata.utils.exceptions import InvalidEnumTypeError


def test_reverse_lookup_finds_every_member_of_a_cached_type(explicit_cache, sample_enum):
    explicit_cache.cache_enum(sample_enum)
    cases = [
        (bool, True, sample_enum.BOOLEAN_VALUE),
        (float, 5.5, sample_enum.DOUBLE_VALUE),
        (int, 10, sample_enum.INTEGER_VALUE),
        (Long, 100_000_000_000_000_000, sample_enum.LONG_VALUE),
        (str, "Value of the string", sample_enum.STRING_VALUE),
        (KeyValuePair, KeyValuePair("secondKey", "secondValue"), sample_enum.KEY_VALUE_PAIR_VALUES),
    ]
    for declared_type, value, expected in cases:
        assert explicit_cache.find_enum_value_by_attribute_value(sample_enum, declared_type, value) is expected
        assert explicit_cache.get_enum_value_by_attribute_value(sample_enum, declared_type, value) is expected


def test_reverse_lookup_round_trips_each_members_own_value(explicit_cache, color):
    explicit_cache.cache_enum(color)
    for member in color:
        recorded = explicit_cache.get_string_value(member)
        assert explicit_cache.find_enum_value_by_attribute_value(color, str, recorded) is member


def test_reverse_lookup_matches_plain_tuples_for_key_value_pairs(explicit_cache, tags):
    explicit_cache.cache_enum(tags)
    assert explicit_cache.find_enum_value_by_attribute_value(tags, KeyValuePair, ("b", "2")) is tags.COMBO
    assert explicit_cache.find_enum_value_by_attribute_value(tags, KeyValuePair, ("c", "3")) is tags.SINGLE


def test_reverse_lookup_only_compares_the_requested_declared_type(explicit_cache, color):
    explicit_cache.cache_enum(color)
    # GREEN carries IntegerValue(2); the string "2" and the bool True must not match it
    assert explicit_cache.find_enum_value_by_attribute_value(color, int, 2) is color.GREEN
    assert explicit_cache.find_enum_value_by_attribute_value(color, str, "2") is None
    assert explicit_cache.find_enum_value_by_attribute_value(color, bool, True) is None


def test_reverse_lookup_miss_returns_default_member(explicit_cache, color):
    explicit_cache.cache_enum(color)
    assert explicit_cache.find_enum_value_by_attribute_value(color, str, "123456") is None
    assert explicit_cache.get_enum_value_by_attribute_value(color, str, "123456") is color.RED


@pytest.mark.parametrize("cache_fixture", ["explicit_cache", "lazy_cache"])
def test_reverse_lookup_does_not_populate_without_cache_enum(request, cache_fixture, color):
    cache = request.getfixturevalue(cache_fixture)
    assert cache.find_enum_value_by_attribute_value(color, str, "0000FF") is None
    assert cache.get_enum_value_by_attribute_value(color, str, "0000FF") is color.RED
    assert not cache.is_enum_cached(color)


def test_reverse_lookup_ignores_member_level_population(lazy_cache, color):
    assert lazy_cache.get_string_value(color.BLUE) == "0000FF"
    assert lazy_cache.find_enum_value_by_attribute_value(color, str, "0000FF") is None


def test_reverse_lookup_populates_under_whole_type_on_first_use(eager_cache, color):
    assert eager_cache.find_enum_value_by_attribute_value(color, str, "0000FF") is color.BLUE
    assert eager_cache.is_enum_cached(color)
    assert eager_cache.metrics.type_populations == 1


def test_reverse_lookup_counts_scans(explicit_cache, color):
    explicit_cache.cache_enum(color)
    explicit_cache.find_enum_value_by_attribute_value(color, str, "FF0000")
    explicit_cache.find_enum_value_by_attribute_value(color, str, "00FF00")
    assert explicit_cache.metrics.reverse_lookups == 2


def test_reverse_lookup_rejects_non_enum_type(explicit_cache):
    with pytest.raises(InvalidEnumTypeError):
        explicit_cache.find_enum_value_by_attribute_value(dict, str, "x")
    with pytest.raises(InvalidEnumTypeError):
        explicit_cache.get_enum_value_by_attribute_value(None, str, "x")


def test_reverse_lookup_skips_values_that_cannot_be_compared():
    registry = AnnotationRegistry()

    @registry.annotate(
        ARRAY=KeyValuePairValue("k", np.array([1, 2])),
        TEXT=KeyValuePairValue("k", "x"),
    )
    class Payload(enum.Enum):
        ARRAY = 1
        TEXT = 2

    cache = EnumCache(registry, CachingMethod.WHOLE_TYPE_ON_FIRST_USE)
    assert cache.get_enum_value_by_attribute_value(Payload, KeyValuePair, ("k", "x")) is Payload.TEXT
    assert cache.find_enum_value_by_attribute_value(Payload, KeyValuePair, ("k", "y")) is None
    assert cache.get_enum_value_by_attribute_value(Payload, KeyValuePair, ("k", "y")) is Payload.ARRAY


def test_reverse_lookup_finds_nan_doubles():
    registry = AnnotationRegistry()

    @registry.annotate(ONE=DoubleValue(1.0), UNKNOWN=DoubleValue(float("nan")))
    class Reading(enum.Enum):
        ONE = 1
        UNKNOWN = 2

    cache = EnumCache(registry, CachingMethod.WHOLE_TYPE_ON_FIRST_USE)
    recorded = cache.get_double_value(Reading.UNKNOWN)
    assert cache.find_enum_value_by_attribute_value(Reading, float, recorded) is Reading.UNKNOWN
    assert cache.find_enum_value_by_attribute_value(Reading, float, float("nan")) is Reading.UNKNOWN
