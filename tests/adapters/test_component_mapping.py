"""Tests for the component type dispatch tables."""

import pytest

from woosmap_geocoder.adapters.geocoding.component_mapping import (
    EXTENDED,
    STANDARD,
    ComponentField,
    get_profile,
)


@pytest.mark.parametrize(
    "tag,expected",
    [
        ("postal_code", ComponentField.POSTAL_CODE),
        ("locality", ComponentField.LOCALITY),
        ("postal_town", ComponentField.LOCALITY),
        ("country", ComponentField.COUNTRY),
        ("street_number", ComponentField.STREET_NUMBER),
        ("route", ComponentField.STREET_NAME),
        ("sublocality", ComponentField.SUB_LOCALITY),
    ],
)
def test_base_tags_are_shared_by_both_profiles(tag, expected):
    assert STANDARD.resolve(tag) == (expected, None)
    assert EXTENDED.resolve(tag) == (expected, None)


def test_standard_extensions():
    for tag in ("county", "political", "state"):
        assert STANDARD.resolve(tag) == (ComponentField.EXTENSION, None)
    assert STANDARD.resolve("airport") is None
    assert STANDARD.resolve("administrative_area_level_1") is None


def test_extended_extensions():
    for tag in ("airport", "park", "premise", "ward", "intersection", "political"):
        assert EXTENDED.resolve(tag) == (ComponentField.EXTENSION, None)
    assert EXTENDED.resolve("county") is None
    assert EXTENDED.resolve("state") is None


def test_numbered_tags_carry_their_level():
    assert EXTENDED.resolve("administrative_area_level_3") == (
        ComponentField.ADMIN_LEVEL,
        3,
    )
    assert STANDARD.resolve("sublocality_level_2") == (
        ComponentField.SUB_LOCALITY_LEVEL,
        2,
    )
    # range 1-5 is an API convention, not enforced here
    assert EXTENDED.resolve("sublocality_level_7") == (
        ComponentField.SUB_LOCALITY_LEVEL,
        7,
    )
    assert STANDARD.resolve("sublocality_level_") is None


def test_resolve_all_drops_unknown_tags():
    resolved = STANDARD.resolve_all(["locality", "floor", "political"])

    assert resolved == [
        ("locality", ComponentField.LOCALITY, None),
        ("political", ComponentField.EXTENSION, None),
    ]


def test_get_profile():
    assert get_profile("standard") is STANDARD
    assert get_profile("extended") is EXTENDED
    with pytest.raises(KeyError):
        get_profile("legacy")
