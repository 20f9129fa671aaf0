"""Tests for the immutable address models, queries and builder."""

from dataclasses import FrozenInstanceError

import pytest

from woosmap_geocoder.domain import (
    Address,
    AddressBuilder,
    AddressCollection,
    AdminLevel,
    CollectionIsEmpty,
    Coordinates,
    Country,
    GeocodeQuery,
    InvalidArgument,
    ReverseQuery,
    WoosmapAddress,
    normalize_sub_locality_levels,
)


def make_address(**fields):
    return WoosmapAddress(
        provider_name="woosmap", coordinates=Coordinates(1.0, 2.0), **fields
    )


class TestCoordinates:
    def test_valid(self):
        coordinates = Coordinates(48.86, 2.38)
        assert coordinates.latitude == 48.86
        assert coordinates.longitude == 2.38

    @pytest.mark.parametrize("lat,lon", [(91, 0), (-91, 0), (0, 181), (0, -181)])
    def test_out_of_range(self, lat, lon):
        with pytest.raises(InvalidArgument):
            Coordinates(lat, lon)

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            Coordinates(1, 2).latitude = 3  # type: ignore[misc]


def test_country_needs_name_or_code():
    assert Country(code="FRA").name is None
    with pytest.raises(InvalidArgument):
        Country()


class TestSubLocalityLevels:
    def test_duplicates_are_collapsed(self):
        levels = normalize_sub_locality_levels(
            [{"level": 1, "name": "A"}, {"level": 1, "name": "A"}]
        )
        assert levels == (AdminLevel(1, "A"),)

    def test_empty_level_or_name_is_dropped(self):
        levels = normalize_sub_locality_levels(
            [
                {"level": 0, "name": "Zero"},
                {"level": None, "name": "None"},
                {"level": 2, "name": "", "code": ""},
                {"level": 3, "name": None, "code": None},
            ]
        )
        assert levels == ()

    def test_name_falls_back_to_code(self):
        levels = normalize_sub_locality_levels([{"level": 2, "name": "", "code": "XY"}])
        assert levels == (AdminLevel(2, "XY", "XY"),)

    def test_order_is_kept(self):
        levels = normalize_sub_locality_levels(
            [
                {"level": 2, "name": "B"},
                {"level": 1, "name": "A"},
                {"level": 2, "name": "B"},
            ]
        )
        assert [level.name for level in levels] == ["B", "A"]


class TestWoosmapAddress:
    def test_with_methods_return_copies(self):
        address = make_address()

        updated = (
            address.with_id("id-1")
            .with_location_type("ROOFTOP")
            .with_result_type(["route"])
            .with_formatted_address("Somewhere")
            .with_partial_match(True)
            .with_sub_locality_levels([{"level": 1, "name": "A"}])
        )

        assert address.id is None
        assert updated.id == "id-1"
        assert updated.location_type == "ROOFTOP"
        assert updated.result_type == ("route",)
        assert updated.formatted_address == "Somewhere"
        assert updated.is_partial_match()
        assert not address.is_partial_match()
        assert updated.sub_locality_levels == (AdminLevel(1, "A"),)

    def test_with_extensions(self):
        address = make_address().with_extensions({"park": "Parc", "ward": "W"})

        assert address.park == "Parc"
        assert address.extensions == {"park": "Parc", "ward": "W"}

    def test_with_unknown_extension(self):
        with pytest.raises(InvalidArgument):
            make_address().with_extensions({"galaxy": "Milky Way"})

    def test_to_dict(self):
        data = make_address(county="Paris").to_dict()

        assert data["coordinates"] == {"latitude": 1.0, "longitude": 2.0}
        assert data["county"] == "Paris"
        assert data["state"] is None


class TestAddressCollection:
    def test_sequence_behaviour(self):
        first, second = make_address(id="1"), make_address(id="2")
        collection = AddressCollection((first, second))

        assert len(collection) == 2
        assert list(collection) == [first, second]
        assert collection[1] is second
        assert collection.first() is first
        assert collection.slice(1).to_list() == [second]
        assert collection.slice(0, 1).to_list() == [first]
        assert not collection.is_empty()

    def test_first_on_empty(self):
        with pytest.raises(CollectionIsEmpty):
            AddressCollection().first()


class TestQueries:
    def test_geocode_query_defaults(self):
        query = GeocodeQuery.create("Paris")

        assert query.text == "Paris"
        assert query.limit == 5
        assert query.locale is None
        assert query.get_data("components") is None
        assert query.get_data("cc_format", "alpha2") == "alpha2"

    def test_get_data_keeps_explicit_none(self):
        query = GeocodeQuery.create("Paris").with_data("cc_format", None)

        assert query.get_data("cc_format", "alpha2") is None

    def test_with_methods_do_not_mutate(self):
        base = GeocodeQuery.create("Paris")
        query = base.with_locale("fr").with_limit(2).with_data("components", {"country": "FR"})

        assert base.locale is None
        assert base.data == {}
        assert query.locale == "fr"
        assert query.limit == 2
        assert query.get_data("components") == {"country": "FR"}

    def test_data_is_read_only(self):
        query = GeocodeQuery("Paris", data={"cc_format": "alpha3"})

        with pytest.raises(TypeError):
            query.data["cc_format"] = "alpha2"  # type: ignore[index]

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_text(self, text):
        with pytest.raises(InvalidArgument):
            GeocodeQuery.create(text)

    @pytest.mark.parametrize("limit", [0, -1, True, 2.5])
    def test_invalid_limit(self, limit):
        with pytest.raises(InvalidArgument):
            GeocodeQuery("Paris", limit=limit)

    def test_reverse_query(self):
        query = ReverseQuery.from_coordinates(48, 2).with_locale("fr")

        assert query.coordinates == Coordinates(48.0, 2.0)
        assert query.locale == "fr"
        assert query.limit == 5


class TestAddressBuilder:
    def test_build_address(self):
        builder = AddressBuilder("woosmap")
        builder.set_coordinates(48.86, 2.38).set_street_number("10").set_street_name(
            "Avenue Gambetta"
        ).set_postal_code("75020").set_locality("Paris").set_country(
            "France"
        ).set_country_code("FRA")

        address = builder.build()

        assert type(address) is Address
        assert address.street_name == "Avenue Gambetta"
        assert address.country == Country("France", "FRA")

    def test_admin_levels_sorted_and_last_wins(self):
        builder = AddressBuilder("woosmap").set_coordinates(0, 0)
        builder.add_admin_level(2, "Old")
        builder.add_admin_level(1, "Region", "R")
        builder.add_admin_level(2, "County", "C")

        address = builder.build()

        assert address.admin_levels == (
            AdminLevel(1, "Region", "R"),
            AdminLevel(2, "County", "C"),
        )

    def test_values_bag(self):
        builder = AddressBuilder("woosmap")
        builder.set_value("county", "Paris")

        assert builder.has_value("county")
        assert builder.get_value("county") == "Paris"
        assert builder.get_value("state", "default") == "default"

    def test_build_subclass_with_extra_fields(self):
        builder = AddressBuilder("woosmap").set_coordinates(0, 0)

        address = builder.build(WoosmapAddress, county="Paris")

        assert isinstance(address, WoosmapAddress)
        assert address.county == "Paris"

    def test_build_without_coordinates(self):
        with pytest.raises(InvalidArgument):
            AddressBuilder("woosmap").build()
