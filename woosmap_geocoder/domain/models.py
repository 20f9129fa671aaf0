"""Immutable domain models for the Woosmap geocoder.

All models are frozen dataclasses with slots. Addresses are assembled
through the mutable AddressBuilder (see builder.py) and frozen once the
mapping of a raw result is complete.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Sequence

from .errors import CollectionIsEmpty, InvalidArgument


@dataclass(frozen=True, slots=True)
class Coordinates:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise InvalidArgument(
                f"Latitude must be between -90 and 90, got {self.latitude}",
                argument="latitude",
            )
        if not -180 <= self.longitude <= 180:
            raise InvalidArgument(
                f"Longitude must be between -180 and 180, got {self.longitude}",
                argument="longitude",
            )


@dataclass(frozen=True, slots=True)
class Country:
    """A country as reported by the provider.

    Attributes:
        name: Localized country name (component long_name)
        code: Country code (component short_name), alpha2 or alpha3
    """

    name: Optional[str] = None
    code: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name and not self.code:
            raise InvalidArgument(
                "A country must have either a name or a code", argument="country"
            )


@dataclass(frozen=True, slots=True)
class AdminLevel:
    """A numbered subdivision (administrative area or sublocality).

    Attributes:
        level: Level number, 1 being the coarsest
        name: Subdivision name
        code: Optional short code
    """

    level: int
    name: str
    code: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Address:
    """Provider-agnostic normalized address.

    Attributes:
        provider_name: Name of the provider that produced the address
        coordinates: Location of the address (always set)
        street_number: House number
        street_name: Street / route name
        postal_code: Postal code
        locality: City, town or postal town
        sub_locality: Sub-area of the locality
        country: Country name and code
        admin_levels: Administrative subdivisions ordered by level
        timezone: IANA timezone, when the provider reports one
    """

    provider_name: str
    coordinates: Coordinates
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    postal_code: Optional[str] = None
    locality: Optional[str] = None
    sub_locality: Optional[str] = None
    country: Optional[Country] = None
    admin_levels: tuple[AdminLevel, ...] = field(default_factory=tuple)
    timezone: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain-dict representation (nested dataclasses included)."""
        return asdict(self)


# Named component fields tracked on top of the base address schema.
EXTENSION_FIELDS: tuple[str, ...] = (
    "county",
    "state",
    "political",
    "colloquial_area",
    "ward",
    "neighborhood",
    "premise",
    "subpremise",
    "natural_feature",
    "airport",
    "park",
    "point_of_interest",
    "establishment",
    "street_address",
    "intersection",
)


def normalize_sub_locality_levels(
    raw_levels: Iterable[Mapping[str, Any]],
) -> tuple[AdminLevel, ...]:
    """Turn pending sublocality entries into a deduplicated AdminLevel tuple.

    Entries without a level, or without both name and code, are dropped.
    The name falls back to the code. Duplicates keep their first position.
    """
    levels: list[AdminLevel] = []
    for raw in raw_levels:
        level = raw.get("level")
        if not level:
            continue

        code = raw.get("code") or None
        name = raw.get("name") or code or ""
        if not name:
            continue

        entry = AdminLevel(level=int(level), name=name, code=code)
        if entry not in levels:
            levels.append(entry)
    return tuple(levels)


@dataclass(frozen=True, slots=True)
class WoosmapAddress(Address):
    """Address enriched with the Woosmap-specific fields.

    Extension fields (county, park, airport, ...) are only populated when
    the raw result carries a component of that type; otherwise they stay
    None.
    """

    id: Optional[str] = None
    location_type: Optional[str] = None
    result_type: tuple[str, ...] = field(default_factory=tuple)
    formatted_address: Optional[str] = None
    partial_match: bool = False
    sub_locality_levels: tuple[AdminLevel, ...] = field(default_factory=tuple)

    county: Optional[str] = None
    state: Optional[str] = None
    political: Optional[str] = None
    colloquial_area: Optional[str] = None
    ward: Optional[str] = None
    neighborhood: Optional[str] = None
    premise: Optional[str] = None
    subpremise: Optional[str] = None
    natural_feature: Optional[str] = None
    airport: Optional[str] = None
    park: Optional[str] = None
    point_of_interest: Optional[str] = None
    establishment: Optional[str] = None
    street_address: Optional[str] = None
    intersection: Optional[str] = None

    def with_id(self, id: Optional[str]) -> WoosmapAddress:
        return replace(self, id=id)

    def with_location_type(self, location_type: Optional[str]) -> WoosmapAddress:
        return replace(self, location_type=location_type)

    def with_result_type(self, result_type: Sequence[str]) -> WoosmapAddress:
        return replace(self, result_type=tuple(result_type))

    def with_formatted_address(
        self, formatted_address: Optional[str]
    ) -> WoosmapAddress:
        return replace(self, formatted_address=formatted_address)

    def with_partial_match(self, partial_match: bool) -> WoosmapAddress:
        return replace(self, partial_match=partial_match)

    def is_partial_match(self) -> bool:
        return self.partial_match

    def with_extensions(self, values: Mapping[str, Optional[str]]) -> WoosmapAddress:
        """Return a copy with the given extension fields set.

        Raises:
            InvalidArgument: If a key is not a known extension field.
        """
        unknown = set(values) - set(EXTENSION_FIELDS)
        if unknown:
            raise InvalidArgument(
                f"Unknown extension fields: {', '.join(sorted(unknown))}",
                argument="values",
            )
        return replace(self, **dict(values))

    def with_sub_locality_levels(
        self, raw_levels: Iterable[Mapping[str, Any]]
    ) -> WoosmapAddress:
        return replace(
            self, sub_locality_levels=normalize_sub_locality_levels(raw_levels)
        )

    @property
    def extensions(self) -> Dict[str, str]:
        """Extension fields that are actually set."""
        return {
            name: getattr(self, name)
            for name in EXTENSION_FIELDS
            if getattr(self, name) is not None
        }


@dataclass(frozen=True, slots=True)
class AddressCollection:
    """Ordered, immutable collection of geocoding results."""

    addresses: tuple[Address, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.addresses)

    def __iter__(self) -> Iterator[Address]:
        return iter(self.addresses)

    def __getitem__(self, index: int) -> Address:
        return self.addresses[index]

    def is_empty(self) -> bool:
        """Check if the provider returned no result."""
        return len(self.addresses) == 0

    def first(self) -> Address:
        """Return the first address.

        Raises:
            CollectionIsEmpty: If the collection has no address.
        """
        if self.is_empty():
            raise CollectionIsEmpty("The AddressCollection instance is empty.")
        return self.addresses[0]

    def slice(self, offset: int, length: Optional[int] = None) -> AddressCollection:
        end = None if length is None else offset + length
        return AddressCollection(self.addresses[offset:end])

    def to_list(self) -> list[Address]:
        return list(self.addresses)
