"""Mutable builder used while mapping a raw result into an Address.

The builder collects fields one component at a time, then ``build()``
freezes everything into an immutable Address (or subclass) record.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

from .errors import InvalidArgument
from .models import Address, AdminLevel, Coordinates, Country

A = TypeVar("A", bound=Address)


class AddressBuilder:
    """Accumulates address fields for a single result."""

    def __init__(self, provider_name: str) -> None:
        self.provider_name = provider_name
        self.coordinates: Optional[Coordinates] = None
        self.street_number: Optional[str] = None
        self.street_name: Optional[str] = None
        self.postal_code: Optional[str] = None
        self.locality: Optional[str] = None
        self.sub_locality: Optional[str] = None
        self.country: Optional[str] = None
        self.country_code: Optional[str] = None
        self.timezone: Optional[str] = None
        self._admin_levels: Dict[int, AdminLevel] = {}
        self._values: Dict[str, Any] = {}

    def set_coordinates(self, latitude: float, longitude: float) -> AddressBuilder:
        self.coordinates = Coordinates(float(latitude), float(longitude))
        return self

    def set_street_number(self, street_number: Optional[str]) -> AddressBuilder:
        self.street_number = street_number
        return self

    def set_street_name(self, street_name: Optional[str]) -> AddressBuilder:
        self.street_name = street_name
        return self

    def set_postal_code(self, postal_code: Optional[str]) -> AddressBuilder:
        self.postal_code = postal_code
        return self

    def set_locality(self, locality: Optional[str]) -> AddressBuilder:
        self.locality = locality
        return self

    def set_sub_locality(self, sub_locality: Optional[str]) -> AddressBuilder:
        self.sub_locality = sub_locality
        return self

    def set_country(self, country: Optional[str]) -> AddressBuilder:
        self.country = country
        return self

    def set_country_code(self, country_code: Optional[str]) -> AddressBuilder:
        self.country_code = country_code
        return self

    def set_timezone(self, timezone: Optional[str]) -> AddressBuilder:
        self.timezone = timezone
        return self

    def add_admin_level(
        self, level: int, name: str, code: Optional[str] = None
    ) -> AddressBuilder:
        # one entry per level, the last component seen wins
        self._admin_levels[level] = AdminLevel(level=level, name=name, code=code)
        return self

    def set_value(self, name: str, value: Any) -> AddressBuilder:
        """Store a provider-specific value outside the base schema."""
        self._values[name] = value
        return self

    def get_value(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def has_value(self, name: str) -> bool:
        return name in self._values

    def build(self, address_cls: Type[A] = Address, **extra: Any) -> A:  # type: ignore[assignment]
        """Freeze the collected fields into an ``address_cls`` instance.

        Args:
            address_cls: Address type to build (Address or a subclass).
            **extra: Additional constructor fields for subclasses.

        Raises:
            InvalidArgument: If coordinates were never set.
        """
        if self.coordinates is None:
            raise InvalidArgument(
                "Coordinates must be set to build an address",
                argument="coordinates",
            )

        country = None
        if self.country or self.country_code:
            country = Country(name=self.country, code=self.country_code)

        return address_cls(
            provider_name=self.provider_name,
            coordinates=self.coordinates,
            street_number=self.street_number,
            street_name=self.street_name,
            postal_code=self.postal_code,
            locality=self.locality,
            sub_locality=self.sub_locality,
            country=country,
            admin_levels=tuple(
                self._admin_levels[level] for level in sorted(self._admin_levels)
            ),
            timezone=self.timezone,
            **extra,
        )
