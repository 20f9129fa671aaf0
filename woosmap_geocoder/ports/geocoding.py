"""Geocoding port - Abstraction over geocoding providers.

This protocol defines the contract for geocoding providers, allowing
different implementations to be swapped behind the same interface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import AddressCollection
    from ..domain.queries import GeocodeQuery, ReverseQuery


class GeocoderPort(Protocol):
    """Port for geocoding providers.

    Implementation: adapters/geocoding/woosmap_adapter.py

    Both operations return an ordered, possibly empty AddressCollection.
    An empty collection means "nothing found"; failures are raised as
    GeocoderError subclasses.
    """

    @property
    def name(self) -> str:
        """Short provider identifier (e.g. "woosmap")."""
        ...

    def geocode_query(self, query: GeocodeQuery) -> AddressCollection:
        """Resolve a free-text address into locations.

        Args:
            query: The forward geocoding query.

        Returns:
            Matching addresses, at most ``query.limit`` of them.
        """
        ...

    def reverse_query(self, query: ReverseQuery) -> AddressCollection:
        """Resolve coordinates into the nearest addresses.

        Args:
            query: The reverse geocoding query.

        Returns:
            Nearby addresses, at most ``query.limit`` of them.
        """
        ...

    def geocode(
        self,
        text: str,
        locale: Optional[str] = None,
        limit: Optional[int] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> AddressCollection:
        """Shortcut building a GeocodeQuery from plain arguments."""
        ...

    def reverse(
        self,
        latitude: float,
        longitude: float,
        locale: Optional[str] = None,
        limit: Optional[int] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> AddressCollection:
        """Shortcut building a ReverseQuery from plain arguments."""
        ...
