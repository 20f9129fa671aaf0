"""Geocoding query value objects.

Queries are frozen; the ``with_*`` helpers return modified copies so a
base query can be reused across calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .errors import InvalidArgument
from .models import Coordinates

DEFAULT_RESULT_LIMIT = 5


def _check_limit(limit: int) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidArgument(
            f"Limit must be a positive integer, got {limit!r}", argument="limit"
        )


def _freeze(data: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(data))


@dataclass(frozen=True, kw_only=True)
class _BaseQuery:
    locale: Optional[str] = None
    limit: int = DEFAULT_RESULT_LIMIT
    data: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def _validate(self) -> None:
        _check_limit(self.limit)
        object.__setattr__(self, "data", _freeze(self.data))

    def get_data(self, name: str, default: Any = None) -> Any:
        """Return a value from the data bag, or ``default`` if the key is absent."""
        if name not in self.data:
            return default
        return self.data[name]

    def with_locale(self, locale: Optional[str]):
        return replace(self, locale=locale)

    def with_limit(self, limit: int):
        return replace(self, limit=limit)

    def with_data(self, name: str, value: Any):
        data = dict(self.data)
        data[name] = value
        return replace(self, data=data)


@dataclass(frozen=True)
class GeocodeQuery(_BaseQuery):
    """Forward geocoding request: free-text address to locations.

    Attributes:
        text: The address to look up
        locale: Preferred result language (e.g. "fr-FR")
        limit: Maximum number of results
        data: Provider-specific extras ("components", "cc_format")
    """

    text: str

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise InvalidArgument("Geocode query cannot be empty", argument="text")
        self._validate()

    @classmethod
    def create(cls, text: str) -> GeocodeQuery:
        return cls(text=text)

    def with_text(self, text: str) -> GeocodeQuery:
        return replace(self, text=text)


@dataclass(frozen=True)
class ReverseQuery(_BaseQuery):
    """Reverse geocoding request: coordinates to nearest addresses."""

    coordinates: Coordinates

    def __post_init__(self) -> None:
        if self.coordinates is None:
            raise InvalidArgument(
                "Reverse query requires coordinates", argument="coordinates"
            )
        self._validate()

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float) -> ReverseQuery:
        return cls(coordinates=Coordinates(float(latitude), float(longitude)))

    def with_coordinates(self, coordinates: Coordinates) -> ReverseQuery:
        return replace(self, coordinates=coordinates)
