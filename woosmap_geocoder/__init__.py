"""Woosmap geocoding provider.

Forward and reverse geocoding against the Woosmap Address API, with
results normalized into immutable address records.

    from woosmap_geocoder import Container, GeocoderPort

    geocoder = Container.create_default().resolve(GeocoderPort)
    addresses = geocoder.geocode("10 avenue Gambetta, Paris, France")
"""

from .adapters.geocoding import WoosmapGeocoderAdapter
from .adapters.http import RequestsHttpTransport
from .config import AppConfig, WoosmapConfig, get_config, reset_config
from .container import Container
from .domain import (
    Address,
    AddressCollection,
    AdminLevel,
    Coordinates,
    Country,
    GeocodeQuery,
    GeocoderError,
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    ReverseQuery,
    UnsupportedOperation,
    WoosmapAddress,
)
from .logging_config import configure_logging
from .ports import GeocoderPort, HttpTransportPort

__all__ = [
    "WoosmapGeocoderAdapter",
    "RequestsHttpTransport",
    "AppConfig",
    "WoosmapConfig",
    "get_config",
    "reset_config",
    "Container",
    "configure_logging",
    "GeocoderPort",
    "HttpTransportPort",
    "Address",
    "WoosmapAddress",
    "AddressCollection",
    "AdminLevel",
    "Coordinates",
    "Country",
    "GeocodeQuery",
    "ReverseQuery",
    "GeocoderError",
    "InvalidArgument",
    "InvalidCredentials",
    "InvalidServerResponse",
    "QuotaExceeded",
    "UnsupportedOperation",
]
