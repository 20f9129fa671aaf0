"""Domain layer - Core models, queries and errors.

This module contains immutable domain models, query objects and typed
errors used throughout the package. No external dependencies.
"""

from .builder import AddressBuilder
from .errors import (
    CollectionIsEmpty,
    GeocoderError,
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    UnsupportedOperation,
)
from .models import (
    EXTENSION_FIELDS,
    Address,
    AddressCollection,
    AdminLevel,
    Coordinates,
    Country,
    WoosmapAddress,
    normalize_sub_locality_levels,
)
from .queries import DEFAULT_RESULT_LIMIT, GeocodeQuery, ReverseQuery

__all__ = [
    # Models
    "Coordinates",
    "Country",
    "AdminLevel",
    "Address",
    "WoosmapAddress",
    "AddressCollection",
    "EXTENSION_FIELDS",
    "normalize_sub_locality_levels",
    "AddressBuilder",
    # Queries
    "GeocodeQuery",
    "ReverseQuery",
    "DEFAULT_RESULT_LIMIT",
    # Errors
    "GeocoderError",
    "UnsupportedOperation",
    "InvalidArgument",
    "InvalidCredentials",
    "InvalidServerResponse",
    "QuotaExceeded",
    "CollectionIsEmpty",
]
