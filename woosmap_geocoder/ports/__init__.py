"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the geocoding core and external
systems. They enable dependency injection and make the adapters
testable.
"""

from .geocoding import GeocoderPort
from .http import HttpTransportPort

__all__ = [
    "GeocoderPort",
    "HttpTransportPort",
]
