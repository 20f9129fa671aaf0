"""Geocoding adapters - Implementations of GeocoderPort.

Available implementations:
- WoosmapGeocoderAdapter: Woosmap Address API geocoding
"""

from .component_mapping import EXTENDED, STANDARD, ComponentField, ComponentProfile
from .woosmap_adapter import WoosmapGeocoderAdapter

__all__ = [
    "WoosmapGeocoderAdapter",
    "ComponentProfile",
    "ComponentField",
    "STANDARD",
    "EXTENDED",
]
