"""Address component dispatch tables.

A Woosmap result lists address components, each tagged with one or more
types (``route``, ``postal_code``, ``sublocality_level_2``...). This module
maps every tag to the address field it populates. Two profiles exist:

- STANDARD: base fields, county/political/state extensions and
  sublocality levels.
- EXTENDED: base fields, the street-feature extensions (airport, park,
  premise, ...), administrative levels and sublocality levels.

Numbered tags are matched by pattern and carry their suffix as level.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple


class ComponentField(Enum):
    """Address field populated by a component type tag."""

    POSTAL_CODE = auto()
    LOCALITY = auto()
    COUNTRY = auto()
    STREET_NUMBER = auto()
    STREET_NAME = auto()
    SUB_LOCALITY = auto()
    ADMIN_LEVEL = auto()
    SUB_LOCALITY_LEVEL = auto()
    EXTENSION = auto()


_BASE_TABLE: Mapping[str, ComponentField] = {
    "postal_code": ComponentField.POSTAL_CODE,
    "locality": ComponentField.LOCALITY,
    "postal_town": ComponentField.LOCALITY,
    "country": ComponentField.COUNTRY,
    "street_number": ComponentField.STREET_NUMBER,
    "route": ComponentField.STREET_NAME,
    "sublocality": ComponentField.SUB_LOCALITY,
}

_ADMIN_LEVEL_TAG = re.compile(r"^administrative_area_level_(\d+)$")
_SUB_LOCALITY_LEVEL_TAG = re.compile(r"^sublocality_level_(\d+)$")


@dataclass(frozen=True)
class ComponentProfile:
    """One field-mapping variant.

    Attributes:
        name: Profile identifier used in configuration
        extension_tags: Tags stored verbatim as named extension fields
        admin_levels: Whether administrative_area_level_N tags are tracked
        sub_locality_levels: Whether sublocality_level_N tags are tracked
    """

    name: str
    extension_tags: frozenset[str]
    admin_levels: bool = False
    sub_locality_levels: bool = True
    table: Mapping[str, ComponentField] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        table = dict(_BASE_TABLE)
        for tag in self.extension_tags:
            table.setdefault(tag, ComponentField.EXTENSION)
        object.__setattr__(self, "table", MappingProxyType(table))

    def resolve(self, tag: str) -> Optional[Tuple[ComponentField, Optional[int]]]:
        """Return the field a tag populates and its level, or None to ignore it."""
        target = self.table.get(tag)
        if target is not None:
            return target, None

        if self.admin_levels:
            match = _ADMIN_LEVEL_TAG.match(tag)
            if match:
                return ComponentField.ADMIN_LEVEL, int(match.group(1))

        if self.sub_locality_levels:
            match = _SUB_LOCALITY_LEVEL_TAG.match(tag)
            if match:
                return ComponentField.SUB_LOCALITY_LEVEL, int(match.group(1))

        return None

    def resolve_all(
        self, tags: Iterable[str]
    ) -> list[Tuple[str, ComponentField, Optional[int]]]:
        """Resolve every tag of a component, dropping the unknown ones."""
        resolved = []
        for tag in tags:
            hit = self.resolve(tag)
            if hit is not None:
                resolved.append((tag, hit[0], hit[1]))
        return resolved


STANDARD = ComponentProfile(
    name="standard",
    extension_tags=frozenset({"county", "political", "state"}),
)

EXTENDED = ComponentProfile(
    name="extended",
    extension_tags=frozenset(
        {
            "street_address",
            "intersection",
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
        }
    ),
    admin_levels=True,
)

PROFILES: Mapping[str, ComponentProfile] = MappingProxyType(
    {STANDARD.name: STANDARD, EXTENDED.name: EXTENDED}
)


def get_profile(name: str) -> ComponentProfile:
    """Look up a profile by name.

    Raises:
        KeyError: If no profile has this name.
    """
    try:
        return PROFILES[name]
    except KeyError:
        raise KeyError(
            f"Unknown component profile {name!r}, expected one of {sorted(PROFILES)}"
        ) from None
