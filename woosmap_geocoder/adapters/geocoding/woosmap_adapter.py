"""Woosmap Address API geocoder adapter.

This adapter implements GeocoderPort on top of the Woosmap Address API
(``/address/geocode/json``):
- request URL assembly for forward and reverse lookups
- HTTP through an injected HttpTransportPort
- validation of API-level errors in the decoded body
- component mapping through a configurable ComponentProfile

Failures are raised as typed domain errors; an empty collection means
the API found nothing.
"""

from __future__ import annotations

import ipaddress
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote, quote_plus

from ...config import WoosmapConfig, get_config
from ...domain.builder import AddressBuilder
from ...domain.errors import (
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    UnsupportedOperation,
)
from ...domain.models import AddressCollection, EXTENSION_FIELDS, WoosmapAddress
from ...domain.queries import GeocodeQuery, ReverseQuery
from ...logging_config import mask_credentials
from ...ports.http import HttpTransportPort
from .component_mapping import ComponentField, ComponentProfile, get_profile

PROVIDER_NAME = "woosmap"

INVALID_CREDENTIALS_MESSAGE = (
    "Incorrect authentication credentials. Please check or use a valid API Key"
)

_SIMPLE_SETTERS: Mapping[ComponentField, str] = {
    ComponentField.POSTAL_CODE: "set_postal_code",
    ComponentField.LOCALITY: "set_locality",
    ComponentField.STREET_NUMBER: "set_street_number",
    ComponentField.STREET_NAME: "set_street_name",
    ComponentField.SUB_LOCALITY: "set_sub_locality",
}


def _is_ip_address(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def serialize_components(components: Mapping[str, Any]) -> str:
    """Serialize a component filter mapping as ``name:value|name:value``."""
    return "|".join(f"{name}:{value}" for name, value in components.items())


@dataclass
class WoosmapGeocoderAdapter:
    """Geocoder backed by the Woosmap Address API.

    Keys and format flags are read once at construction; an instance can
    be reused for sequential calls.

    Attributes:
        transport: HTTP transport used for every request
        config: Woosmap configuration (keys, endpoints, request flags)
        public_key: Overrides config.public_key when given
        private_key: Overrides config.private_key when given
        cc_format: Overrides config.cc_format when given
    """

    transport: HttpTransportPort
    config: WoosmapConfig = field(default_factory=lambda: get_config().woosmap)
    public_key: Optional[str] = None
    private_key: Optional[str] = None
    cc_format: Optional[str] = None

    _profile: ComponentProfile = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.public_key is None:
            self.public_key = self.config.public_key
        if self.private_key is None:
            self.private_key = self.config.private_key
        if self.cc_format is None:
            self.cc_format = self.config.cc_format
        self._profile = get_profile(self.config.component_profile)

        if self.public_key is None and self.private_key is None:
            self._logger.warning(
                "No Woosmap key configured, requests will likely be denied"
            )

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    @property
    def profile(self) -> ComponentProfile:
        return self._profile

    def geocode_query(self, query: GeocodeQuery) -> AddressCollection:
        """Forward geocode a free-text address.

        Raises:
            UnsupportedOperation: If the text is an IPv4 or IPv6 literal.
            InvalidCredentials: If the API rejected the key.
            InvalidServerResponse: On undecodable or denied responses.
            QuotaExceeded: If the transport reported rate limiting.
        """
        # The API returns wrong results for IP input instead of an error
        if _is_ip_address(query.text):
            raise UnsupportedOperation(
                "The Woosmap provider does not support IP addresses, only street addresses."
            )

        url = self.config.geocode_endpoint_url % quote(query.text, safe="")
        return self._geocode_or_reverse_query(url, query)

    def reverse_query(self, query: ReverseQuery) -> AddressCollection:
        """Reverse geocode a coordinate pair.

        Raises:
            InvalidCredentials: If the API rejected the key.
            InvalidServerResponse: On undecodable or denied responses.
            QuotaExceeded: If the transport reported rate limiting.
        """
        coordinates = query.coordinates
        url = self.config.reverse_endpoint_url % (
            coordinates.latitude,
            coordinates.longitude,
        )
        return self._geocode_or_reverse_query(url, query)

    def geocode(
        self,
        text: str,
        locale: Optional[str] = None,
        limit: Optional[int] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> AddressCollection:
        query = GeocodeQuery(
            text,
            locale=locale,
            limit=limit if limit is not None else self.config.default_limit,
            data=data or {},
        )
        return self.geocode_query(query)

    def reverse(
        self,
        latitude: float,
        longitude: float,
        locale: Optional[str] = None,
        limit: Optional[int] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> AddressCollection:
        query = ReverseQuery.from_coordinates(latitude, longitude).with_locale(locale)
        query = query.with_limit(limit if limit is not None else self.config.default_limit)
        for key, value in (data or {}).items():
            query = query.with_data(key, value)
        return self.reverse_query(query)

    def _geocode_or_reverse_query(
        self, url: str, query: GeocodeQuery | ReverseQuery
    ) -> AddressCollection:
        components = query.get_data("components")
        if components is not None:
            serialized = (
                components
                if isinstance(components, str)
                else serialize_components(components)
            )
            url += "&components=%s" % quote_plus(serialized)

        cc_format = query.get_data("cc_format", self.cc_format)
        if cc_format is not None:
            url += "&cc_format=%s" % cc_format

        if self.config.include_limit_param:
            url += "&limit=%d" % query.limit

        return self._fetch_url(url, query.locale, query.limit)

    def _build_query(self, url: str, locale: Optional[str] = None) -> str:
        """Append language and authentication parameters."""
        if locale is not None:
            url = "%s&language=%s" % (url, locale)

        if self.public_key is not None:
            url = "%s&key=%s" % (url, self.public_key)
        elif self.private_key is not None:
            url = "%s&private_key=%s" % (url, self.private_key)

        return url

    def _fetch_url(
        self, url: str, locale: Optional[str], limit: int
    ) -> AddressCollection:
        url = self._build_query(url, locale)
        self._logger.debug(
            "Woosmap request",
            extra={"url": mask_credentials(url), "limit": limit},
        )

        content = self.transport.fetch(url)
        payload = self._validate_response(url, content)

        results = payload.get("results")
        if payload.get("status") != "OK" or not results:
            self._logger.debug(
                "Woosmap returned no result",
                extra={"url": mask_credentials(url), "status": payload.get("status")},
            )
            return AddressCollection()

        addresses: List[WoosmapAddress] = []
        for result in results:
            addresses.append(self._map_result(url, result))
            if len(addresses) >= limit:
                break

        self._logger.debug(
            "Woosmap request succeeded",
            extra={
                "url": mask_credentials(url),
                "received": len(results),
                "returned": len(addresses),
            },
        )
        return AddressCollection(tuple(addresses))

    def _validate_response(self, url: str, content: str) -> Dict[str, Any]:
        """Decode the body and raise on API-level errors."""
        try:
            payload = json.loads(content)
        except ValueError as e:
            raise InvalidServerResponse.create(url) from e

        if not isinstance(payload, dict):
            raise InvalidServerResponse.create(url)

        if payload.get("status") == "REQUEST_DENIED":
            error_message = payload.get("error_message")
            if error_message == INVALID_CREDENTIALS_MESSAGE:
                raise InvalidCredentials(f"API key is invalid {url}", url=url)

            self._logger.warning(
                "Woosmap request denied",
                extra={"url": mask_credentials(url), "error_message": error_message},
            )
            raise InvalidServerResponse(
                f"API access denied. Request: {url} - Message: {error_message}",
                url=url,
            )

        return payload

    def _map_result(self, url: str, result: Mapping[str, Any]) -> WoosmapAddress:
        builder = AddressBuilder(self.name)

        try:
            geometry = result["geometry"]
            location = geometry["location"]
            builder.set_coordinates(location["lat"], location["lng"])
        except (KeyError, TypeError, ValueError, InvalidArgument) as e:
            raise InvalidServerResponse(
                f"Result without valid geometry in response to {url}",
                cause=e,
                url=url,
            ) from e

        for component in result.get("address_components") or []:
            if not isinstance(component, Mapping):
                raise InvalidServerResponse(
                    f"Malformed address component in response to {url}", url=url
                )
            for tag, target, level in self._profile.resolve_all(
                component.get("types") or []
            ):
                self._update_address_component(builder, tag, target, level, component)

        if result.get("place_id") is not None:
            builder.set_value("id", result["place_id"])

        extensions = {
            name: builder.get_value(name)
            for name in EXTENSION_FIELDS
            if builder.has_value(name)
        }

        return builder.build(
            WoosmapAddress,
            id=builder.get_value("id"),
            location_type=geometry.get("location_type"),
            result_type=tuple(result.get("types") or ()),
            formatted_address=result.get("formatted_address"),
            partial_match=bool(result.get("partial_match", False)),
            **extensions,
        ).with_sub_locality_levels(builder.get_value("sub_locality_levels", []))

    def _update_address_component(
        self,
        builder: AddressBuilder,
        tag: str,
        target: ComponentField,
        level: Optional[int],
        component: Mapping[str, Any],
    ) -> None:
        long_name = component.get("long_name")
        short_name = component.get("short_name")

        setter = _SIMPLE_SETTERS.get(target)
        if setter is not None:
            getattr(builder, setter)(long_name)
        elif target is ComponentField.COUNTRY:
            builder.set_country(long_name)
            builder.set_country_code(short_name)
        elif target is ComponentField.ADMIN_LEVEL:
            if long_name:
                builder.add_admin_level(level, long_name, short_name)
        elif target is ComponentField.SUB_LOCALITY_LEVEL:
            pending = builder.get_value("sub_locality_levels", [])
            pending.append({"level": level, "name": long_name, "code": short_name})
            builder.set_value("sub_locality_levels", pending)
        elif target is ComponentField.EXTENSION:
            builder.set_value(tag, long_name)
