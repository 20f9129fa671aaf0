"""Tests for the dependency injection container."""

import pytest

from tests.fakes import FakeTransport, make_result, ok_payload
from woosmap_geocoder.adapters.geocoding import WoosmapGeocoderAdapter
from woosmap_geocoder.adapters.http import RequestsHttpTransport
from woosmap_geocoder.config import AppConfig, WoosmapConfig
from woosmap_geocoder.container import Container
from woosmap_geocoder.ports import GeocoderPort, HttpTransportPort


def test_create_default_wires_woosmap():
    config = AppConfig(woosmap=WoosmapConfig(private_key="k"))
    container = Container.create_default(config)

    geocoder = container.resolve(GeocoderPort)

    assert isinstance(geocoder, WoosmapGeocoderAdapter)
    assert isinstance(geocoder.transport, RequestsHttpTransport)
    assert geocoder.private_key == "k"
    assert container.resolve(GeocoderPort) is geocoder


def test_fake_transport_can_be_swapped_in():
    config = AppConfig(woosmap=WoosmapConfig(private_key="k"))
    container = Container.create_default(config)
    transport = FakeTransport(ok_payload(make_result()))
    container.register(HttpTransportPort, lambda: transport)

    results = container.resolve(GeocoderPort).geocode("10 avenue Gambetta, Paris")

    assert results.first().locality == "Paris"
    assert transport.urls


def test_non_singleton_returns_fresh_instances():
    container = Container(config=AppConfig())
    container.register(list, list, singleton=False)

    assert container.resolve(list) is not container.resolve(list)


def test_unknown_type():
    container = Container(config=AppConfig())

    assert not container.is_registered(GeocoderPort)
    with pytest.raises(KeyError):
        container.resolve(GeocoderPort)


def test_clear_all():
    container = Container.create_default(AppConfig())
    container.clear_all()

    assert not container.is_registered(HttpTransportPort)
