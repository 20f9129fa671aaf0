"""Dependency injection container.

Wires ports to their default adapters without any DI framework:
HttpTransportPort -> RequestsHttpTransport and
GeocoderPort -> WoosmapGeocoderAdapter. Tests register fakes instead.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Registry of factories keyed by port type.

    Usage:
        container = Container.create_default()
        geocoder = container.resolve(GeocoderPort)

        container = Container()
        container.register(HttpTransportPort, lambda: FakeTransport())

    Attributes:
        config: Configuration handed to the default factories
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Registering a type again replaces the factory and drops any
        instance already built for it.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return an instance for ``port_type``.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_all(self) -> None:
        """Drop every registration and cached instance."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the production bindings.

        Args:
            config: Optional configuration override.
        """
        from .adapters.geocoding import WoosmapGeocoderAdapter
        from .adapters.http import RequestsHttpTransport
        from .ports.geocoding import GeocoderPort
        from .ports.http import HttpTransportPort

        config = config or get_config()
        container = cls(config=config)

        container.register(
            HttpTransportPort,
            lambda: RequestsHttpTransport(config.http),
        )
        container.register(
            GeocoderPort,
            lambda: WoosmapGeocoderAdapter(
                transport=container.resolve(HttpTransportPort),
                config=config.woosmap,
            ),
        )

        return container
