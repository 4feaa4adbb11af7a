"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

There is deliberately no process-wide default container: entry points
build one from an explicit AppConfig and pass it along.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default(AppConfig())
        service = container.resolve(WayfindingService)

        # Testing
        container = Container()
        container.register(TextFetcherPort, lambda: FakeFetcher())
        fetcher = container.resolve(TextFetcherPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=AppConfig)

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

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

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

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The text fetcher is chosen from ``config.data.source``.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.fetch import HttpTextFetcher, LocalFileFetcher
        from .adapters.graph import CSVGraphRepository, DijkstraRouteSolver
        from .ports.fetch import TextFetcherPort
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .services import WayfindingService

        config = config or AppConfig()
        container = cls(config=config)

        def create_fetcher() -> TextFetcherPort:
            if config.data.source == "http":
                return HttpTextFetcher(config.fetch)
            return LocalFileFetcher(config.fetch)

        container.register(TextFetcherPort, create_fetcher)

        # Graph
        container.register(
            GraphRepositoryPort,
            lambda: CSVGraphRepository(
                fetcher=container.resolve(TextFetcherPort),
                config=config.data,
            ),
        )
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(config.search),
        )

        # Main service
        def create_wayfinding_service() -> WayfindingService:
            return WayfindingService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
            )

        container.register(WayfindingService, create_wayfinding_service)

        return container
