from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Type, Union

from fastapi import FastAPI

from laravel_popo.Console.Command import Command
from laravel_popo.Console.Kernel import Artisan
from laravel_popo.Foundation.ServiceProvider import ServiceProvider
from laravel_popo.Log import logger


class Application:
    """Laravel-style application: a small service container with providers."""

    def __init__(self) -> None:
        self._bindings: Dict[str, Callable[[Application], Any]] = {}
        self._singletons: Dict[str, bool] = {}
        self._instances: Dict[str, Any] = {}
        self._providers: List[ServiceProvider] = []
        self._loaded_providers: Dict[str, ServiceProvider] = {}
        self._booted: bool = False
        self._fastapi_app: Optional[FastAPI] = None

        self._register_core_services()

    def _register_core_services(self) -> None:
        """Register core application services."""
        self.instance('app', self)
        self.instance('artisan', Artisan())

    # Container
    def bind(self, abstract: str, concrete: Callable[[Application], Any], shared: bool = False) -> None:
        """Register a binding resolved by calling concrete with the application."""
        self._instances.pop(abstract, None)
        self._bindings[abstract] = concrete
        self._singletons[abstract] = shared

    def singleton(self, abstract: str, concrete: Callable[[Application], Any]) -> None:
        """Register a shared binding."""
        self.bind(abstract, concrete, shared=True)

    def instance(self, abstract: str, instance: Any) -> Any:
        """Register an existing instance as shared."""
        self._instances[abstract] = instance
        return instance

    def bound(self, abstract: str) -> bool:
        """Determine if the given abstract has been bound."""
        return abstract in self._instances or abstract in self._bindings

    def make(self, abstract: str) -> Any:
        """Resolve the given abstract from the container."""
        if abstract in self._instances:
            return self._instances[abstract]

        if abstract not in self._bindings:
            raise KeyError(f"Target [{abstract}] is not bound in the container.")

        resolved = self._bindings[abstract](self)
        if self._singletons.get(abstract):
            self._instances[abstract] = resolved
        return resolved

    # Providers
    def register(self, provider: Union[ServiceProvider, Type[ServiceProvider]], force: bool = False) -> ServiceProvider:
        """Register a service provider."""
        if isinstance(provider, type) and issubclass(provider, ServiceProvider):
            resolved_provider = provider(self)
        elif isinstance(provider, ServiceProvider):
            resolved_provider = provider
        else:
            raise TypeError("Provider must be a ServiceProvider instance or class")

        provider_name = resolved_provider.__class__.__name__

        if provider_name in self._loaded_providers and not force:
            logger().debug(f"Provider {provider_name} already registered")
            return self._loaded_providers[provider_name]

        resolved_provider.register()
        self._providers.append(resolved_provider)
        self._loaded_providers[provider_name] = resolved_provider

        # Late registrations boot immediately
        if self._booted:
            resolved_provider.boot()

        logger().debug(f"Registered provider: {provider_name}")
        return resolved_provider

    def get_providers(self, provider_class: Type[ServiceProvider]) -> List[ServiceProvider]:
        """Get all providers of a specific type."""
        return [p for p in self._providers if isinstance(p, provider_class)]

    def boot(self) -> None:
        """Boot the application's service providers."""
        if self._booted:
            return

        for provider in self._providers:
            logger().debug(f"Booting provider: {provider.__class__.__name__}")
            provider.boot()

        self._booted = True

    def is_booted(self) -> bool:
        """Check if the application has been booted."""
        return self._booted

    # Console
    @property
    def artisan(self) -> Artisan:
        """Get the Artisan console kernel."""
        kernel: Artisan = self.make('artisan')
        return kernel

    def register_command(self, command: Union[Command, Type[Command]]) -> None:
        """Register an Artisan command."""
        self.artisan.register(command)

    # HTTP
    @property
    def fastapi(self) -> FastAPI:
        """Get the FastAPI application, creating it on first access."""
        if self._fastapi_app is None:
            self._fastapi_app = FastAPI(title="Laravel POPO")
        return self._fastapi_app
