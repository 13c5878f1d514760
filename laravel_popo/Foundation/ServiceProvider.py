"""
Service Provider Base Class
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Type, Union

if TYPE_CHECKING:
    from laravel_popo.Console.Command import Command
    from laravel_popo.Foundation.Application import Application


class ServiceProvider(ABC):
    """
    Base class for service providers
    """

    def __init__(self, app: Application):
        self.app = app

    @abstractmethod
    def register(self) -> None:
        """Register services in the container"""
        pass

    def boot(self) -> None:
        """Bootstrap services after all providers are registered"""
        pass

    def provides(self) -> List[str]:
        """Return list of services this provider provides"""
        return []

    def commands(self, *commands: Union[Command, Type[Command]]) -> None:
        """Register the given Artisan commands with the application"""
        for command in commands:
            self.app.register_command(command)
