from __future__ import annotations

from laravel_popo.Console.Commands.MakePopoCommand import MakePopoCommand
from laravel_popo.Foundation.ServiceProvider import ServiceProvider
from laravel_popo.config import get_popo_config


class PopoServiceProvider(ServiceProvider):
    """Register the POPO configuration and the make:popo command."""

    def register(self) -> None:
        if not self.app.bound('config.popo'):
            self.app.singleton('config.popo', lambda app: get_popo_config())

    def boot(self) -> None:
        self.commands(MakePopoCommand(self.app.make('config.popo')))

    def provides(self) -> list[str]:
        return ['config.popo']
