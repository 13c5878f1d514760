from __future__ import annotations

from laravel_popo import BasePopo, HasPopoFactory, field, private_field


class ExamplePopo(BasePopo, HasPopoFactory):
    name = field()
    emailAddress = field()
    password = private_field()

    def __init__(self, name: str, emailAddress: str, password: str) -> None:
        self.name = name
        self.emailAddress = emailAddress
        self.password = password

    @classmethod
    def popo_factory(cls) -> str:
        return 'tests.Factory.ExamplePopoFactory.ExamplePopoFactory'
