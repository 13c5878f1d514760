from __future__ import annotations

from laravel_popo import BasePopo, HasPopoFactory, field

from .ExamplePopo import ExamplePopo


class ExampleParentPopo(BasePopo, HasPopoFactory):
    name = field()
    popo = field()

    def __init__(self, name: str, popo: ExamplePopo) -> None:
        self.name = name
        self.popo = popo

    @classmethod
    def popo_factory(cls) -> str:
        return 'tests.Factory.ExampleParentPopoFactory.ExampleParentPopoFactory'
