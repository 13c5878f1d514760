from __future__ import annotations

from typing import Any, Dict

from laravel_popo.Factories import PopoFactory
from tests.Factory.ExamplePopoFactory import ExamplePopoFactory
from tests.Mock.ExampleParentPopo import ExampleParentPopo


class ExampleParentPopoFactory(PopoFactory[ExampleParentPopo]):
    popo = ExampleParentPopo

    def definition(self) -> Dict[str, Any]:
        return {
            'name': self.faker.company(),
            'popo': ExamplePopoFactory.new(),
        }
