from __future__ import annotations

from typing import Any, Dict

from laravel_popo.Factories import PopoFactory
from tests.Mock.ExamplePopo import ExamplePopo


class ExamplePopoFactory(PopoFactory[ExamplePopo]):
    popo = ExamplePopo

    def definition(self) -> Dict[str, Any]:
        return {
            'name': self.faker.name(),
            'emailAddress': self.faker.email(),
            'password': self.faker.password(length=12),
        }
