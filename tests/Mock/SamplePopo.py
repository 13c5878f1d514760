from __future__ import annotations

from laravel_popo import BasePopo, field


class SamplePopo(BasePopo):
    name = field()

    def __init__(self, name: str) -> None:
        self.name = name
