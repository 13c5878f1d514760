from __future__ import annotations

from laravel_popo import BasePopo, field, private_field
from laravel_popo.Support import Collection

from .SamplePopo import SamplePopo


class CollectionPopo(BasePopo):
    """Mixes a private field, a nested collection, a nullable and an empty list."""

    thisIsPrivate = private_field()
    samples = field()
    number = field()
    nullable = field(nullable=True)
    array = field(default_factory=list)

    def __init__(self, thisIsPrivate: str, samples: Collection[SamplePopo], number: int) -> None:
        self.thisIsPrivate = thisIsPrivate
        self.samples = samples
        self.number = number
