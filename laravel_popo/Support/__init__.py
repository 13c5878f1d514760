from .Collection import Collection, collect
from .Str import Str
from .Types import Arrayable, TestArrayable, JsonValue, JsonObject

__all__ = [
    "Collection",
    "collect",
    "Str",
    "Arrayable",
    "TestArrayable",
    "JsonValue",
    "JsonObject",
]
