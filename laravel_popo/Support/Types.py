"""
POPO Type System

Protocol-based capabilities shared by POPOs and collections:
- Arrayable: converts itself to a JSON-compatible array (dict or list)
- TestArrayable: also offers the snake_case fixture variant
"""

from __future__ import annotations

from typing import (
    Any,
    Dict,
    List,
    Protocol,
    TypeAlias,
    TypeGuard,
    Union,
    runtime_checkable,
)

JsonPrimitive: TypeAlias = Union[str, int, float, bool, None]
JsonValue: TypeAlias = Union[JsonPrimitive, List["JsonValue"], Dict[str, "JsonValue"]]
JsonObject: TypeAlias = Dict[str, JsonValue]


@runtime_checkable
class Arrayable(Protocol):
    """Protocol for objects that can be converted to arrays."""

    def to_array(self) -> Any:
        """Convert to array representation."""
        ...


@runtime_checkable
class TestArrayable(Arrayable, Protocol):
    """Protocol for objects offering a snake_case array for test fixtures."""

    def to_test_array(self) -> Any:
        """Convert to array representation with snake_case keys."""
        ...


def is_arrayable(obj: Any) -> TypeGuard[Arrayable]:
    """Type guard to check if object implements Arrayable protocol."""
    return isinstance(obj, Arrayable) and not isinstance(obj, type)


def is_test_arrayable(obj: Any) -> TypeGuard[TestArrayable]:
    """Type guard to check if object implements TestArrayable protocol."""
    return isinstance(obj, TestArrayable) and not isinstance(obj, type)


__all__ = [
    "JsonPrimitive",
    "JsonValue",
    "JsonObject",
    "Arrayable",
    "TestArrayable",
    "is_arrayable",
    "is_test_arrayable",
]
