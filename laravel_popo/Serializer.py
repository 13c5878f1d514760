"""
Value serialization for POPO fields.

Turns a field value into its JSON-compatible array form. Nested objects are
serialized through their Arrayable capability, so a POPO inside a POPO (or
inside a collection) is serialized by its own schema and its private fields
stay hidden at every level.
"""
from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional
from uuid import UUID

from pydantic import BaseModel

from laravel_popo.Exceptions import UnserializableValueException
from laravel_popo.Support.Types import JsonValue, is_arrayable, is_test_arrayable


def serialize_value(value: Any, test_mode: bool = False, field: Optional[str] = None) -> JsonValue:
    """Serialize a single value, test_mode selects the snake_case array of nested POPOs."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return value

    if test_mode and is_test_arrayable(value):
        return value.to_test_array()  # type: ignore[no-any-return]

    if is_arrayable(value):
        return value.to_array()  # type: ignore[no-any-return]

    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")  # type: ignore[no-any-return]

    if isinstance(value, Enum):
        return serialize_value(value.value, test_mode, field)

    if isinstance(value, (datetime, date, time)):
        return value.isoformat()

    if isinstance(value, (Decimal, UUID)):
        return str(value)

    if isinstance(value, Mapping):
        return {
            str(key): serialize_value(item, test_mode, field)
            for key, item in value.items()
        }

    if isinstance(value, (list, tuple)):
        return [serialize_value(item, test_mode, field) for item in value]

    raise UnserializableValueException(value, field)
