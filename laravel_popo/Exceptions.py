from __future__ import annotations

from typing import Any, Dict, Optional


class PopoException(Exception):
    """Base exception for POPO errors."""

    def __init__(self, message: str, context_data: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.context_data = context_data or {}


class PropertyNotReadableException(PopoException):
    """Raised when a declared POPO field cannot be read."""

    def __init__(self, popo_class: str, field: str) -> None:
        super().__init__(
            f"Property [{field}] of [{popo_class}] is not readable.",
            {'popo': popo_class, 'field': field}
        )
        self.popo_class = popo_class
        self.field = field


class UnserializableValueException(PopoException):
    """Raised when a field value has no array representation."""

    def __init__(self, value: Any, field: Optional[str] = None) -> None:
        type_name = type(value).__name__
        location = f" in field [{field}]" if field else ""
        super().__init__(
            f"Value of type [{type_name}]{location} cannot be serialized.",
            {'type': type_name, 'field': field}
        )
        self.value = value
        self.field = field


class FactoryNotFoundException(PopoException):
    """Raised when a POPO has no associated factory."""

    def __init__(self, popo_class: str, reason: str = "") -> None:
        message = f"No factory is associated with [{popo_class}]."
        if reason:
            message += f" {reason}"
        super().__init__(message, {'popo': popo_class})
        self.popo_class = popo_class


class InvalidPopoSchemaException(PopoException):
    """Raised when a POPO field declaration is invalid."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message, {'field': field} if field else {})
        self.field = field
