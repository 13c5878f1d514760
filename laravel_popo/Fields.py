from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Type, Union

from laravel_popo.Exceptions import InvalidPopoSchemaException


class Visibility(Enum):
    """Whether a field is part of the serialized representation."""
    PUBLIC = "public"
    PRIVATE = "private"


class _Missing:
    """Sentinel for fields declared without a default."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class PopoField:
    """
    A declared POPO field.

    Declared as a class attribute, the field records its name, visibility
    and optional value serializer. The value itself lives on the instance,
    so assigning `self.name = value` in `__init__` works like any attribute.
    Reading a field that was never assigned returns its default, or raises
    AttributeError when it has none.
    """

    def __init__(
        self,
        visibility: Union[Visibility, str] = Visibility.PUBLIC,
        default: Any = MISSING,
        default_factory: Optional[Callable[[], Any]] = None,
        serializer: Optional[Callable[[Any], Any]] = None,
        nullable: bool = False,
    ) -> None:
        if default is not MISSING and default_factory is not None:
            raise InvalidPopoSchemaException("Cannot specify both default and default_factory.")
        if isinstance(default, (list, dict, set)):
            raise InvalidPopoSchemaException(
                f"Mutable default {type(default).__name__} is not allowed, use default_factory instead."
            )

        self.visibility = self._resolve_visibility(visibility)
        self.default = None if nullable and default is MISSING and default_factory is None else default
        self.default_factory = default_factory
        self.serializer = serializer
        self.name: str = ""
        self.owner: Optional[Type[Any]] = None

    @staticmethod
    def _resolve_visibility(visibility: Union[Visibility, str]) -> Visibility:
        if isinstance(visibility, Visibility):
            return visibility
        try:
            return Visibility(str(visibility).lower())
        except ValueError:
            raise InvalidPopoSchemaException(
                f"Invalid field visibility [{visibility}], expected 'public' or 'private'."
            ) from None

    def __set_name__(self, owner: Type[Any], name: str) -> None:
        # Names are validated in BasePopo.__init_subclass__
        self.name = name
        self.owner = owner

    def __get__(self, instance: Any, owner: Optional[Type[Any]] = None) -> Any:
        if instance is None:
            return self

        # Only reached when the instance has no value for this field, POPOs
        # store default_factory values when they are constructed
        if self.default_factory is not None:
            return self.default_factory()

        if self.default is not MISSING:
            return self.default

        raise AttributeError(f"'{type(instance).__name__}' object has no attribute '{self.name}'")

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC

    @property
    def is_private(self) -> bool:
        return self.visibility is Visibility.PRIVATE

    def __repr__(self) -> str:
        return f"PopoField(name={self.name!r}, visibility={self.visibility.value!r})"


def field(
    visibility: Union[Visibility, str] = Visibility.PUBLIC,
    *,
    default: Any = MISSING,
    default_factory: Optional[Callable[[], Any]] = None,
    serializer: Optional[Callable[[Any], Any]] = None,
    nullable: bool = False,
) -> Any:
    """Declare a POPO field."""
    return PopoField(visibility, default, default_factory, serializer, nullable)


def public_field(**kwargs: Any) -> Any:
    """Declare a field that is part of the serialized output."""
    return field(Visibility.PUBLIC, **kwargs)


def private_field(**kwargs: Any) -> Any:
    """Declare a field that never appears in the serialized output."""
    return field(Visibility.PRIVATE, **kwargs)
