from __future__ import annotations

import json
from typing import Any, Dict, Iterator, KeysView, List, Tuple

from fastapi.responses import JSONResponse
from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from laravel_popo.Exceptions import (
    InvalidPopoSchemaException,
    PropertyNotReadableException,
    UnserializableValueException,
)
from laravel_popo.Fields import PopoField
from laravel_popo.Log import logger
from laravel_popo.Serializer import serialize_value
from laravel_popo.Support.Str import Str
from laravel_popo.Support.Types import JsonObject, JsonValue


class BasePopo:
    """
    Base class for Plain Old Python Objects returned from routes.

    Subclasses declare their fields with `field()`, `public_field()` or
    `private_field()`. The declaration order is the serialization order,
    private fields never appear in any serialized form:

        class ArrayPopo(BasePopo):
            firstName = field()
            password = private_field()

            def __init__(self, firstName: str, password: str) -> None:
                self.firstName = firstName
                self.password = password

        ArrayPopo("Bertrand", "secret").to_array()       # {'firstName': 'Bertrand'}
        ArrayPopo("Bertrand", "secret").to_test_array()  # {'first_name': 'Bertrand'}

    A POPO behaves as a read-only mapping of its public serialized fields,
    so `dict(popo)` and FastAPI's `jsonable_encoder` see exactly `to_array()`.
    It is also a valid pydantic type, so a route can declare a POPO as its
    return annotation.
    """

    __popo_fields__: Tuple[PopoField, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._validate_declarations()

        fields: Dict[str, PopoField] = {}
        for klass in reversed(cls.__mro__):
            for name, attribute in vars(klass).items():
                if isinstance(attribute, PopoField):
                    # Redeclaring a parent field keeps its position
                    fields[name] = attribute
                elif name in fields:
                    # A plain attribute or property shadows the parent field
                    del fields[name]

        cls.__popo_fields__ = tuple(fields.values())

    @classmethod
    def _validate_declarations(cls) -> None:
        mangled_prefix = f"_{cls.__name__.lstrip('_')}__"

        for name, attribute in vars(cls).items():
            if not isinstance(attribute, PopoField):
                continue
            if name.startswith('__') or name.startswith(mangled_prefix):
                raise InvalidPopoSchemaException(
                    f"Field [{name}] of [{cls.__name__}] cannot use a dunder or name-mangled name.", name
                )
            if attribute.name != name:
                raise InvalidPopoSchemaException(
                    f"Field [{name}] of [{cls.__name__}] is also declared as [{attribute.name}].", name
                )

    def __new__(cls, *args: Any, **kwargs: Any) -> BasePopo:
        instance = super().__new__(cls)
        # Each instance gets its own default_factory values up front
        for popo_field in cls.__popo_fields__:
            if popo_field.default_factory is not None:
                instance.__dict__[popo_field.name] = popo_field.default_factory()
        return instance

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        """Let pydantic, and so FastAPI response models, serialize POPOs through to_array()."""
        return core_schema.is_instance_schema(
            cls,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda popo: popo.to_array(),
                return_schema=core_schema.dict_schema(keys_schema=core_schema.str_schema()),
            ),
        )

    # Schema
    @classmethod
    def fields(cls) -> Tuple[PopoField, ...]:
        """Get every declared field in serialization order."""
        return cls.__popo_fields__

    @classmethod
    def public_fields(cls) -> Tuple[PopoField, ...]:
        """Get the fields that are part of the serialized output."""
        return tuple(f for f in cls.__popo_fields__ if f.is_public)

    @classmethod
    def field_names(cls) -> List[str]:
        """Get the names of the public fields."""
        return [f.name for f in cls.public_fields()]

    # Serialization
    def to_array(self) -> JsonObject:
        """Convert the POPO into a dict of its public fields."""
        return {
            f.name: self._serialize_field(f, test_mode=False)
            for f in self.public_fields()
        }

    def to_test_array(self) -> JsonObject:
        """Convert the POPO into a dict with snake_case keys for fixture comparison."""
        return {
            Str.snake(f.name): self._serialize_field(f, test_mode=True)
            for f in self.public_fields()
        }

    def to_json(self, **kwargs: Any) -> str:
        """Convert the POPO to JSON."""
        return json.dumps(self.to_array(), **kwargs)

    def to_response(self, status_code: int = 200) -> JSONResponse:
        """Create an HTTP response from the POPO."""
        return JSONResponse(content=self.to_array(), status_code=status_code)

    def _read_field(self, popo_field: PopoField) -> Any:
        try:
            return getattr(self, popo_field.name)
        except AttributeError:
            exception = PropertyNotReadableException(type(self).__name__, popo_field.name)
            logger().error(str(exception), exception.context_data)
            raise exception from None

    def _serialize_field(self, popo_field: PopoField, test_mode: bool) -> JsonValue:
        value = self._read_field(popo_field)
        if popo_field.serializer is not None and value is not None:
            value = popo_field.serializer(value)

        try:
            return serialize_value(value, test_mode, popo_field.name)
        except UnserializableValueException as e:
            # Nested POPOs report their own failures first
            if "popo" not in e.context_data:
                e.context_data["popo"] = type(self).__name__
                logger().error(str(e), e.context_data)
            raise

    # Mapping protocol over the public serialized view
    def keys(self) -> KeysView[str]:
        return dict.fromkeys(self.field_names()).keys()

    def __getitem__(self, key: str) -> JsonValue:
        for popo_field in self.public_fields():
            if popo_field.name == key:
                return self._serialize_field(popo_field, test_mode=False)
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.field_names())

    def __len__(self) -> int:
        return len(self.public_fields())

    def __bool__(self) -> bool:
        return True

    def __contains__(self, key: object) -> bool:
        return key in self.field_names()

    def __repr__(self) -> str:
        public = []
        for popo_field in self.public_fields():
            value = self.__dict__.get(popo_field.name, popo_field.default)
            public.append(f"{popo_field.name}={value!r}")
        return f"{type(self).__name__}({', '.join(public)})"

