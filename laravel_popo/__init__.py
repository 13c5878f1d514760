"""
Laravel-style Plain Old Python Objects for FastAPI.

Declare a POPO's fields once, return it from a route, and only its public
fields reach the response body.
"""
from __future__ import annotations

from laravel_popo.Exceptions import (
    FactoryNotFoundException,
    InvalidPopoSchemaException,
    PopoException,
    PropertyNotReadableException,
    UnserializableValueException,
)
from laravel_popo.Fields import PopoField, Visibility, field, private_field, public_field
from laravel_popo.BasePopo import BasePopo
from laravel_popo.HasPopoFactory import HasPopoFactory
from laravel_popo.Factories import LazyAttribute, PopoFactory
from laravel_popo.PopoServiceProvider import PopoServiceProvider

__version__ = "1.0.0"

__all__ = [
    "BasePopo",
    "PopoField",
    "Visibility",
    "field",
    "public_field",
    "private_field",
    "HasPopoFactory",
    "PopoFactory",
    "LazyAttribute",
    "PopoServiceProvider",
    "PopoException",
    "PropertyNotReadableException",
    "UnserializableValueException",
    "FactoryNotFoundException",
    "InvalidPopoSchemaException",
]
