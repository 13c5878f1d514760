from __future__ import annotations

import importlib
from typing import Any, Optional, Type, Union, TYPE_CHECKING

from laravel_popo.Exceptions import FactoryNotFoundException

if TYPE_CHECKING:
    from laravel_popo.Factories.PopoFactory import PopoFactory


class HasPopoFactory:
    """
    Mixin trait associating a POPO with the factory that builds its test fixtures.

    The POPO declares its factory by overriding `popo_factory()`, returning
    either the factory class or its dotted import path:

        class ExampleParentPopo(BasePopo, HasPopoFactory):
            @classmethod
            def popo_factory(cls) -> str:
                return 'tests.Factory.ExampleParentPopoFactory.ExampleParentPopoFactory'

        ExampleParentPopo.factory(3).make()
    """

    @classmethod
    def popo_factory(cls) -> Union[str, Type['PopoFactory[Any]'], None]:
        """Get the factory class, or its dotted path, for this POPO."""
        return None

    @classmethod
    def factory(cls, count: Optional[int] = None, **state: Any) -> 'PopoFactory[Any]':
        """Get a new factory instance for the POPO."""
        factory = cls.resolve_popo_factory().for_popo(cls)

        if count is not None:
            factory = factory.count(count)
        if state:
            factory = factory.state(**state)

        return factory

    @classmethod
    def resolve_popo_factory(cls) -> Type['PopoFactory[Any]']:
        """Resolve the factory class declared by popo_factory()."""
        from laravel_popo.Factories.PopoFactory import PopoFactory

        declared = cls.popo_factory()
        if declared is None:
            raise FactoryNotFoundException(cls.__name__, "Override popo_factory() to declare one.")

        if isinstance(declared, str):
            module_name, _, class_name = declared.rpartition('.')
            if not module_name:
                raise FactoryNotFoundException(cls.__name__, f"Invalid factory path [{declared}].")
            try:
                module = importlib.import_module(module_name)
                declared = getattr(module, class_name)
            except (ImportError, AttributeError) as e:
                raise FactoryNotFoundException(cls.__name__, f"Cannot load [{declared}]: {e}") from e

        if not (isinstance(declared, type) and issubclass(declared, PopoFactory)):
            raise FactoryNotFoundException(cls.__name__, f"[{declared!r}] is not a PopoFactory.")

        return declared
