from __future__ import annotations

from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union, TYPE_CHECKING
from abc import ABC, abstractmethod
from faker import Faker

from laravel_popo.Exceptions import PopoException
from laravel_popo.Support.Collection import Collection

if TYPE_CHECKING:
    from laravel_popo.BasePopo import BasePopo

PopoT = TypeVar('PopoT', bound='BasePopo')
FactoryT = TypeVar('FactoryT', bound='PopoFactory[Any]')

StateValue = Union[Mapping[str, Any], Callable[[Dict[str, Any]], Mapping[str, Any]]]

fake = Faker()


class LazyAttribute:
    """Represents a lazy attribute that's evaluated when the POPO is made."""

    def __init__(self, callback: Callable[[], Any]) -> None:
        self.callback = callback

    def __call__(self) -> Any:
        return self.callback()


class PopoFactory(ABC, Generic[PopoT]):
    """
    Laravel-style factory producing POPO test fixtures.

    POPOs are never persisted, so a factory only makes instances. The
    definition is merged with states, sequences and explicit attributes, in
    that order, and passed to the POPO constructor as keyword arguments:

        class SamplePopoFactory(PopoFactory[SamplePopo]):
            popo = SamplePopo

            def definition(self) -> Dict[str, Any]:
                return {'name': self.faker.name()}

        SamplePopoFactory().count(3).state(name='fixed').make()
    """

    popo: Optional[Type[PopoT]] = None

    def __init__(self) -> None:
        self.faker: Faker = fake
        self._count: Optional[int] = None
        self._states: List[StateValue] = []
        self._sequence: List[StateValue] = []
        self._after_making: List[Callable[[PopoT], None]] = []

    @abstractmethod
    def definition(self) -> Dict[str, Any]:
        """Define the POPO's default attributes."""
        pass

    @classmethod
    def new(cls: Type[FactoryT]) -> FactoryT:
        """Create a new factory instance."""
        return cls()

    @classmethod
    def seed(cls, seed: int) -> None:
        """Seed the shared Faker generator for reproducible fixtures."""
        Faker.seed(seed)

    def make(self, attributes: Optional[Dict[str, Any]] = None,
             count: Optional[int] = None) -> Union[PopoT, Collection[PopoT]]:
        """Make one POPO, or a collection of them when a count is set."""
        if count is None:
            count = self._count

        if count is None:
            return self._make_one(attributes or {}, 0)

        return Collection.times(count, lambda index: self._make_one(attributes or {}, index))

    def make_one(self, attributes: Optional[Dict[str, Any]] = None) -> PopoT:
        """Make a single POPO regardless of the configured count."""
        return self._make_one(attributes or {}, 0)

    def raw(self, attributes: Optional[Dict[str, Any]] = None, index: int = 0) -> Dict[str, Any]:
        """Get the resolved attributes without making a POPO."""
        data = dict(self.definition())

        for state in self._states:
            data.update(self._apply(state, data))

        if self._sequence:
            data.update(self._apply(self._sequence[index % len(self._sequence)], data))

        data.update(attributes or {})

        return {key: self._resolve(value) for key, value in data.items()}

    def _make_one(self, attributes: Dict[str, Any], index: int) -> PopoT:
        if self.popo is None:
            raise PopoException(f"Factory [{type(self).__name__}] does not define the POPO it makes.")

        instance = self.popo(**self.raw(attributes, index))

        for callback in self._after_making:
            callback(instance)

        return instance

    @staticmethod
    def _apply(state: StateValue, data: Dict[str, Any]) -> Mapping[str, Any]:
        return state(data) if callable(state) else state

    @staticmethod
    def _resolve(value: Any) -> Any:
        if isinstance(value, LazyAttribute):
            return value()
        if isinstance(value, PopoFactory):
            return value.make()
        return value

    # Fluent modifiers, each returns a new factory
    def count(self: FactoryT, count: Optional[int]) -> FactoryT:
        """Set the number of POPOs to make."""
        factory = self._new_instance()
        factory._count = count
        return factory

    def times(self: FactoryT, count: int) -> FactoryT:
        """Alias of count()."""
        return self.count(count)

    def state(self: FactoryT, state: Optional[StateValue] = None, **attributes: Any) -> FactoryT:
        """Add a state transformation to the factory."""
        factory = self._new_instance()
        if state is not None:
            factory._states.append(state)
        if attributes:
            factory._states.append(attributes)
        return factory

    def sequence(self: FactoryT, *sequence: StateValue) -> FactoryT:
        """Cycle through the given states, one per POPO made."""
        factory = self._new_instance()
        factory._sequence = list(sequence)
        return factory

    def after_making(self: FactoryT, callback: Callable[[PopoT], None]) -> FactoryT:
        """Register callback to run after making each POPO."""
        factory = self._new_instance()
        factory._after_making.append(callback)
        return factory

    def lazy(self, callback: Callable[[], Any]) -> LazyAttribute:
        """Create a lazy attribute that's evaluated when the POPO is made."""
        return LazyAttribute(callback)

    def _new_instance(self: FactoryT) -> FactoryT:
        factory = self.__class__()
        factory.popo = self.popo
        factory._count = self._count
        factory._states = self._states.copy()
        factory._sequence = self._sequence.copy()
        factory._after_making = self._after_making.copy()
        return factory

    @classmethod
    def for_popo(cls: Type[FactoryT], popo: Type[Any]) -> FactoryT:
        """Create a factory instance bound to a specific POPO class."""
        factory = cls()
        factory.popo = popo
        return factory
