from __future__ import annotations

import array
import types
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Callable, ClassVar, FrozenSet, List, Set, Tuple, Type, TypeVar

from paramobject.introspection.fields import erase
from paramobject.types.primitive_type import PrimitiveType

SimpleTypePredicate = Callable[[type], bool]
T = TypeVar("T", bound=type)


class SimpleTypeRegistryError(TypeError):
    pass


def _try_is_subclass(object_type: Any, check_type: Any) -> bool:
    try:
        return issubclass(object_type, check_type)
    except TypeError:
        return False


def _is_declared_subclass(object_type: Any, check_type: Any) -> bool:
    """issubclass() limited to real bases and register()ed virtual subclasses.

    ABCs such as ``Iterable`` also accept any class that merely defines the
    right methods through ``__subclasshook__``; those matches do not count.
    """
    if not _try_is_subclass(object_type, check_type):
        return False
    if check_type in getattr(object_type, "__mro__", ()):
        return True

    # virtual subclass: registered on check_type or on one of its subclasses
    matching = [sub for sub in type.__subclasses__(check_type) if _try_is_subclass(object_type, sub)]
    if any(_is_declared_subclass(object_type, sub) for sub in matching):
        return True
    return not matching and check_type.__subclasshook__(object_type) is NotImplemented


_PRIMITIVE_TYPES: FrozenSet[type] = frozenset({bool, int, float, complex, type(None)})
_ARRAY_TYPES: Tuple[type, ...] = (list, tuple, bytearray, memoryview, array.array)


def is_primitive(cls: type) -> bool:
    return cls in _PRIMITIVE_TYPES


def is_enum(cls: type) -> bool:
    return _try_is_subclass(cls, Enum)


def is_array(cls: type) -> bool:
    return _try_is_subclass(cls, _ARRAY_TYPES)


def is_schema_primitive(cls: type) -> bool:
    return PrimitiveType.from_type(cls) is not None


DEFAULT_PREDICATES: Tuple[SimpleTypePredicate, ...] = (
    is_primitive,
    is_enum,
    is_array,
    is_schema_primitive,
)

# text-like, optional wrapper (any union), map and iterable types
DEFAULT_SIMPLE_TYPES: Tuple[type, ...] = (str, bytes, types.UnionType, Mapping, Iterable)


class SimpleTypeRegistry:
    """Process-wide classification of leaf ("simple") types.

    A class is simple when any registered predicate accepts it or when it is a
    subclass of any registered exact type. Only real bases and classes
    ``register()``ed with an ABC count: a class is not iterable just because
    it defines ``__iter__``. Registration is expected to happen before
    extraction starts; the state is shared and unsynchronised.

    Predicates can be added but not removed individually; ``reset()`` restores
    the defaults for both predicates and exact types.
    """

    _predicates: ClassVar[List[SimpleTypePredicate]] = list(DEFAULT_PREDICATES)
    _simple_types: ClassVar[Set[type]] = set(DEFAULT_SIMPLE_TYPES)

    @classmethod
    def add_simple_type_predicate(cls, predicate: SimpleTypePredicate) -> None:
        if not callable(predicate):
            raise SimpleTypeRegistryError(f"Simple type predicate must be callable, got {predicate!r}")
        cls._predicates.append(predicate)

    @classmethod
    def add_simple_types(cls, *simple_types: type) -> None:
        for simple_type in simple_types:
            if not isinstance(simple_type, type):
                raise SimpleTypeRegistryError(f"Simple types must be classes, got {simple_type!r}")
        cls._simple_types.update(simple_types)

    @classmethod
    def remove_simple_types(cls, *simple_types: type) -> None:
        cls._simple_types.difference_update(simple_types)

    @classmethod
    def is_simple(cls, object_type: type) -> bool:
        return any(predicate(object_type) for predicate in cls._predicates) or any(
            _is_declared_subclass(object_type, simple_type) for simple_type in cls._simple_types
        )

    @classmethod
    def simple_types(cls) -> FrozenSet[type]:
        return frozenset(cls._simple_types)

    @classmethod
    def predicates(cls) -> Tuple[SimpleTypePredicate, ...]:
        return tuple(cls._predicates)

    @classmethod
    def reset(cls) -> None:
        cls._predicates[:] = DEFAULT_PREDICATES
        cls._simple_types.clear()
        cls._simple_types.update(DEFAULT_SIMPLE_TYPES)


def is_simple_type(hint: Any) -> bool:
    """Classify a field type hint after erasing it to a class."""
    return SimpleTypeRegistry.is_simple(erase(hint))


def register_simple_type(simple_type: Type[T]) -> Type[T]:
    """Class decorator: fields of the decorated class become leaf parameters."""
    SimpleTypeRegistry.add_simple_types(simple_type)
    return simple_type
