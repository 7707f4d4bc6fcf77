from __future__ import annotations

import dataclasses
import inspect
import types
import typing
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, List, Literal, Tuple, TypeVar, get_args, get_origin

from pydantic import BaseModel

from paramobject.core.exceptions import TypeResolutionError

_UNION_ORIGINS = (typing.Union, types.UnionType)

# Framework bases whose own annotations describe the framework, not the parameter object
_ROOT_TYPES: Tuple[type, ...] = (object, BaseModel, typing.Generic)


@dataclass(frozen=True)
class FieldDescriptor:
    """A declared field of a class: its name, type hint and ``Annotated`` metadata."""

    name: str
    type: Any
    annotations: Tuple[Any, ...]
    declaring_type: type

    @property
    def property_name(self) -> str:
        """Public name of the field: ``_city`` is exposed as ``city``."""
        return self.name.lstrip("_") or self.name


def _is_class_var(hint: Any) -> bool:
    return hint is ClassVar or get_origin(hint) is ClassVar


def _split_annotated(hint: Any) -> Tuple[Any, Tuple[Any, ...]]:
    if get_origin(hint) is Annotated:
        base, *metadata = get_args(hint)
        inner, inner_metadata = _split_annotated(base)
        return inner, (*inner_metadata, *metadata)
    return hint, ()


def declared_fields(cls: type) -> List[FieldDescriptor]:
    """Fields declared by ``cls`` itself, in declaration order."""
    try:
        hints = inspect.get_annotations(cls, eval_str=True)
    except (NameError, SyntaxError, TypeError) as exc:
        raise TypeResolutionError(cls, str(exc)) from exc

    fields: List[FieldDescriptor] = []
    for name, hint in hints.items():
        if name.startswith("__") and name.endswith("__"):
            continue
        if _is_class_var(hint) or isinstance(hint, dataclasses.InitVar):
            continue
        field_type, metadata = _split_annotated(hint)
        if _is_class_var(field_type):
            continue
        fields.append(
            FieldDescriptor(name=name, type=field_type, annotations=metadata, declaring_type=cls)
        )
    return fields


def all_fields_of(cls: type) -> List[FieldDescriptor]:
    """Declared fields of ``cls`` followed by those of each base class in MRO order."""
    fields: List[FieldDescriptor] = []
    for klass in inspect.getmro(cls):
        if klass in _ROOT_TYPES:
            continue
        fields.extend(declared_fields(klass))
    return fields


def erase(hint: Any) -> type:
    """Reduce a type hint to the class that decides how the field is walked.

    - ``Annotated[T, ...]`` -> erasure of ``T``
    - any union, ``Optional[T]`` included -> ``types.UnionType``
    - ``Literal["a", "b"]`` -> ``type("a")``
    - ``list[int]``, ``Mapping[str, T]`` -> the generic origin
    - ``NewType`` -> erasure of its supertype
    - ``TypeVar`` -> erasure of its bound, else ``object``
    - ``Any`` and unrecognised constructs -> ``object``
    """
    while True:
        if hint is None:
            return type(None)
        if hint is Any:
            return object
        origin = get_origin(hint)
        if origin is Annotated:
            hint = get_args(hint)[0]
            continue
        if origin in _UNION_ORIGINS or isinstance(hint, types.UnionType):
            return types.UnionType
        if origin is Literal:
            values = get_args(hint)
            return type(values[0]) if values else object
        if isinstance(hint, TypeVar):
            bound = hint.__bound__
            hint = bound if bound is not None and not isinstance(bound, typing.ForwardRef) else object
            continue
        if isinstance(hint, typing.NewType):
            hint = hint.__supertype__
            continue
        if origin is not None:
            hint = origin
            continue
        if isinstance(hint, type):
            return hint
        return object
