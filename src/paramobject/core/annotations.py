from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Optional, Type, TypeVar

if TYPE_CHECKING:
    from paramobject.introspection.fields import FieldDescriptor

A = TypeVar("A")


@dataclass(frozen=True)
class Parameter:
    """Documentation marker for a parameter-object field.

    Attach it with ``typing.Annotated``::

        class Query:
            name: Annotated[str, Parameter(description="Exact name", required=True)]
    """

    description: Optional[str] = None
    required: bool = False
    deprecated: bool = False
    example: Any = None


@dataclass(frozen=True)
class Nullable:
    """Marks a parameter that may be omitted or null."""


NULLABLE = Nullable()


def find_annotation(annotations: Iterable[Any], kind: Type[A]) -> Optional[A]:
    """Return the first annotation that is an instance of ``kind``."""
    for annotation in annotations:
        if isinstance(annotation, kind):
            return annotation
    return None


def is_optional(field: "FieldDescriptor") -> bool:
    """True unless the field carries ``Parameter(required=True)``."""
    parameter = find_annotation(field.annotations, Parameter)
    return parameter is None or not parameter.required
