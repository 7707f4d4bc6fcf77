from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from paramobject.core.annotations import Nullable, Parameter, find_annotation
from paramobject.introspection.beans import PropertyDescriptor

A = TypeVar("A")


def describe_type(hint: Any) -> str:
    if isinstance(hint, type):
        return hint.__qualname__
    return repr(hint).replace("typing.", "")


@dataclass(frozen=True)
class MethodParameter:
    """A leaf parameter of a parameter object, as handed to the schema generator.

    ``name`` is the dotted field path from the root class (``address.city``),
    ``accessor`` reads the value from an instance of ``owner`` and
    ``annotations`` is the field's ``Annotated`` metadata, with ``NULLABLE``
    appended for fields not marked ``Parameter(required=True)``.
    """
    name: str                           # Dotted path, e.g. "address.city"
    accessor: PropertyDescriptor        # Read accessor resolved on owner
    parameter_type: Any                 # Field type hint without Annotated metadata
    annotations: Tuple[Any, ...]        # Declared metadata plus synthetic markers
    owner: type                         # Class the accessor was resolved on

    def get_annotation(self, kind: Type[A]) -> Optional[A]:
        return find_annotation(self.annotations, kind)

    def has_annotation(self, kind: type) -> bool:
        return self.get_annotation(kind) is not None

    @property
    def required(self) -> bool:
        parameter = self.get_annotation(Parameter)
        return parameter is not None and parameter.required

    @property
    def nullable(self) -> bool:
        return self.has_annotation(Nullable)

    @property
    def description(self) -> Optional[str]:
        parameter = self.get_annotation(Parameter)
        return parameter.description if parameter is not None else None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly summary used by the CLI."""
        return {
            "name": self.name,
            "type": describe_type(self.parameter_type),
            "accessor": self.accessor.label,
            "accessor_kind": self.accessor.kind,
            "required": self.required,
            "nullable": self.nullable,
            "description": self.description,
            "annotations": [repr(a) for a in self.annotations],
        }
