"""
Flattening of parameter objects into leaf parameters.

A parameter object is a class whose fields document the query parameters of
an endpoint. Simple fields become one ``MethodParameter`` each; composite
fields are walked recursively and their leaves are named with a dotted path
(``address.city``).
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple, Type

from paramobject.core.annotations import NULLABLE, is_optional
from paramobject.core.contracts import MethodParameter
from paramobject.core.exceptions import CyclicParameterObjectError, IntrospectionError
from paramobject.core.logger import get_logger
from paramobject.introspection.beans import BeanIntrospector
from paramobject.introspection.fields import FieldDescriptor, all_fields_of, erase
from paramobject.types.registry import SimpleTypeRegistry

logger = get_logger(__name__)


class ParameterObjectExtractor:
    """
    Walks a parameter object class and yields its leaf parameters.

    Args:
        introspector: Resolves read accessors; defaults to ``BeanIntrospector``.
        registry: Simple-type classification; defaults to the process-wide
            ``SimpleTypeRegistry``.

    Fields are visited subclass first, then up the MRO, in declaration order.
    A field without a read accessor is skipped, and a class that cannot be
    introspected contributes none of its simple fields. A composite field
    that leads back to a class already being walked raises
    ``CyclicParameterObjectError``.

    Example:
        >>> extractor = ParameterObjectExtractor()
        >>> [p.name for p in extractor.extract(PersonQuery)]
        ['name', 'address.city', 'address.zip_code']
    """

    def __init__(
        self,
        *,
        introspector: Optional[BeanIntrospector] = None,
        registry: Type[SimpleTypeRegistry] = SimpleTypeRegistry,
    ) -> None:
        self.introspector = introspector or BeanIntrospector()
        self.registry = registry

    def extract(self, cls: type) -> Iterator[MethodParameter]:
        return self._extract(cls, "", (cls,))

    def _extract(self, cls: type, prefix: str, path: Tuple[type, ...]) -> Iterator[MethodParameter]:
        for field in all_fields_of(cls):
            yield from self._from_field(cls, field, prefix, path)

    def _from_field(
        self,
        param_class: type,
        field: FieldDescriptor,
        prefix: str,
        path: Tuple[type, ...],
    ) -> Iterator[MethodParameter]:
        field_type = erase(field.type)
        if self.registry.is_simple(field_type):
            yield from self._from_simple_field(param_class, field, prefix)
            return

        dotted = prefix + field.property_name
        if field_type in path:
            raise CyclicParameterObjectError(dotted, path, field_type)
        yield from self._extract(field_type, dotted + ".", (*path, field_type))

    def _from_simple_field(
        self,
        param_class: type,
        field: FieldDescriptor,
        prefix: str,
    ) -> Iterator[MethodParameter]:
        annotations = field.annotations
        if is_optional(field):
            annotations = (*annotations, NULLABLE)

        dotted = prefix + field.property_name
        try:
            bean_info = self.introspector.get_bean_info(param_class)
        except IntrospectionError as exc:
            logger.debug(f"Skipping {dotted}: {exc}")
            return

        accessor = bean_info.find(field.property_name)
        if accessor is None:
            logger.debug(f"Skipping {dotted}: no read accessor on {param_class.__qualname__}")
            return

        yield MethodParameter(
            name=dotted,
            accessor=accessor,
            parameter_type=field.type,
            annotations=annotations,
            owner=param_class,
        )


def extract_from(cls: type) -> Iterator[MethodParameter]:
    """Leaf parameters of ``cls`` using the default introspector and registry."""
    return ParameterObjectExtractor().extract(cls)
