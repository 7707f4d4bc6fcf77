from __future__ import annotations

import inspect
import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, Literal, Optional, Tuple

from paramobject.core.exceptions import IntrospectionError, ParamObjectException
from paramobject.introspection.fields import all_fields_of

AccessorKind = Literal["property", "getter", "attribute"]

# Lower rank wins when several accessors expose the same property name
_RANK: Dict[str, int] = {"property": 0, "is_": 1, "get_": 2, "attribute": 3}


@dataclass(frozen=True)
class PropertyDescriptor:
    name: str
    read_method: Callable[[Any], Any]
    kind: AccessorKind
    label: str

    def read(self, instance: Any) -> Any:
        return self.read_method(instance)


@dataclass(frozen=True)
class BeanInfo:
    """Public readable properties of a class, sorted by name."""

    bean_class: type
    properties: Tuple[PropertyDescriptor, ...]

    def find(self, name: str) -> Optional[PropertyDescriptor]:
        for descriptor in self.properties:
            if descriptor.name == name:
                return descriptor
        return None

    def names(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self.properties)


def _takes_only_self(function: Callable[..., Any]) -> bool:
    try:
        params = list(inspect.signature(function).parameters.values())
    except (TypeError, ValueError):
        return False
    return len(params) == 1 and params[0].kind in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )


def _returns_bool(function: Callable[..., Any]) -> bool:
    return_annotation = inspect.signature(function).return_annotation
    return return_annotation is bool or return_annotation == "bool"


class BeanIntrospector:
    """Resolves the read accessors of a class.

    A property ``x`` is readable through, in order of precedence:

    1. a ``property`` named ``x`` with a getter
    2. a method ``is_x(self) -> bool``
    3. a method ``get_x(self)``
    4. a public annotated attribute ``x``

    Names starting with an underscore are never public properties.
    """

    def get_bean_info(self, cls: type) -> BeanInfo:
        try:
            found = self._collect(cls)
        except ParamObjectException:
            raise
        except Exception as exc:
            raise IntrospectionError(cls, f"{type(exc).__name__}: {exc}") from exc

        properties = tuple(found[name][1] for name in sorted(found))
        return BeanInfo(bean_class=cls, properties=properties)

    def _collect(self, cls: type) -> Dict[str, Tuple[int, PropertyDescriptor]]:
        found: Dict[str, Tuple[int, PropertyDescriptor]] = {}

        def offer(name: str, rank: int, descriptor: PropertyDescriptor) -> None:
            if not name or name.startswith("_"):
                return
            current = found.get(name)
            if current is None or rank < current[0]:
                found[name] = (rank, descriptor)

        for member_name in dir(cls):
            if member_name.startswith("_"):
                continue
            member = inspect.getattr_static(cls, member_name, None)

            if isinstance(member, property):
                if member.fget is not None:
                    offer(
                        member_name,
                        _RANK["property"],
                        PropertyDescriptor(
                            name=member_name,
                            read_method=member.fget,
                            kind="property",
                            label=f"{cls.__qualname__}.{member_name}",
                        ),
                    )
                continue

            if not inspect.isfunction(member) or not _takes_only_self(member):
                continue
            for prefix in ("is_", "get_"):
                if not member_name.startswith(prefix):
                    continue
                if prefix == "is_" and not _returns_bool(member):
                    continue
                offer(
                    member_name[len(prefix):],
                    _RANK[prefix],
                    PropertyDescriptor(
                        name=member_name[len(prefix):],
                        read_method=member,
                        kind="getter",
                        label=f"{cls.__qualname__}.{member_name}()",
                    ),
                )

        for field in all_fields_of(cls):
            offer(
                field.name,
                _RANK["attribute"],
                PropertyDescriptor(
                    name=field.name,
                    read_method=operator.attrgetter(field.name),
                    kind="attribute",
                    label=f"{cls.__qualname__}.{field.name}",
                ),
            )

        return found


_DEFAULT_INTROSPECTOR = BeanIntrospector()


def get_bean_info(cls: type) -> BeanInfo:
    return _DEFAULT_INTROSPECTOR.get_bean_info(cls)
