"""
Custom exception classes for the paramobject package.

Provides structured error handling for the reflection layer (field and bean
introspection), the parameter-object walker and the configuration layer.
"""

from typing import Any, Optional, Sequence


class ParamObjectException(Exception):
    """Base exception class for all paramobject exceptions."""

    pass


def _type_name(cls: Any) -> str:
    return getattr(cls, "__qualname__", None) or repr(cls)


class IntrospectionError(ParamObjectException):
    """
    Raised when the public properties of a class cannot be enumerated.

    The walker treats this as "no accessor for any field of that class" and
    drops the class's simple fields instead of propagating.

    Example:
        >>> raise IntrospectionError(Address, reason="__dir__ failed")
    """

    def __init__(self, cls: Any, reason: str):
        self.cls = cls
        self.reason = reason
        super().__init__(f"Cannot introspect {_type_name(cls)}: {reason}")


class TypeResolutionError(ParamObjectException):
    """Raised when the annotations of a class cannot be resolved to types (e.g. unknown forward reference)."""

    def __init__(self, cls: Any, reason: str):
        self.cls = cls
        self.reason = reason
        super().__init__(f"Cannot resolve field types of {_type_name(cls)}: {reason}")


class CyclicParameterObjectError(ParamObjectException):
    """
    Raised when a composite field refers back to a class already being walked.

    ``path`` holds the dotted field path at which the cycle closed and
    ``types`` the composite classes on the recursion stack, outermost first.
    """

    def __init__(self, path: str, types: Sequence[Any], cls: Any):
        self.path = path
        self.types = tuple(types)
        self.cls = cls
        chain = " -> ".join(_type_name(t) for t in (*self.types, cls))
        super().__init__(f"Self-referencing parameter object at {path!r}: {chain}")


class ConfigurationError(ParamObjectException):
    """
    Raised when extractor configuration cannot be loaded or applied.

    Can carry the offending value for context.
    """

    def __init__(self, reason: str, value: Optional[Any] = None):
        self.reason = reason
        self.value = value
        message = reason
        if value is not None:
            message += f" - {value!r}"
        super().__init__(message)
