"""paramobject.

Parameter objects for OpenAPI documentation.

Flattens a class that groups the query parameters of an endpoint into the
leaf parameters a schema generator documents: dotted names for nested
fields, the read accessor of each leaf, and its annotations with a nullable
marker for parameters not declared required.

Public API for documentation generators and build scripts.
"""

from paramobject.cli import main, validate_config
from paramobject.core.annotations import NULLABLE, Nullable, Parameter
from paramobject.core.contracts import MethodParameter
from paramobject.extractor import ParameterObjectExtractor, extract_from
from paramobject.types.primitive_type import PrimitiveType
from paramobject.types.registry import SimpleTypeRegistry, is_simple_type, register_simple_type

__version__ = "0.1.0"

__all__ = [
    "MethodParameter",
    "NULLABLE",
    "Nullable",
    "Parameter",
    "ParameterObjectExtractor",
    "PrimitiveType",
    "SimpleTypeRegistry",
    "extract_from",
    "is_simple_type",
    "main",
    "register_simple_type",
    "validate_config",
]
