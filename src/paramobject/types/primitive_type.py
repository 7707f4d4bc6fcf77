from __future__ import annotations

import datetime as dt
import pathlib
import uuid
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional, Tuple


class PrimitiveType(Enum):
    """OpenAPI leaf types recognised for Python classes."""

    STRING = "string"
    BOOLEAN = "boolean"
    BYTE = "byte"
    BINARY = "binary"
    LONG = "long"
    DOUBLE = "double"
    DECIMAL = "decimal"
    DATE = "date"
    DATE_TIME = "date-time"
    PARTIAL_TIME = "partial-time"
    UUID = "uuid"
    FILE = "file"
    OBJECT = "object"

    @property
    def openapi_type(self) -> str:
        return _OPENAPI_TYPES[self][0]

    @property
    def openapi_format(self) -> Optional[str]:
        return _OPENAPI_TYPES[self][1]

    @classmethod
    def from_type(cls, python_type: object) -> Optional["PrimitiveType"]:
        """Exact-class lookup; subclasses are not matched implicitly."""
        try:
            return _CUSTOM_CLASSES.get(python_type) or _KEY_CLASSES.get(python_type)  # type: ignore[arg-type]
        except TypeError:
            # unhashable hint objects
            return None

    @classmethod
    def register_custom_class(cls, python_type: type, primitive: "PrimitiveType") -> None:
        _CUSTOM_CLASSES[python_type] = primitive

    @classmethod
    def remove_custom_class(cls, python_type: type) -> None:
        _CUSTOM_CLASSES.pop(python_type, None)

    @classmethod
    def clear_custom_classes(cls) -> None:
        _CUSTOM_CLASSES.clear()


_OPENAPI_TYPES: Dict[PrimitiveType, Tuple[str, Optional[str]]] = {
    PrimitiveType.STRING: ("string", None),
    PrimitiveType.BOOLEAN: ("boolean", None),
    PrimitiveType.BYTE: ("string", "byte"),
    PrimitiveType.BINARY: ("string", "binary"),
    PrimitiveType.LONG: ("integer", "int64"),
    PrimitiveType.DOUBLE: ("number", "double"),
    PrimitiveType.DECIMAL: ("number", None),
    PrimitiveType.DATE: ("string", "date"),
    PrimitiveType.DATE_TIME: ("string", "date-time"),
    PrimitiveType.PARTIAL_TIME: ("string", "partial-time"),
    PrimitiveType.UUID: ("string", "uuid"),
    PrimitiveType.FILE: ("string", "binary"),
    PrimitiveType.OBJECT: ("object", None),
}

_KEY_CLASSES: Dict[type, PrimitiveType] = {
    str: PrimitiveType.STRING,
    bool: PrimitiveType.BOOLEAN,
    bytes: PrimitiveType.BYTE,
    bytearray: PrimitiveType.BINARY,
    int: PrimitiveType.LONG,
    float: PrimitiveType.DOUBLE,
    Decimal: PrimitiveType.DECIMAL,
    dt.date: PrimitiveType.DATE,
    dt.datetime: PrimitiveType.DATE_TIME,
    dt.time: PrimitiveType.PARTIAL_TIME,
    uuid.UUID: PrimitiveType.UUID,
    pathlib.PurePath: PrimitiveType.FILE,
    pathlib.PurePosixPath: PrimitiveType.FILE,
    pathlib.PureWindowsPath: PrimitiveType.FILE,
    pathlib.Path: PrimitiveType.FILE,
    pathlib.PosixPath: PrimitiveType.FILE,
    pathlib.WindowsPath: PrimitiveType.FILE,
    object: PrimitiveType.OBJECT,
}

# Classes registered at runtime take precedence over the built-in table
_CUSTOM_CLASSES: Dict[type, PrimitiveType] = {}
