from __future__ import annotations

import importlib
import re
from typing import Any

from paramobject.core.exceptions import ConfigurationError

_IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"
_DOTTED = rf"{_IDENTIFIER}(?:\.{_IDENTIFIER})*"

# "pkg.module:Name.Inner" or "pkg.module.Name"
IMPORT_PATH = re.compile(rf"^{_DOTTED}(?::{_DOTTED})?$")
MODULE_PATH = re.compile(rf"^{_DOTTED}$")


def import_string(path: str) -> Any:
    """Resolve ``pkg.module:Name`` (or ``pkg.module.Name``) to the named object."""
    if not IMPORT_PATH.match(path or ""):
        raise ConfigurationError("Invalid import path", path)

    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")
    if not module_name or not attr_path:
        raise ConfigurationError("Import path must name an attribute of a module", path)

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import module {module_name!r}", path) from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ConfigurationError(f"{module_name!r} has no attribute {attr_path!r}", path) from exc
    return obj
