from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path
from typing import Iterable, List, Set, Union

import yaml
from pydantic import ValidationError

from paramobject.core.exceptions import ConfigurationError
from paramobject.core.imports import import_string
from paramobject.core.logger import configure_root_logger, get_logger
from paramobject.models.extractor_config import ExtractorConfig
from paramobject.types.registry import SimpleTypeRegistry

logger = get_logger(__name__)

_LOADED_PLUGINS: Set[str] = set()


def load_plugins(modules: Iterable[str], *, reload: bool = False) -> None:
    """Import plugin modules so their ``@register_simple_type`` decorators run.

    In production, call with reload=False (default) so imports are cheap.
    In tests, call with reload=True after ``SimpleTypeRegistry.reset()`` to re-run decorators.
    """
    for module_name in modules:
        if module_name in _LOADED_PLUGINS and not reload:
            continue
        if reload:
            sys.modules.pop(module_name, None)
        try:
            importlib.import_module(module_name)
        except ImportError as exc:
            raise ConfigurationError("Cannot import plugin module", module_name) from exc
        _LOADED_PLUGINS.add(module_name)
        logger.debug(f"Loaded plugin module {module_name}")


def _resolve_types(paths: Iterable[str]) -> List[type]:
    resolved: List[type] = []
    for path in paths:
        obj = import_string(path)
        if not isinstance(obj, type):
            raise ConfigurationError("Simple type must be a class", path)
        resolved.append(obj)
    return resolved


def apply_config(config: ExtractorConfig, *, reload_plugins: bool = False) -> None:
    """Apply the registration phase described by ``config`` to the process-wide registry."""
    configure_root_logger(config.log_level)
    load_plugins(config.plugins, reload=reload_plugins)

    added = _resolve_types(config.simple_types)
    removed = _resolve_types(config.excluded_simple_types)

    SimpleTypeRegistry.add_simple_types(*added)
    SimpleTypeRegistry.remove_simple_types(*removed)

    if added or removed:
        logger.info(
            f"Simple types updated: added={[t.__qualname__ for t in added]} "
            f"removed={[t.__qualname__ for t in removed]}"
        )


def load_config(config_path: Union[str, Path]) -> ExtractorConfig:
    """Read an ``ExtractorConfig`` from a JSON or YAML file."""
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, "r") as f:
        if config_file.suffix == ".json":
            data = json.load(f)
        elif config_file.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            raise ConfigurationError(
                f"Unsupported config format: {config_file.suffix}. Use .json or .yaml",
                str(config_file),
            )

    try:
        return ExtractorConfig.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config {config_file.name}: {exc}") from exc
