from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from paramobject.core.imports import IMPORT_PATH, MODULE_PATH

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ExtractorConfig(BaseModel):
    """Registration-phase configuration applied before any extraction.

    Type references use import paths: ``pkg.module:Name`` or ``pkg.module.Name``.
    """

    # Modules imported for their @register_simple_type side effects
    plugins: List[str] = Field(default_factory=list)

    simple_types: List[str] = Field(default_factory=list)
    excluded_simple_types: List[str] = Field(default_factory=list)

    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def _validate_import_paths(self) -> "ExtractorConfig":
        for module_name in self.plugins:
            if not MODULE_PATH.match(module_name):
                raise ValueError(f"plugins entries must be module paths, got {module_name!r}")

        for key in ("simple_types", "excluded_simple_types"):
            for path in getattr(self, key):
                if not IMPORT_PATH.match(path) or ("." not in path and ":" not in path):
                    raise ValueError(f"{key} entries must be import paths like 'pkg.module:Name', got {path!r}")

        overlap = set(self.simple_types) & set(self.excluded_simple_types)
        if overlap:
            raise ValueError(
                f"Types cannot be both added and excluded: {sorted(overlap)}"
            )
        return self
