"""Configuration loading utilities for ZB Core."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .codec.formats import FORMATS
from .paths import default_config_path


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class EncoderConfig(BaseModel):
    strict: bool = Field(default=False, description="Reject code points above U+00FF instead of truncating")
    output_format: str = Field(default="json", description="Rendering for encoded bytes: json|hex|base64")

    @field_validator("output_format")
    @classmethod
    def _validate_output_format(cls, value: str) -> str:
        fmt = value.strip().lower()
        if fmt not in FORMATS:
            raise ValueError(f"output_format must be one of {', '.join(FORMATS)}")
        return fmt


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    encoder: EncoderConfig = Field(default_factory=EncoderConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".zb" / "config.yaml"
    yield default_config_path()


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
