from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from warnparse.constants import DEFAULT_ENCODING, PROJECT_CONFIG_FILE
from warnparse.exceptions import ConfigError
from warnparse.logging import get_logger
from warnparse.parsers.base import LineTransformer
from warnparse.parsers.transformers import compose, strip_ansi, strip_prefix

__all__ = [
    "WarnparseConfig",
    "ParsingConfig",
    "OutputConfig",
    "load_config",
    "get_user_config_path",
]

logger = get_logger(__name__)


class ParsingConfig(BaseModel):
    """Settings applied when reading and parsing tool output.

    Attributes:
        encoding: Encoding used to read report files (default: utf-8).
        default_parser: Parser ID used when the CLI gets no --parser option.
        strip_prefix: Regular expression removed from the start of each line.
        strip_ansi: Remove ANSI escape sequences before matching.
    """

    encoding: str = DEFAULT_ENCODING
    default_parser: str | None = None
    strip_prefix: str | None = None
    strip_ansi: bool = True

    @field_validator("strip_prefix")
    @classmethod
    def check_strip_prefix_compiles(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"not a valid regular expression: {e}") from e
        return v

    def build_transformer(self) -> LineTransformer | None:
        """Line transformer for these settings, None if nothing to rewrite."""
        transformers: list[LineTransformer] = []
        if self.strip_ansi:
            transformers.append(strip_ansi)
        if self.strip_prefix:
            transformers.append(strip_prefix(self.strip_prefix))
        return compose(*transformers) if transformers else None


class OutputConfig(BaseModel):
    """Settings for CLI output."""

    format: Literal["text", "json"] = "text"


class WarnparseConfig(BaseSettings):
    """Root configuration object containing all warnparse settings."""

    model_config = SettingsConfigDict(
        env_prefix="WARNPARSE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Environment variables win over values read from YAML files.

        load_config() passes the merged YAML content as init settings.
        """
        return (env_settings, init_settings)


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/warnparse/config.yaml
    """
    return Path.home() / ".config" / "warnparse" / "config.yaml"


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in {path}: {e}") from e
    if loaded is None:
        logger.warning("config_file_empty", path=str(path))
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(
            message=f"Config file {path} must contain a mapping",
            value=type(loaded).__name__,
        )
    return loaded


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Path | None = None) -> WarnparseConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional project config file. Defaults to ./warnparse.yaml.

    Returns:
        WarnparseConfig instance with merged configuration.

    Raises:
        ConfigError: If a config file is not valid YAML or a value is invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / PROJECT_CONFIG_FILE

    if not config_path.exists():
        logger.debug("project_config_missing", path=str(config_path))

    data = _merge(_read_yaml(get_user_config_path()), _read_yaml(config_path))
    try:
        return WarnparseConfig(**data)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
