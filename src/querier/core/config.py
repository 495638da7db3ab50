"""Configuration management for querier.

Handles the TOML config file, environment variables and precedence
resolution for rendering defaults.

Precedence order (highest to lowest):
1. CLI flags (--format, --no-header, etc.)
2. Environment variables (QUERIER_FORMAT, QUERIER_NO_HEADER)
3. Config file
4. Built-in defaults
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator

from querier.core.exceptions import ConfigError
from querier.core.formats import OutputFormat

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "querier" / "config.toml"

_DEFAULTS: dict[str, Any] = {
    "default_format": "table",
    "include_header": True,
    "indent": None,
    "max_width": None,
    "wide_columns": False,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _validate_format(v: str) -> str:
    valid = {f.value for f in OutputFormat}
    if v not in valid:
        msg = f"Invalid format: '{v}'. Must be one of: {', '.join(sorted(valid))}"
        raise ValueError(msg)
    return v


def _parse_bool(env_var: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    msg = f"Invalid {env_var} value: '{value}'. Must be a boolean"
    raise ConfigError(msg)


class AppConfig(BaseModel):
    default_format: str = "table"
    include_header: bool = True
    indent: int | None = None
    max_width: int | None = None
    wide_columns: bool = False

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        return _validate_format(v)


class ResolvedConfig(BaseModel):
    format: str = "table"
    include_header: bool = True
    indent: int | None = None
    max_width: int | None = None
    wide_columns: bool = False
    sources: dict[str, str] = {}


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from TOML file.

    Returns default AppConfig if file doesn't exist.
    Raises ConfigError on malformed TOML or invalid config.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Malformed TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return AppConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid configuration in {config_path}: {e}"
        raise ConfigError(msg) from e


def resolve_config(config: AppConfig, **cli_overrides: Any) -> ResolvedConfig:
    """Resolve configuration using precedence chain.

    CLI > env > config file > built-in defaults.
    """
    sources: dict[str, str] = {}
    resolved: dict[str, Any] = {}

    # Layer 1: Built-in defaults
    resolved.update(_DEFAULTS)
    for key in resolved:
        sources[key] = "default"

    # Layer 2: Config file
    for key in config.model_fields_set:
        resolved[key] = getattr(config, key)
        sources[key] = "config"

    # Layer 3: Environment variables
    env_format = os.environ.get("QUERIER_FORMAT")
    if env_format:
        try:
            resolved["default_format"] = _validate_format(env_format)
        except ValueError as e:
            msg = f"Invalid QUERIER_FORMAT: {e}"
            raise ConfigError(msg) from None
        sources["default_format"] = "env: QUERIER_FORMAT"
    env_no_header = os.environ.get("QUERIER_NO_HEADER")
    if env_no_header is not None:
        resolved["include_header"] = not _parse_bool("QUERIER_NO_HEADER", env_no_header)
        sources["include_header"] = "env: QUERIER_NO_HEADER"

    # Layer 4: CLI flags (highest priority)
    cli_to_field = {
        "format": "default_format",
        "include_header": "include_header",
        "indent": "indent",
        "max_width": "max_width",
        "wide_columns": "wide_columns",
    }
    for cli_name, field_name in cli_to_field.items():
        value = cli_overrides.get(cli_name)
        if value is not None:
            resolved[field_name] = value
            sources[field_name] = f"cli: --{cli_name.replace('_', '-')}"

    resolved["format"] = resolved.pop("default_format")
    sources["format"] = sources.pop("default_format")
    resolved["sources"] = sources
    return ResolvedConfig(**resolved)
