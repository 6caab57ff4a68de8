"""Configuration loading: defaults < TOML file < environment < explicit overrides."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, model_validator

from sampling_reset.errors import ConfigError

CONFIG_FILE_NAME = "sampling-reset.toml"
DEFAULT_PORT = 5778

# Environment variable -> (section, key)
ENV_VAR_MAPPING: Dict[str, Tuple[str, str]] = {
    "SAMPLING_RESET_HOST": ("server", "host"),
    "SAMPLING_RESET_PORT": ("server", "port"),
    "SAMPLING_RESET_TIMEOUT": ("server", "timeout"),
    "SAMPLING_RESET_BACKLOG": ("server", "backlog"),
    "SAMPLING_RESET_LOG_LEVEL": ("logging", "level"),
    "SAMPLING_RESET_DEBUG": ("logging", "debug"),
    "SAMPLING_RESET_TRACING_ENABLED": ("tracing", "enabled"),
    "SAMPLING_RESET_SERVICE_NAME": ("tracing", "service_name"),
    "SAMPLING_RESET_OTLP_ENDPOINT": ("tracing", "endpoint"),
    "SAMPLING_RESET_API_KEY": ("tracing", "api_key"),
    "SAMPLING_RESET_CONSOLE_EXPORTER": ("tracing", "enable_console"),
}


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    timeout: float = Field(default=1.0, gt=0)
    backlog: int = Field(default=128, ge=1)


class LoggingConfig(BaseModel):
    level: Literal["debug", "info", "error"] = "info"
    debug: bool = False

    @property
    def effective_level(self) -> str:
        return "debug" if self.debug else self.level


class TracingConfig(BaseModel):
    enabled: bool = False
    service_name: str = "sampling-reset"
    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    enable_console: bool = False

    @model_validator(mode="after")
    def _check_exporters(self) -> "TracingConfig":
        if self.enabled and not (self.endpoint or self.enable_console):
            raise ValueError(
                "tracing is enabled but no exporter is configured "
                "(set an OTLP endpoint or enable the console exporter)"
            )
        return self


class ResetConfig(BaseModel):
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tracing: TracingConfig = Field(default_factory=TracingConfig)


def find_config_file() -> Optional[str]:
    """Return the first config file found in the current or home directory."""
    candidates = [
        Path.cwd() / CONFIG_FILE_NAME,
        Path.home() / f".{CONFIG_FILE_NAME}",
    ]
    for candidate in candidates:
        if candidate.is_file():
            return str(candidate)
    return None


def load_toml_config(path: str) -> Dict[str, Any]:
    """
    Load a TOML config file.

    A missing file yields an empty dict; unreadable or malformed TOML
    raises ConfigError.
    """
    file_path = Path(path)
    if not file_path.exists():
        return {}
    try:
        with file_path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError("Invalid TOML config file", details={"path": path, "error": e}) from e
    except OSError as e:
        raise ConfigError("Cannot read config file", details={"path": path, "error": e}) from e


def load_config_from_env() -> Dict[str, Dict[str, str]]:
    """Collect SAMPLING_RESET_* variables into a nested dict of raw strings."""
    loaded: Dict[str, Dict[str, str]] = {}
    for env_var, (section, key) in ENV_VAR_MAPPING.items():
        value = os.environ.get(env_var)
        if value is None or value == "":
            continue
        loaded.setdefault(section, {})[key] = value
    return loaded


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ResetConfig:
    """
    Build the effective configuration.

    Priority, highest first: explicit overrides, environment variables,
    config file, built-in defaults. When no file is given the standard
    locations are searched; a file that is named explicitly must exist.
    """
    if config_file:
        if not Path(config_file).is_file():
            raise ConfigError("Config file not found", details={"path": config_file})
        path = config_file
    else:
        path = find_config_file()
    raw: Dict[str, Any] = load_toml_config(path) if path else {}
    raw = _merge(raw, load_config_from_env())
    if overrides:
        raw = _merge(raw, overrides)

    try:
        return ResetConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError("Invalid configuration", details={"errors": e.error_count()}) from e


def validate_config(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Tuple[bool, str, Optional[ResetConfig]]:
    """Return (is_valid, message, config) instead of raising."""
    try:
        config = load_config(config_file=config_file, overrides=overrides)
    except ConfigError as e:
        cause = e.__cause__
        return False, str(cause) if cause is not None else str(e), None
    return True, "Configuration is valid", config
