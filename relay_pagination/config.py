from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from relay_pagination.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "RELAY_PAGINATION_CONFIG"


def load_config_from_yaml(config_path: str | Path) -> dict:
    """
    Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML config file

    Returns:
        Dictionary containing the parsed configuration

    Raises:
        ConfigurationError: If the file is missing or the YAML is invalid
    """
    config_file = Path(config_path)
    if not config_file.exists():
        msg = f"Configuration file not found at {config_path}"
        raise ConfigurationError(msg, context={"config_file": str(config_path)})

    try:
        config_dict = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in config file: {e}"
        raise ConfigurationError(msg, context={"config_file": str(config_path)}) from None

    # An empty file is an empty configuration
    if config_dict is None:
        return {}

    if not isinstance(config_dict, dict):
        msg = "Config file must contain a YAML mapping/dictionary at root level"
        raise ConfigurationError(msg, context={"config_file": str(config_path)})

    return config_dict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RELAY_PAGINATION_",
        env_file=None,
        case_sensitive=False,
    )

    # Pagination
    default_page_size: int | None = Field(
        default=None,
        ge=0,
        description="Page size used when a request supplies neither first nor last",
    )

    # Observability
    log_level: str = "INFO"
    log_json: bool = True


def _flatten_config(config_dict: dict) -> dict:
    """Flatten the nested YAML layout into Settings field names."""
    flat_config: dict = {}

    pagination = config_dict.get("pagination")
    if isinstance(pagination, dict) and "default_page_size" in pagination:
        flat_config["default_page_size"] = pagination["default_page_size"]

    logging_section = config_dict.get("logging")
    if isinstance(logging_section, dict):
        if "level" in logging_section:
            flat_config["log_level"] = logging_section["level"]
        if "json" in logging_section:
            flat_config["log_json"] = logging_section["json"]

    return flat_config


def build_settings(config_path: str | Path | None = None) -> Settings:
    """
    Build settings from an optional YAML file plus environment variables.

    Values from the file take precedence over environment variables and
    defaults. Without a path, the RELAY_PAGINATION_CONFIG environment
    variable is consulted; if that is unset too, only the environment and
    defaults are used.

    Raises:
        ConfigurationError: If the file cannot be loaded or validation fails
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_PATH_ENV)

    flat_config: dict = {}
    if config_path:
        flat_config = _flatten_config(load_config_from_yaml(config_path))

    try:
        return Settings(**flat_config)
    except ValidationError as e:
        msg = f"Configuration validation error: {e}"
        raise ConfigurationError(
            msg,
            context={"config_file": str(config_path) if config_path else None},
        ) from e


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the process-wide settings, loading them on first access."""
    global _settings

    if _settings is None:
        _settings = build_settings()
        logger.debug(
            "Settings loaded",
            extra={"default_page_size": _settings.default_page_size},
        )
    return _settings


def reload_settings(config_path: str | Path | None = None) -> Settings:
    """Rebuild the process-wide settings from disk and environment."""
    global _settings

    _settings = build_settings(config_path)
    logger.info("Settings reloaded", extra={"default_page_size": _settings.default_page_size})
    return _settings


def reset_settings_for_testing() -> None:
    """Drop cached settings so the next access reloads them."""
    global _settings
    _settings = None
