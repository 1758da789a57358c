"""Configuration settings for millisecond.

This module provides configuration management with Pydantic validation,
environment variable support, and file-based configuration loading.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import MillisecondError
from ..utils.logging import setup_logging

VALID_STYLES = ("short", "long")
VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")


class ConfigurationError(MillisecondError):
    """Exception raised for configuration validation errors."""

    pass


class Settings(BaseSettings):
    """Rendering and logging settings with validation."""

    # Rendering settings
    default_style: str = Field(default="short")
    ascii_only: bool = Field(default=False)

    # Logging settings
    log_level: str = Field(default="INFO")
    log_dir: Optional[Path] = Field(default=None)
    json_logs: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="MILLISECOND_",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    @field_validator("default_style")
    @classmethod
    def validate_default_style(cls, v: str) -> str:
        """Validate the rendering style is supported."""
        if v.lower() not in VALID_STYLES:
            raise ValueError(f"Style must be one of: {', '.join(VALID_STYLES)}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is supported."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        return v.upper()

    @field_validator("log_dir")
    @classmethod
    def validate_log_dir(cls, v: Optional[Union[str, Path]]) -> Optional[Path]:
        """Convert string paths to absolute Path objects."""
        if v is None:
            return None
        if isinstance(v, str):
            v = Path(v)

        v = v.expanduser()
        if not v.is_absolute():
            v = Path.cwd() / v
        return v

    @model_validator(mode="after")
    def validate_cross_field_constraints(self) -> "Settings":
        """Reject contradictory logging configuration."""
        if self.json_logs and self.log_dir is None:
            raise ConfigurationError(
                "json_logs requires log_dir to be set",
                {"json_logs": self.json_logs, "log_dir": self.log_dir},
            )
        return self

    def configure_logging(self, console_output: bool = True) -> None:
        """Apply the logging settings to the root logger."""
        setup_logging(
            log_level=self.log_level,
            log_dir=self.log_dir,
            console_output=console_output,
            json_format=self.json_logs,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for serialization."""
        return {
            key: str(value) if isinstance(value, Path) else value
            for key, value in self.model_dump().items()
        }

    def save_to_file(self, config_file: Path) -> None:
        """Save configuration to JSON file."""
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_config(cls, config_file: Optional[Path] = None) -> "Settings":
        """Load configuration from file and environment variables.

        Priority order:
        1. Config file (passed as init arguments)
        2. Environment variables (handled automatically by BaseSettings)
        3. Default values

        A file that is not valid JSON or does not hold a JSON object is logged
        and ignored. Unknown keys in the file are logged and skipped.
        """
        init_kwargs = {}

        if config_file and config_file.exists():
            try:
                with open(config_file, "r") as f:
                    file_config = json.load(f)
                if not isinstance(file_config, dict):
                    raise TypeError(
                        f"expected a JSON object, got {type(file_config).__name__}"
                    )

                for key in sorted(set(file_config) - set(cls.model_fields)):
                    logging.warning(
                        f"Ignoring unknown config key in {config_file}: {key}"
                    )
                    del file_config[key]
                init_kwargs.update(file_config)
            except (json.JSONDecodeError, TypeError, ValueError) as e:
                logging.warning(f"Failed to load config from {config_file}: {e}")

        return cls(**init_kwargs)


def get_default_config_file() -> Path:
    """Get the default configuration file path."""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home) / "millisecond" / "config.json"

    return Path.home() / ".config" / "millisecond" / "config.json"


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Load settings from a configuration file and the environment.

    Args:
        config_file: Optional path to configuration file.
                    If None, uses default location.

    Returns:
        Settings instance with loaded configuration.

    Raises:
        ConfigurationError: If the settings contradict each other.
    """
    if config_file is None:
        config_file = get_default_config_file()

    return Settings.load_config(config_file)
