"""Settings management using Pydantic for type validation and configuration."""

import logging
import os
from pathlib import Path
from typing import Any, Optional, cast

import yaml
from pydantic import BaseModel, Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json", "xml")


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_directory: Optional[str] = Field(default=None, description="Directory for log files")
    file_prefix: str = Field(default="icsrecur", description="Log file prefix")

    @property
    def file_name(self) -> str:
        """Name of the log file inside file_directory."""
        return f"{self.file_prefix}.log"


class IcsRecurSettings(BaseSettings):
    """Application settings with environment variable support."""

    _explicit_args: set = PrivateAttr(default_factory=set)

    property_name: str = Field(
        default="RRULE", description="Property name used in validation messages"
    )
    default_repair: bool = Field(
        default=False, description="Repair rules during validation unless told otherwise"
    )
    output_format: str = Field(default="text", description="Output format: text, json, xml")

    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "icsrecur")

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    model_config = SettingsConfigDict(
        env_prefix="ICSRECUR_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        validate_assignment=True,
    )

    def __init__(self, **kwargs: Any) -> None:
        env_vars_set = {
            key[len("ICSRECUR_") :].split("__")[0].lower()
            for key in os.environ
            if key.upper().startswith("ICSRECUR_")
        }

        super().__init__(**kwargs)

        # Explicit arguments and environment variables win over YAML
        self._explicit_args = set(kwargs.keys()) | env_vars_set
        self._load_yaml_config()

    @field_validator("output_format")
    @classmethod
    def _check_output_format(cls, value: str) -> str:
        value = value.lower()
        if value not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}")
        return value

    @field_validator("property_name")
    @classmethod
    def _upper_property_name(cls, value: str) -> str:
        return value.upper()

    def _find_config_file(self) -> Optional[Path]:
        """Find configuration file in the project directory or the user config dir."""
        project_config = Path.cwd() / "config" / "config.yaml"
        if project_config.exists():
            return project_config

        user_config = self.config_dir / "config.yaml"
        if user_config.exists():
            return user_config

        return None

    def _load_basic_settings(self, config_data: dict) -> None:
        for setting in ("property_name", "default_repair", "output_format"):
            if setting in config_data and setting not in self._explicit_args:
                setattr(self, setting, config_data[setting])

    def _load_logging_config(self, config_data: dict) -> None:
        logging_data = config_data.get("logging")
        if not isinstance(logging_data, dict) or "logging" in self._explicit_args:
            return
        self.logging = LoggingSettings(**{**self.logging.model_dump(), **logging_data})

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists."""
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open() as f:
                config_data = yaml.safe_load(f)

            if not isinstance(config_data, dict):
                return

            self._load_basic_settings(config_data)
            self._load_logging_config(config_data)

        except (OSError, yaml.YAMLError, ValueError) as e:
            # Don't fail if YAML loading fails, just continue with defaults/env vars
            logger.warning(f"Could not load YAML config from {config_file}: {e}")

    @property
    def config_file(self) -> Path:
        """Path to the user YAML configuration file."""
        return self.config_dir / "config.yaml"


_settings_instance: Optional[IcsRecurSettings] = None


def get_settings() -> IcsRecurSettings:
    """Get the global settings instance, creating it lazily if needed."""
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = IcsRecurSettings()
    return cast(IcsRecurSettings, globals()["_settings_instance"])


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
