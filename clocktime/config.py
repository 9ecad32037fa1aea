"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.models import ClockTime, DailyWindow
from .domain.zones import ZoneResolver


class BusinessHoursConfig(BaseModel):
    """Daily window used by the ``open`` command."""
    name: str = "business hours"
    start: ClockTime = ClockTime(9, 0, 0)
    end: ClockTime = ClockTime(17, 0, 0)

    def to_window(self) -> DailyWindow:
        """Get the configured window as a DailyWindow."""
        return DailyWindow(start=self.start, end=self.end, name=self.name)


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = "UTC"
    fallback_timezone: str = "UTC"
    business_hours: BusinessHoursConfig = Field(default_factory=BusinessHoursConfig)
    log_level: str = "WARNING"

    @field_validator("fallback_timezone")
    @classmethod
    def validate_fallback_timezone(cls, value: str) -> str:
        """The fallback zone must itself resolve."""
        try:
            pendulum.timezone(value)
        except (ValueError, KeyError, OSError) as exc:
            raise ValueError(f"fallback_timezone must be a known timezone, got {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate and normalise the log level name."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def build_resolver(self) -> ZoneResolver:
        """Get a resolver that falls back to the configured zone."""
        return ZoneResolver(fallback=self.fallback_timezone)

    def business_window(self) -> DailyWindow:
        return self.business_hours.to_window()

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a clocktime.yaml file or pass --config."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for clocktime.yaml in current directory
    config_path = Path.cwd() / "clocktime.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "clocktime.yaml"

    return config_path


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load an explicit config file, or the default one if it exists.

    An explicitly given path must exist; a missing default file yields the
    built-in defaults.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)
    return AppConfig()
