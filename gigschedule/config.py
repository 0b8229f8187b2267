"""
Configuration management using Pydantic.
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.availability import DEFAULT_AVAILABILITY, Availability
from .domain.day_assignment import WEEK_DAYS

CONFIG_FILE_NAME = "gigschedule.yaml"


class AppConfig(BaseModel):
    """Application configuration."""
    working_days: List[str] = Field(default_factory=lambda: list(WEEK_DAYS))
    repair_missing_days: bool = False
    use_default_when_empty: bool = False
    default_availability: Availability = Field(
        default_factory=lambda: DEFAULT_AVAILABILITY.model_copy(deep=True)
    )

    @field_validator("working_days")
    @classmethod
    def validate_working_days(cls, value: List[str]) -> List[str]:
        """Ensure there is at least one day, deduplicated in order."""
        if not value:
            raise ValueError("working_days must not be empty")
        # Preserve order while removing duplicates
        seen: set[str] = set()
        deduped: List[str] = []
        for day in value:
            if not day.strip():
                raise ValueError("working_days must not contain blank names")
            if day not in seen:
                deduped.append(day)
                seen.add(day)
        return deduped

    def fallback_availability(self) -> Optional[Availability]:
        """The availability used for empty schedules, if enabled."""
        if self.use_default_when_empty:
            return self.default_availability
        return None

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
                f"Please create a {CONFIG_FILE_NAME} file. See {CONFIG_FILE_NAME}.example for reference."
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
    # Look for the config in the current directory
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if not config_path.exists():
        # Try in the project root (parent of gigschedule/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / CONFIG_FILE_NAME

    return config_path


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load the configuration, falling back to built-in defaults.

    An explicitly given path must exist; the default location is optional.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)

    return AppConfig()
