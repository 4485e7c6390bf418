"""
Configuration management using Pydantic for pixelwrap.
Provides type-safe configuration with validation and environment variable support.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.constants import GradientConstants, SystemConstants

logger = logging.getLogger(__name__)


class PixelConfig(BaseSettings):
    """Pixel access and gradient search configuration."""

    bounds_check: bool = Field(
        default=True, description="Validate coordinates in pixel accessors by default"
    )
    default_radius: int = Field(
        default=GradientConstants.DEFAULT_RADIUS,
        ge=GradientConstants.MIN_RADIUS,
        le=GradientConstants.MAX_RADIUS,
        description="Default ring radius for gradient search",
    )
    default_sample_count: int = Field(
        default=GradientConstants.DEFAULT_SAMPLE_COUNT,
        ge=GradientConstants.MIN_SAMPLE_COUNT,
        le=GradientConstants.MAX_SAMPLE_COUNT,
        description="Default number of ring samples for gradient search",
    )

    model_config = SettingsConfigDict(env_prefix="PX_PIXELS_", extra="ignore")


class SystemConfig(BaseSettings):
    """System configuration."""

    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")
    log_format: str = Field(default=SystemConstants.LOG_FORMAT, description="Logging format")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    model_config = SettingsConfigDict(env_prefix="PX_SYSTEM_", extra="ignore")


class Settings(BaseSettings):
    """Main application settings."""

    # Sub-configurations
    pixels: PixelConfig = Field(default_factory=PixelConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    # Config file support
    config_file: Optional[str] = Field(default=None, description="Path to YAML config file")

    model_config = SettingsConfigDict(
        env_prefix="PX_",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values):
        """Load configuration from YAML file if specified."""
        if not isinstance(values, dict):
            return values

        config_file = values.get("config_file") or os.getenv("PX_CONFIG_FILE")

        if config_file and Path(config_file).exists():
            import yaml

            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")
                return values

            if file_config:
                # Merge file config with values (env vars take precedence)
                for key, value in file_config.items():
                    if key not in values or values[key] is None:
                        values[key] = value

        return values

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(exclude_none=True)

    def save_to_file(self, path: str) -> None:
        """Save current configuration to YAML file."""
        import yaml

        config_dict = self.to_dict()
        with open(path, "w") as f:
            yaml.dump(config_dict, f, default_flow_style=False)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with validated configuration
    """
    return Settings()


# Convenience function to reload settings (clears cache)
def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings object
    """
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from system settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.system.log_level),
        format=settings.system.log_format,
    )
