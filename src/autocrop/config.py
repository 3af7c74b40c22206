"""
Configuration management using Pydantic for Autocrop.
Provides type-safe configuration with validation and environment variable support.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from autocrop.common.constants import (
    APIConstants,
    CropConstants,
    OutputConstants,
    SystemConstants,
)
from autocrop.common.enums import CropMode
from autocrop.schemas.crop import CropConfig, FileName

logger = logging.getLogger(__name__)


class CropSettings(BaseSettings):
    """Default crop configuration."""

    leniency: float = Field(
        default=CropConstants.DEFAULT_LENIENCY,
        ge=CropConstants.MIN_LENIENCY,
        lt=CropConstants.MAX_LENIENCY,
        description="Default leniency percentage",
    )
    crop_mode: CropMode = Field(default=CropMode.EXACT, description="Default crop strategy")
    resize_output: bool = Field(
        default=False, description="Crop comparison images down to the bounding box"
    )
    output_path: str = Field(
        default=OutputConstants.DEFAULT_OUTPUT_PATH, description="Default output directory"
    )
    bg_name: FileName = Field(default_factory=FileName, description="Background naming")
    file_name: FileName = Field(default_factory=FileName, description="Comparison naming")

    model_config = SettingsConfigDict(env_prefix="AUTOCROP_CROP_", extra="ignore")

    def to_crop_config(self, **overrides: Any) -> CropConfig:
        """
        Build a per-call crop configuration.

        Args:
            **overrides: Fields to replace; None values are ignored

        Returns:
            CropConfig
        """
        values = {
            "leniency": self.leniency,
            "crop_mode": self.crop_mode,
            "resize_output": self.resize_output,
            "output_path": self.output_path,
            "bg_name": self.bg_name,
            "file_name": self.file_name,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return CropConfig(**values)


class APISettings(BaseSettings):
    """API configuration."""

    host: str = Field(default=APIConstants.DEFAULT_HOST, description="API host address")
    port: int = Field(default=APIConstants.DEFAULT_PORT, ge=1, le=65535, description="API port")
    cors_enabled: bool = Field(default=True, description="Enable CORS")
    cors_origins: List[str] = Field(default=["*"], description="CORS allowed origins")

    model_config = SettingsConfigDict(env_prefix="AUTOCROP_API_", extra="ignore")


class SystemSettings(BaseSettings):
    """System configuration."""

    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")
    max_images: int = Field(
        default=CropConstants.MAX_IMAGES,
        ge=CropConstants.MIN_IMAGES,
        le=CropConstants.MAX_IMAGES,
        description="Largest accepted image batch",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    model_config = SettingsConfigDict(env_prefix="AUTOCROP_SYSTEM_", extra="ignore")


class Settings(BaseSettings):
    """Main application settings."""

    # Sub-configurations
    crop: CropSettings = Field(default_factory=CropSettings)
    api: APISettings = Field(default_factory=APISettings)
    system: SystemSettings = Field(default_factory=SystemSettings)

    # Config file support
    config_file: Optional[str] = Field(default=None, description="Path to YAML config file")

    model_config = SettingsConfigDict(
        env_prefix="AUTOCROP_",
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

        config_file = values.get("config_file") or os.getenv(SystemConstants.CONFIG_FILE_ENV)

        if config_file and Path(config_file).exists():
            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f)
                if file_config:
                    # Env vars and explicit values take precedence
                    for key, value in file_config.items():
                        if key not in values or values[key] is None:
                            values[key] = value
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")

        return values

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(mode="json", exclude_none=True)

    def save_to_file(self, path: str) -> None:
        """Save current configuration to YAML file."""
        config_dict = self.to_dict()
        config_dict.pop("config_file", None)
        with open(path, "w") as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False)


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
