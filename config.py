"""
Application configuration.

Settings are read from environment variables prefixed with ``IMAGE_BRIDGE_``;
nested sections use ``__`` as delimiter, e.g.
``IMAGE_BRIDGE_DRAWING__RANDOM_SEED=7``.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import ContourConstants, DrawingConstants, SystemConstants


class SystemSettings(BaseModel):
    """System-wide settings."""

    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")


class DrawingSettings(BaseModel):
    """Annotation drawing settings."""

    box_thickness: int = Field(default=DrawingConstants.BOX_THICKNESS, ge=1)
    color_component_max: int = Field(
        default=DrawingConstants.COLOR_COMPONENT_MAX,
        ge=1,
        le=256,
        description="Exclusive upper bound of random box color components",
    )
    label_font_scale: float = Field(default=DrawingConstants.LABEL_FONT_SCALE, gt=0)
    label_thickness: int = Field(default=DrawingConstants.LABEL_THICKNESS, ge=1)
    label_padding: int = Field(default=DrawingConstants.LABEL_PADDING, ge=0)
    mask_attenuation: float = Field(default=DrawingConstants.MASK_ATTENUATION, ge=0.0, le=1.0)
    landmark_half_size: int = Field(default=DrawingConstants.LANDMARK_HALF_SIZE, ge=0)
    joint_radius: int = Field(default=DrawingConstants.JOINT_RADIUS, ge=1)
    random_seed: Optional[int] = Field(
        default=None, description="Seed for annotation colors (None = OS entropy)"
    )


class ContourSettings(BaseModel):
    """Contour extraction settings."""

    max_workers: int = Field(default=ContourConstants.DEFAULT_MAX_WORKERS, ge=1)


class Settings(BaseSettings):
    """Root settings object."""

    model_config = SettingsConfigDict(
        env_prefix=SystemConstants.ENV_PREFIX,
        env_nested_delimiter=SystemConstants.ENV_NESTED_DELIMITER,
    )

    system: SystemSettings = Field(default_factory=SystemSettings)
    drawing: DrawingSettings = Field(default_factory=DrawingSettings)
    contours: ContourSettings = Field(default_factory=ContourSettings)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.system.log_level.upper(), logging.INFO),
        format=SystemConstants.LOG_FORMAT,
    )
