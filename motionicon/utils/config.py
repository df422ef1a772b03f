"""Library configuration.

Defaults every icon falls back to when no provider scope overrides them.
"""
from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library-wide defaults loaded from .env and MOTIONICON_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="MOTIONICON_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    default_animated: Optional[bool] = None  # None follows the system reduced-motion preference
    default_size: float = Field(default=24, gt=0)
    default_stroke_width: float = Field(default=2, ge=0)
    prefer_reduced_motion: bool = False  # Used when the host exposes no reduced-motion signal
    log_level: str = "WARNING"


settings = Settings()
