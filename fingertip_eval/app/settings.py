"""Configuration for the fingertip evaluation tool."""
from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EvalSettings(BaseSettings):
    """Settings sourced from ``FINGERTIP_*`` environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="FINGERTIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_format: Literal["text", "json"] = Field(default="text")
    log_level: str = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        return str(value).upper()


def load_settings(**overrides: object) -> EvalSettings:
    """Return settings, applying optional overrides."""

    return EvalSettings(**overrides)
