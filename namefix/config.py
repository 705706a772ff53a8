"""Central configuration for the misspelled-name matcher.

This module uses Pydantic Settings for validation and env management.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatcherSettings(BaseSettings):
    """Acceptance gate configuration."""
    model_config = SettingsConfigDict(env_prefix="MATCHER_", extra="ignore")

    phonetic_threshold: int = Field(
        default=2,
        ge=0,
        le=4,
        description="Soundex positions that must agree, exclusive",
    )
    similarity_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Jaro-Winkler similarity to exceed",
    )


class InputSettings(BaseSettings):
    """Input source configuration."""
    model_config = SettingsConfigDict(env_prefix="NAMEFIX_", extra="ignore")

    names_path: str = Field(default="names.txt", description="One reference name per line")
    phrases_path: str = Field(default="phrases.txt", description="One phrase per line")


class LoggingSettings(BaseSettings):
    """Logging configuration."""
    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    level: str = Field(default="INFO")
    format: Literal["text", "json"] = Field(default="text")
    file: str | None = Field(default=None)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        return v.upper()


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="namefix")
    version: str = Field(default="0.1.0")

    # Sub-configs
    matcher: MatcherSettings = Field(default_factory=MatcherSettings)
    inputs: InputSettings = Field(default_factory=InputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()
