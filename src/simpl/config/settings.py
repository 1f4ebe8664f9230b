"""Interpreter settings."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Strategy = Literal["small", "big"]


class Settings(BaseSettings):
    """Interpreter defaults, overridable with ``SIMPL_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SIMPL_",
        case_sensitive=False,
        extra="ignore",
    )

    strategy: Strategy = Field(default="small")
    typecheck: bool = Field(default=False)
    trace_width: int = Field(default=0, ge=0)
    log_filter: str = Field(default="warning")


def load_settings(**overrides: Any) -> Settings:
    """Load settings, dropping overrides that were not given (``None``)."""
    return Settings(**{key: value for key, value in overrides.items() if value is not None})
