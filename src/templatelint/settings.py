"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the templatelint command-line tool.

    Values are read from ``TEMPLATELINT_``-prefixed environment variables
    and from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATELINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    output_format: Literal["text", "json"] = "text"

    # Looked up next to each template when --controller is not given
    controller_suffix: str = ".controller.js"
