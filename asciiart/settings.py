from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore[import-not-found]

from asciiart.models.round_mode import RoundMode


def yaml_config_settings_source(_: type[BaseSettings]):
    def _source() -> dict:
        path = Path(os.getenv("ASCIIART_CONFIG_FILE", "asciiart.yaml"))
        if not path.exists():
            return {}
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return data
    return _source


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ASCIIART_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Matching
    default_charset: str = Field(default="0123456789", min_length=1)
    default_resolution: int = Field(default=2, ge=1)
    default_round: RoundMode = RoundMode.ABS

    # Glyph rendering
    font_family: str = "Courier New"
    font_path: str | None = None
    glyph_size: int = Field(default=16, ge=1)

    # Output
    output: Literal["console", "html"] = "console"
    html_file: str = "out.html"
    html_font: str = "Courier New"

    # Shell
    prompt: str = ">>> "
    log_level: str = "WARNING"

    @classmethod
    def settings_customise_sources(cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings):
        # Order = highest priority first. Env should override YAML.
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            yaml_config_settings_source(cls),
        )


settings = AppSettings()
