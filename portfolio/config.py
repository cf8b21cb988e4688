# portfolio/config.py
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field
from typing_extensions import Literal


def _default_data_dir() -> str:
    env = os.getenv("PORTFOLIO_DATA_DIR")
    if env:
        return env
    return str(Path(__file__).resolve().parents[1] / "data")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


class Settings(BaseModel):
    DATA_DIR: str = Field(default_factory=_default_data_dir)
    STORAGE: Literal["file", "memory"] = Field(
        default_factory=lambda: os.getenv("PORTFOLIO_STORAGE", "file")
    )
    # Malformed persisted data raises at start-up unless this is off,
    # in which case the collection is loaded empty.
    STRICT_LOAD: bool = Field(default_factory=lambda: _env_flag("PORTFOLIO_STRICT_LOAD", True))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("PORTFOLIO_LOG_LEVEL", "INFO"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
