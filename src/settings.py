from __future__ import annotations

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from src.models.section import SortOrder

load_dotenv(override=False)


class IndexSettings(BaseModel):
    """Runtime defaults for building section indexes from the command line."""

    sort_order: SortOrder = Field(default_factory=lambda: os.getenv("SECTION_INDEX_SORT_ORDER", "ascending"))
    log_level: str = Field(default_factory=lambda: os.getenv("SECTION_INDEX_LOG_LEVEL", "WARNING"))

    model_config = {
        "frozen": True,
        "validate_default": True,
    }

    @field_validator("sort_order", mode="before")
    @classmethod
    def _normalize_sort_order(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


@lru_cache(maxsize=1)
def get_settings() -> IndexSettings:
    return IndexSettings()


__all__ = ["IndexSettings", "get_settings"]
