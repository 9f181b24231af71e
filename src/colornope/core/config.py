"""colornope configuration loaded from COLORNOPE_-prefixed env vars.

TERM and NO_COLOR are deliberately not fields here: they are read raw by
ColorDecision.from_env so that an empty NO_COLOR stays present.
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class ColornopeSettings(BaseSettings):
    """Settings for the color decision and the host CLI."""

    model_config = SettingsConfigDict(
        env_prefix="COLORNOPE_",
        case_sensitive=False,
    )

    # Exact argv token that forces color off
    disable_flag: str = "--no-color"
    log_level: LogLevel = "warning"

    @field_validator("disable_flag")
    @classmethod
    def disable_flag_must_not_be_empty(cls, v: str) -> str:
        """Strip whitespace and reject an empty flag."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("disable_flag must not be empty")
        return stripped

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept DEBUG, Info, etc."""
        if isinstance(v, str):
            return v.strip().lower()
        return v
