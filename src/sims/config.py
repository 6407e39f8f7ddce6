"""Runtime settings for the content package."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from sims.core.exceptions import ConfigurationError

CONTENT_PATH_ENV = "SIMS_CONTENT_PATH"
LOG_LEVEL_ENV = "SIMS_LOG_LEVEL"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ContentSettings(BaseModel):
    """Where the bundle comes from and how loudly we log about it.

    ``content_path`` unset means the embedded content in ``sims.content.data``.
    """

    model_config = ConfigDict(frozen=True)

    content_path: Optional[Path] = None
    log_level: LogLevel = "INFO"

    @field_validator("content_path", mode="before")
    @classmethod
    def _blank_path_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("content_path")
    @classmethod
    def _expand_user(cls, v: Optional[Path]) -> Optional[Path]:
        return v.expanduser() if v is not None else None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ContentSettings":
        """Create settings from environment variables (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        data = {}
        if CONTENT_PATH_ENV in env:
            data["content_path"] = env[CONTENT_PATH_ENV]
        if LOG_LEVEL_ENV in env:
            data["log_level"] = env[LOG_LEVEL_ENV]
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid content settings from environment: {e}") from e
