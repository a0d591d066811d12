from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_CONCURRENCY = 10
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseModel):
    request_timeout_seconds: float = Field(default=DEFAULT_REQUEST_TIMEOUT_SECONDS, gt=0.0)
    max_concurrency: int = Field(default=DEFAULT_MAX_CONCURRENCY, ge=1)
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"YTRSS_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level


def _env_value(environ: Mapping[str, str], key: str) -> str:
    return environ.get(key, "").strip()


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    source = os.environ if environ is None else environ
    payload = {
        "request_timeout_seconds": _env_value(source, "YTRSS_REQUEST_TIMEOUT_SECONDS")
        or DEFAULT_REQUEST_TIMEOUT_SECONDS,
        "max_concurrency": _env_value(source, "YTRSS_MAX_CONCURRENCY") or DEFAULT_MAX_CONCURRENCY,
        "log_level": _env_value(source, "YTRSS_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
    }
    try:
        return Settings(**payload)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc
