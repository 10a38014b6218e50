"""Runtime settings, read from the environment (CLI flags can override them)."""

import logging
import os
from typing import Mapping

from pydantic import BaseModel, field_validator

ENV_PREFIX = "REVERSI_"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT
    pretty_board: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Collect every REVERSI_* variable that matches a field of Settings"""
    environ = os.environ if environ is None else environ
    values = {
        field: environ[f"{ENV_PREFIX}{field.upper()}"]
        for field in Settings.model_fields
        if f"{ENV_PREFIX}{field.upper()}" in environ
    }
    return Settings.model_validate(values)
