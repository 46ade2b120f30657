"""
Runtime configuration for the Lox host.

Settings are read from LOX_* environment variables and may be overridden
from the command line.
"""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "LOX_"


class LoxConfig(BaseModel):
    """Host settings."""

    number_precision: int = Field(default=6, ge=0, le=17)
    prompt: str = "> "
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LoxConfig":
        """
        Load configuration from environment variables.

        Recognised: LOX_NUMBER_PRECISION, LOX_PROMPT, LOX_LOG_LEVEL.
        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in env:
                values[name] = env[key]
        return cls(**values)
