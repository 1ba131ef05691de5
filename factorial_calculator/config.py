"""
Configuration for the factorial calculator service.

Settings are read from environment variables, the same way the servers in
this repository pick up their host, port, and keys.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator


DEFAULT_MAX_N = 1000


class CalculatorSettings(BaseModel):
    """Runtime settings for the calculator, HTTP API, and CLI.

    Attributes:
        max_n: Largest accepted input, or None for no limit.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        log_dir: Directory for log files, or None to log to the console only.
        log_level: Name of the logging level.
    """

    max_n: Optional[int] = Field(default=DEFAULT_MAX_N, ge=0)
    host: str = Field(default="127.0.0.1", min_length=1)
    port: int = Field(default=8000, ge=1, le=65535)
    log_dir: Optional[str] = "logs"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalculatorSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            CalculatorSettings: Settings with defaults for unset variables.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        if environ is None:
            environ = os.environ

        values = {}
        if "FACTORIAL_MAX_N" in environ:
            raw = environ["FACTORIAL_MAX_N"].strip()
            values["max_n"] = None if raw.lower() in ("", "none") else raw
        if "SERVER_HOST" in environ:
            values["host"] = environ["SERVER_HOST"]
        if "SERVER_PORT" in environ:
            values["port"] = environ["SERVER_PORT"]
        if "FACTORIAL_LOG_DIR" in environ:
            values["log_dir"] = environ["FACTORIAL_LOG_DIR"] or None
        if "FACTORIAL_LOG_LEVEL" in environ:
            values["log_level"] = environ["FACTORIAL_LOG_LEVEL"]
        return cls(**values)
