"""Run configuration and logging setup."""

import os
import sys
from typing import TextIO

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


_handler_id: int | None = None


def configure_logging(level: str = "INFO", sink: TextIO | None = None) -> int:
    """
    Send seqmap's log records to ``sink`` (stderr by default) at ``level``.

    Calling it again replaces the sink added by the previous call. Sinks the
    application registered itself are never removed.

    Returns:
        The loguru handler id of the installed sink.
    """
    global _handler_id
    if _handler_id is not None:
        logger.remove(_handler_id)
    if sink is None:
        sink = sys.stderr
    _handler_id = logger.add(sink, level=level.upper(), filter="seqmap")
    return _handler_id


class RunConfig(BaseModel):
    """
    Configuration for pipeline execution.
    """

    limit: int | None = Field(
        default=None, description="Process only the first N source records"
    )

    stop_after: int | str | None = Field(
        default=None, description="Stop after this step (index or name)"
    )

    # None adds no sink for the run
    log_level: str | None = Field(
        default=None, description="Log seqmap records to stderr at this level during the run"
    )

    @field_validator("limit")
    def validate_limit(cls, v):
        if v is not None and v < 0:
            raise ValueError("limit must be >= 0")
        return v

    @field_validator("stop_after")
    def validate_stop_after(cls, v):
        if isinstance(v, int) and v < 0:
            raise ValueError("stop_after index must be >= 0")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        if v is None:
            return v
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "RunConfig":
        """
        Build a config from SEQMAP_* environment variables.

        A ``.env`` file is loaded first if present; variables already set in
        the environment take precedence.
        """
        load_dotenv(env_file)

        values: dict[str, str | int] = {}
        if limit := os.getenv("SEQMAP_LIMIT"):
            values["limit"] = limit
        if stop_after := os.getenv("SEQMAP_STOP_AFTER"):
            try:
                values["stop_after"] = int(stop_after)
            except ValueError:
                values["stop_after"] = stop_after
        if log_level := os.getenv("SEQMAP_LOG_LEVEL"):
            values["log_level"] = log_level
        return cls(**values)
