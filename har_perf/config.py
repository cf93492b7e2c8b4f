"""
Report configuration and defaults.
"""

import os
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError
from .models import GroupBy


class Defaults:
    """Default report settings. Environment variables override some of them."""
    TOP = 10
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

    TOP_ENV = "HAR_PERF_TOP"
    LOG_LEVEL_ENV = "HAR_PERF_LOG_LEVEL"


class ReportConfig(BaseModel):
    """Parsed CLI configuration for one run"""
    path: Path = Field(description="HAR file to analyze")
    top: int = Field(default=Defaults.TOP, ge=0, description="Rows per top-N list")
    json_output: bool = Field(default=False, description="Emit JSON instead of text")
    group_by: Optional[GroupBy] = Field(default=None, description="Group statistics by this key")
    include_headers: bool = Field(default=False, description="Count response header bytes")


def build_config(**values) -> ReportConfig:
    """
    Validate raw option values into a ReportConfig.

    Raises:
        ConfigError: If any value is out of range or unknown
    """
    try:
        return ReportConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e


def default_top() -> int:
    """
    Default top-N, taken from HAR_PERF_TOP when set.

    Raises:
        ConfigError: If the variable is not a non-negative integer
    """
    raw = os.getenv(Defaults.TOP_ENV)
    if raw is None or raw.strip() == "":
        return Defaults.TOP

    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{Defaults.TOP_ENV} must be an integer, got {raw!r}")

    if value < 0:
        raise ConfigError(f"{Defaults.TOP_ENV} must be >= 0, got {value}")

    return value


def default_log_level() -> str:
    """
    Log level name, taken from HAR_PERF_LOG_LEVEL when set.

    Raises:
        ConfigError: If the name is not a known logging level
    """
    level = os.getenv(Defaults.LOG_LEVEL_ENV, Defaults.LOG_LEVEL).strip().upper() or Defaults.LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{Defaults.LOG_LEVEL_ENV} must be a logging level name, got {level!r}")
    return level
