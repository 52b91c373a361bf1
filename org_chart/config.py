"""
Org Chart — Settings

Environment-driven settings. A ``.env`` file is loaded first when one
exists; real environment variables always win over it.

  ORG_CHART_REJECT_CYCLES   refuse moves that would create a cycle (default false)
  ORG_CHART_LOG_LEVEL       standard logging level name (default WARNING)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

ENV_PREFIX = "ORG_CHART_"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ChartSettings(BaseModel):
    reject_cycles: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level {value!r}: expected one of {', '.join(_LEVELS)}")
        return level


def load_settings(env_file: Optional[str] = None) -> ChartSettings:
    """
    Build settings from the environment.

    *env_file* defaults to ``.env`` in the current directory; a missing
    file is not an error. Invalid values raise pydantic's ValidationError.
    """
    env_path = env_file or os.path.join(os.getcwd(), ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path)
        logging.getLogger(__name__).debug("Loaded settings file %s", env_path)

    values = {}
    for field_name in ChartSettings.model_fields:
        raw = os.environ.get(ENV_PREFIX + field_name.upper())
        if raw is not None:
            values[field_name] = raw
    return ChartSettings(**values)
