"""
Server settings read from the environment.
"""

import os
from typing import Literal

from pydantic import BaseModel, Field

ENV_PREFIX = "COLOR_TOOLS_"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(8973, ge=1, le=65535)
    log_level: LogLevel = "INFO"
    mount_mcp: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from COLOR_TOOLS_* variables; unset ones keep their defaults."""
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip().upper() if name == "log_level" else raw.strip()
        return cls(**values)
