"""
Runtime configuration.

Precision controls how many decimals the formatter emits per kind of
component. ServerSettings holds the HTTP server options, read from the
environment.
"""

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class Precision(BaseModel):
    model_config = ConfigDict(frozen=True)

    hue: int = Field(default=1, ge=0, description="Decimals for hue angles in hsl, hwb and ncol")
    polar_hue: int = Field(default=2, ge=0, description="Decimals for the hue of lch and oklch")
    percent: int = Field(default=1, ge=0, description="Decimals for percentage components")
    alpha: int = Field(default=2, ge=0, description="Decimals for the alpha channel")
    lab: int = Field(default=2, ge=0, description="Decimals for CIE L, a, b and C")
    oklab: int = Field(default=4, ge=0, description="Decimals for OKLab l, a, b and C")


DEFAULT_PRECISION = Precision()


class ServerSettings(BaseModel):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8973, ge=1, le=65535)
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(default="INFO")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        """Build settings from COLOR_TOOLS_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        values = {}
        if env.get("COLOR_TOOLS_HOST"):
            values["host"] = env["COLOR_TOOLS_HOST"]
        if env.get("COLOR_TOOLS_PORT"):
            values["port"] = env["COLOR_TOOLS_PORT"]
        if env.get("COLOR_TOOLS_LOG_LEVEL"):
            values["log_level"] = env["COLOR_TOOLS_LOG_LEVEL"].upper()
        return cls(**values)
