"""
Runtime settings for idkit

Controls logging, the metrics endpoint and the default rendering format.
The id bit layout is not configurable; see idkit.kernel.ids.
"""

import os
from typing import Literal

from pydantic import BaseModel, Field

from idkit.codec.formats import IdFormat


class IdKitSettings(BaseModel):
    """Runtime knobs, validated on construction"""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level for the idkit loggers",
    )

    json_logs: bool = Field(
        default=False,
        description="Emit JSON logs instead of console output",
    )

    metrics_port: int = Field(
        default=9090,
        ge=1,
        le=65535,
        description="Port the Prometheus metrics server listens on",
    )

    default_format: IdFormat = Field(
        default=IdFormat.BASE36,
        description="Rendering used when a caller does not ask for one",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> "IdKitSettings":
        """
        Build settings from IDKIT_* environment variables

        ENVIRONMENT=production switches JSON logs on unless IDKIT_JSON_LOGS
        says otherwise.
        """
        values: dict[str, object] = {}
        if level := os.getenv("IDKIT_LOG_LEVEL"):
            values["log_level"] = level.upper()
        json_logs = os.getenv("IDKIT_JSON_LOGS")
        if json_logs is not None:
            values["json_logs"] = json_logs.strip().lower() in ("1", "true", "yes", "on")
        elif is_production():
            values["json_logs"] = True
        if port := os.getenv("IDKIT_METRICS_PORT"):
            values["metrics_port"] = port
        if fmt := os.getenv("IDKIT_DEFAULT_FORMAT"):
            values["default_format"] = fmt.lower()
        return cls.model_validate(values)


def is_production() -> bool:
    """True when ENVIRONMENT is 'production'; defaults to development."""
    return os.getenv("ENVIRONMENT", "development").lower() == "production"
