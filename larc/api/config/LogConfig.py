"""Diagnostic log configuration."""

from datetime import timedelta
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARN", "ERROR"]

DEFAULT_RETENTION_DAYS: dict[str, float] = {"DEBUG": 0.5, "INFO": 1.0, "WARN": 2.0, "ERROR": 7.0}


class LogConfig(BaseModel):
    """Lowest level written to the logfile, and how long entries of each level are kept."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field("INFO", description="Lowest level written to the logfile")
    retention_days: dict[LogLevel, float] = Field(
        default_factory=lambda: dict(DEFAULT_RETENTION_DAYS), description="Days an entry of each level is kept"
    )

    @field_validator("retention_days")
    @classmethod
    def _fill_retention(cls, value: dict[str, float]) -> dict[str, float]:
        for level, days in value.items():
            if days <= 0:
                raise ValueError(f"retention of {level} entries must be positive, got {days}")
        return {**DEFAULT_RETENTION_DAYS, **value}

    def retention(self, level: str) -> timedelta:
        return timedelta(days=self.retention_days[level])
