"""Settings model for the news dashboard runner."""
from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, PrivateAttr, field_validator

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
ENVIRONMENTS = ("development", "staging", "production", "test")


class StrictModel(BaseModel):
    """Unknown keys are errors so typos in config.toml or the environment surface."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
    )


class AppSettings(StrictModel):
    environment: str = "development"
    debug: bool = Field(default=False, description="Verbose, colorized console logging.")
    timezone: str = Field(
        default="UTC",
        description="IANA zone whose midnight starts the 'today' date range.",
    )

    @field_validator("environment")
    @classmethod
    def _known_environment(cls, value: str) -> str:
        normalized = value.lower()
        if normalized not in ENVIRONMENTS:
            raise ValueError(f"environment must be one of: {', '.join(ENVIRONMENTS)}")
        return normalized

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone '{value}'") from exc
        return value


class DashboardConfig(StrictModel):
    """Fallbacks for criteria the caller leaves out."""

    default_sort_by: Literal["date", "source", "relevance"] = "date"
    default_sort_order: Literal["asc", "desc"] = "desc"
    default_date_range: Literal["all", "today", "week", "month"] = "all"
    max_articles: PositiveInt = Field(
        default=50,
        description="Articles kept from an upstream response before filtering.",
    )


class LoggingConfig(StrictModel):
    level: str = "INFO"
    file_path: Optional[Path] = Field(
        default=None,
        description="Rotating log file; console only when unset.",
    )
    max_file_size_mb: PositiveInt = 10
    retention_days: PositiveInt = 30
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {name}:{line} | {message}"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level

    @field_validator("file_path", mode="before")
    @classmethod
    def _blank_path_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("file_path")
    @classmethod
    def _absolute_path(cls, value: Optional[Path]) -> Optional[Path]:
        return value.resolve() if value is not None else None

    def sink_options(self) -> dict[str, object]:
        """Mapping understood by ``src.utils.logger.setup_logging``."""

        return {
            "level": self.level,
            "file_path": str(self.file_path) if self.file_path else None,
            "max_file_size": f"{self.max_file_size_mb} MB",
            "retention": f"{self.retention_days} days",
            "format": self.format,
        }


class Config(StrictModel):
    app: AppSettings = Field(default_factory=AppSettings)
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    _metadata: object = PrivateAttr(default=None)


DEFAULT_CONFIG = Config()


__all__ = [
    "AppSettings",
    "Config",
    "DEFAULT_CONFIG",
    "DashboardConfig",
    "LoggingConfig",
    "StrictModel",
]
