from datetime import tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_data_dir() -> Path:
    """Directory holding workouts.json and habits.json when FITTRACK_DATA_DIR is unset."""
    return Path.home() / ".fittrack"


class Settings(BaseSettings):
    data_dir: Path = Field(default_factory=default_data_dir, validation_alias="FITTRACK_DATA_DIR")
    workouts_file: str = Field(default="workouts.json", validation_alias="FITTRACK_WORKOUTS_FILE")
    habits_file: str = Field(default="habits.json", validation_alias="FITTRACK_HABITS_FILE")
    timezone: str = Field(
        default="",  # Empty means the system local zone
        validation_alias="FITTRACK_TIMEZONE",
        description="IANA zone used to compute day keys",
    )
    weekly_goal: int = Field(default=4, ge=1, validation_alias="FITTRACK_WEEKLY_GOAL")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="FITTRACK_LOG_FILE")
    log_rotation: str = Field(default="10 MB", validation_alias="FITTRACK_LOG_ROTATION")
    log_retention: str = Field(default="7 days", validation_alias="FITTRACK_LOG_RETENTION")
    log_compression: str | None = Field(
        default="zip",  # Empty disables compression of rotated files
        validation_alias="FITTRACK_LOG_COMPRESSION",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("log_compression")
    @classmethod
    def empty_compression_is_none(cls, value: str | None) -> str | None:
        return value or None

    @field_validator("data_dir")
    @classmethod
    def expand_data_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def log_path(self) -> Path | None:
        return Path(self.log_file).expanduser() if self.log_file else None

    @property
    def workouts_path(self) -> Path:
        return self.data_dir / self.workouts_file

    @property
    def habits_path(self) -> Path:
        return self.data_dir / self.habits_file

    def local_tz(self) -> tzinfo | None:
        """Resolve the configured zone.

        Returns:
            ZoneInfo for FITTRACK_TIMEZONE, or None to use the system local zone
            (also returned when the configured name is unknown)
        """
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown FITTRACK_TIMEZONE '{self.timezone}', using system local time")
            return None
