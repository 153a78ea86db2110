from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_database_url() -> str:
    """Get database URL, using an absolute path for the SQLite file.

    The file lives in the current working directory unless PACER_DATABASE_URL
    points somewhere else.
    """
    abs_path = (Path.cwd() / "pacer.db").resolve()
    return f"sqlite:///{abs_path}"


class Settings(BaseSettings):
    database_url: str = Field(
        default_factory=get_database_url,
        validation_alias="PACER_DATABASE_URL",
    )
    storage_key: str = Field(
        default="@savedPaceSets",
        validation_alias="PACER_STORAGE_KEY",
        description="Key holding the whole pace set collection",
    )
    max_speed_kmh: float = Field(
        default=100.0,
        validation_alias="PACER_MAX_SPEED_KMH",
        description="Bike speed ceiling; higher entries are clamped",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="PACER_LOG_FILE")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("max_speed_kmh")
    @classmethod
    def validate_max_speed(cls, value: float) -> float:
        if value <= 0:
            logger.warning(f"Invalid PACER_MAX_SPEED_KMH '{value}'. Defaulting to 100.")
            return 100.0
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
