from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hypertrophy_hub.catalog.enums import VolumeLevel

DEFAULT_PLAN_IMAGE_URL = (
    "https://images.pexels.com/photos/1552242/pexels-photo-1552242.jpeg"
    "?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=2"
)


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE", description="Optional log file path")
    log_json: bool = Field(default=False, validation_alias="LOG_JSON", description="Write the log file as JSON lines")
    random_seed: int | None = Field(
        default=None,
        validation_alias="PLAN_RANDOM_SEED",
        description="Seed for exercise selection. Unset means true randomness.",
    )
    default_volume: VolumeLevel = Field(
        default=VolumeLevel.STANDARD,
        validation_alias="DEFAULT_VOLUME",
        description="Session volume used when a caller does not choose one",
    )
    plan_image_url: str = Field(
        default=DEFAULT_PLAN_IMAGE_URL,
        validation_alias="PLAN_IMAGE_URL",
        description="Hero image attached to generated plans",
    )
    catalog_dir: Path | None = Field(
        default=None,
        validation_alias="CATALOG_DIR",
        description="Directory holding exercises.yaml and templates.yaml (defaults to bundled data)",
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

    @field_validator("default_volume", mode="before")
    @classmethod
    def validate_default_volume(cls, value: object) -> object:
        """Fall back to standard volume for unrecognized values."""
        if isinstance(value, str) and value.lower() not in {v.value for v in VolumeLevel}:
            logger.warning(f"Invalid DEFAULT_VOLUME '{value}'. Defaulting to standard.")
            return VolumeLevel.STANDARD
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("catalog_dir")
    @classmethod
    def validate_catalog_dir(cls, value: Path | None) -> Path | None:
        """Warn when a custom catalog directory does not exist."""
        if value is not None and not value.is_dir():
            logger.warning(f"CATALOG_DIR '{value}' is not a directory. Bundled catalog data will fail to load from it.")
        return value


settings = Settings()
