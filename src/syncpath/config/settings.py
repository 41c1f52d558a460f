"""Application configuration settings."""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


DEFAULT_PART_SIZE_BYTES = 20 * 1024 * 1024


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="INFO")
    format: str = Field(default="console")
    file_path: Optional[str] = Field(default=None)

    class Config:
        env_prefix = "LOG_"

    @field_validator("format")
    @classmethod
    def validate_format(cls, v):
        if v not in ("json", "console"):
            raise ValueError("Log format must be 'json' or 'console'")
        return v


class TransferSettings(BaseSettings):
    """Chunked transfer configuration."""

    part_size_bytes: int = Field(default=DEFAULT_PART_SIZE_BYTES)

    class Config:
        env_prefix = "TRANSFER_"

    @field_validator("part_size_bytes")
    @classmethod
    def validate_part_size(cls, v):
        if v <= 0:
            raise ValueError("Part size must be a positive number of bytes")
        return v


class HiddenPathSettings(BaseSettings):
    """Which leading characters mark a path segment as hidden."""

    match_dot: bool = Field(default=True)
    match_underscore: bool = Field(default=True)

    class Config:
        env_prefix = "HIDDEN_"


class AppSettings(BaseSettings):
    """Main application settings."""

    name: str = Field(default="syncpath")
    environment: str = Field(default="development")

    # Sub-settings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    transfer: TransferSettings = Field(default_factory=TransferSettings)
    hidden: HiddenPathSettings = Field(default_factory=HiddenPathSettings)

    class Config:
        env_prefix = "SYNCPATH_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = AppSettings()


def get_settings() -> AppSettings:
    """Get application settings."""
    return settings


def reload_settings() -> AppSettings:
    """Rebuild the global settings from the current environment."""
    global settings
    settings = AppSettings()
    return settings
