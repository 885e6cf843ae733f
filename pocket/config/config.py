"""
Configuration module for the application.

Provides type-safe settings using Pydantic.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pocket.infrastructure.logger.interfaces import ILoggingConfig


class LoggingConfig(BaseSettings):
    """Configuration for the logging system."""

    app_name: str = "Pocket Finance"
    debug: bool = True  # if True then color console render, else json render
    log_level: str = "INFO"
    enable_file_logging: bool = False
    logs_dir: Path = Path("logs")
    logs_file_name: str = "pocket.log"
    max_file_size_mb: int = 10
    backup_count: int = 5

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


class DatabaseConfig(BaseSettings):
    """Configuration for the persistence adapter."""

    url: str = Field(
        default="sqlite:///pocket.db",
        description="SQLAlchemy database URL",
    )
    echo: bool = Field(
        default=False,
        description="Echo emitted SQL statements",
    )
    seed_defaults: bool = Field(
        default=True,
        description="Insert default categories and currencies on init",
    )


class FinanceConfig(BaseSettings):
    """Configuration for bookkeeping defaults."""

    default_category_color: str = Field(
        default="#3B82F6",
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Color applied to categories created without one",
    )
    default_page_limit: int = Field(
        default=20,
        ge=1,
        description="Page size used when a request omits or zeroes it",
    )
    max_page_limit: int = Field(
        default=100,
        ge=1,
        description="Upper bound for requested page sizes",
    )


class AppConfig(BaseSettings):
    """Main application configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    finance: FinanceConfig = Field(default_factory=FinanceConfig)
    logger: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    @property
    def logger_adapter(self) -> ILoggingConfig:
        """
        Create logging configuration adapter from settings.

        Returns:
            ILoggingConfig: Configuration object for the logging system.
        """
        return self.logger


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()
