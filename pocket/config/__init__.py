from .config import (
    AppConfig,
    DatabaseConfig,
    FinanceConfig,
    LoggingConfig,
    get_config,
)

__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "FinanceConfig",
    "LoggingConfig",
    "get_config",
]
