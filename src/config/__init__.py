"""Configuration models for the wallet probe."""

from config.settings import (
    LedgerCredentials,
    LoggingConfig,
    Settings,
    SystemConfig,
    WalletConfig,
)

__all__ = [
    "LedgerCredentials",
    "LoggingConfig",
    "Settings",
    "SystemConfig",
    "WalletConfig",
]
