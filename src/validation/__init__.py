"""Wallet validation report."""

from validation.validation_report import (
    LOW_BALANCE_WARNING,
    TOKEN_BALANCE_WARNING,
    ValidationReport,
    ValidationReportBuilder,
    validate_wallet,
)

__all__ = [
    "LOW_BALANCE_WARNING",
    "TOKEN_BALANCE_WARNING",
    "ValidationReport",
    "ValidationReportBuilder",
    "validate_wallet",
]
