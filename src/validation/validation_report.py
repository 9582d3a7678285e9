# src/validation/validation_report.py
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from config.settings import WalletConfig
from wallet.session import WalletSession

logger = logging.getLogger(__name__)

LOW_BALANCE_WARNING = "Low native balance - may not be sufficient for transactions"
TOKEN_BALANCE_WARNING = "Could not retrieve token balance"


@dataclass
class ValidationReport:
    """Aggregated wallet and network checks.

    Hard failures set is_valid to False and land in errors; soft
    failures land in warnings and leave is_valid untouched.
    """

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    info: dict[str, Any] = field(default_factory=dict)

    def add_error(self, message: str) -> None:
        self.is_valid = False
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "info": dict(self.info),
        }


class ValidationReportBuilder:
    """Runs the wallet checks against one session, single pass, no retries."""

    def __init__(self, session: WalletSession, config: Optional[WalletConfig] = None):
        self.session = session
        self.config = config or session.config

    async def build(self) -> ValidationReport:
        """Build a fresh report.

        Order:
        1. Network identity (hard; failure stops all further reads)
        2. Wallet address
        3. Native balance (hard; low balance is only a warning)
        4. Token balance (soft)

        Returns:
            ValidationReport. Never raises.
        """
        report = ValidationReport()

        try:
            # Step 1: network is the hard dependency
            network = await self.session.network()
            report.info["network"] = network.name
            report.info["chainId"] = str(network.chain_id)

            # Step 2: address
            report.info["walletAddress"] = self.session.address

            # Step 3: native balance
            native_balance = await self.session.native_balance()
            report.info["nativeBalance"] = native_balance
            if Decimal(native_balance) < self.config.min_native_balance:
                report.add_warning(LOW_BALANCE_WARNING)

            # Step 4: token balance is optional
            try:
                report.info["tokenBalance"] = await self.session.token_balance()
            except Exception as e:
                logger.warning(f"Token balance unavailable: {e}")
                report.add_warning(TOKEN_BALANCE_WARNING)

        except Exception as e:
            report.add_error(str(e))

        if report.is_valid:
            logger.info(f"Wallet validation passed with {len(report.warnings)} warning(s)")
        else:
            logger.error(f"Wallet validation failed: {', '.join(report.errors)}")

        return report


async def validate_wallet(session: WalletSession) -> ValidationReport:
    """Validate a wallet session with its own configuration."""
    return await ValidationReportBuilder(session).build()
