# src/simulation/runner.py
"""Fixed five-step dry-run of a token transfer. Nothing is broadcast."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from config.settings import WalletConfig
from simulation.models import SimulationResult
from validation.validation_report import ValidationReportBuilder
from wallet.session import WalletSession

logger = logging.getLogger(__name__)

STEP_VALIDATE = "Validating wallet configuration..."
STEP_BALANCES = "Checking current balances..."
STEP_ESTIMATE = "Estimating transaction costs..."
STEP_COMPLETE = "Transfer simulation completed successfully"


class SimulationError(RuntimeError):
    """Raised inside the runner when a step cannot continue."""


class SimulationRunner:
    """Runs validate, balances, estimate, simulate, complete in that order.

    Attributes:
        session: Wallet session the reads go through.
        config: Configuration supplying the default amount and the delay.
    """

    def __init__(
        self,
        session: WalletSession,
        config: Optional[WalletConfig] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize SimulationRunner.

        Args:
            session: Wallet session to read from.
            config: Defaults to the session's configuration.
            sleep: Coroutine used for the synthetic processing delay.
        """
        self.session = session
        self.config = config or session.config
        self._sleep = sleep

    async def simulate_transfer(self, amount: Optional[str] = None) -> SimulationResult:
        """Simulate a transfer of `amount` tokens without touching the ledger.

        Any exception from steps 1-4 is caught once here: success stays
        False, error holds the message and the steps logged so far remain.

        Args:
            amount: Token amount. Defaults to config.flash_amount.

        Returns:
            SimulationResult. Never raises.
        """
        amount = str(amount) if amount is not None else self.config.flash_amount
        symbol = self.config.token_symbol
        result = SimulationResult(amount=amount)

        logger.info(f"Starting transfer simulation for {amount} {symbol}")

        try:
            # Step 1: validate
            result.steps.append(STEP_VALIDATE)
            report = await ValidationReportBuilder(self.session, self.config).build()
            if not report.is_valid:
                raise SimulationError(f"Wallet validation failed: {', '.join(report.errors)}")

            # Step 2: balances, logged only
            result.steps.append(STEP_BALANCES)
            native_balance = await self.session.native_balance()
            token_balance = await self.session.token_balance()
            logger.info(f"Current native balance: {native_balance}")
            logger.info(f"Current {symbol} balance: {token_balance}")

            # Step 3: cost estimate
            result.steps.append(STEP_ESTIMATE)
            result.gas_estimate = await self.session.estimate_transaction_cost()

            # Step 4: simulated processing, no ledger interaction
            result.steps.append(f"Simulating transfer of {amount} {symbol} (dry run)...")
            await self._sleep(self.config.simulation_delay_ms / 1000)

            # Step 5: complete
            result.steps.append(STEP_COMPLETE)
            result.success = True
            logger.info(f"Simulated transfer of {amount} {symbol} completed")

        except Exception as e:
            result.error = str(e)
            logger.error(f"Simulation failed: {e}")

        return result
