# src/simulation/models.py
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from wallet.models import GasEstimate


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class SimulationResult:
    """Outcome of one transfer simulation.

    Attributes:
        success: True only when every step completed.
        amount: Requested token amount, as given.
        timestamp: ISO-8601 UTC start time.
        steps: Step descriptions in the order they ran. Kept on failure.
        gas_estimate: Cost estimate, once the estimate step has run.
        error: Message of the exception that stopped the run.
    """

    amount: str
    success: bool = False
    timestamp: str = field(default_factory=_utc_timestamp)
    steps: list[str] = field(default_factory=list)
    gas_estimate: GasEstimate | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "amount": self.amount,
            "timestamp": self.timestamp,
            "steps": list(self.steps),
            "gasEstimate": self.gas_estimate.to_dict() if self.gas_estimate else None,
            "error": self.error,
        }
