"""Data models returned by ledger reads."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeeData:
    """Current network fee data, all values in wei.

    Attributes:
        gas_price: Legacy gas price (or base fee plus tip on EIP-1559 chains).
        max_fee_per_gas: EIP-1559 fee cap, None on legacy chains.
        max_priority_fee_per_gas: EIP-1559 tip, None on legacy chains.
    """

    gas_price: int
    max_fee_per_gas: int | None = None
    max_priority_fee_per_gas: int | None = None


@dataclass(frozen=True)
class NetworkIdentity:
    """Name and numeric chain id reported by the node."""

    name: str
    chain_id: int
