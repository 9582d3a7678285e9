"""Data models produced by wallet session reads."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class BalanceSufficiency(Enum):
    """Outcome of comparing the native balance against the configured minimum."""

    SUFFICIENT = "sufficient"
    INSUFFICIENT = "insufficient"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ContractDescriptor:
    """Token contract metadata, read fresh on every call.

    Attributes:
        address: Contract address.
        name: Token name.
        symbol: Token symbol.
        decimals: Declared decimal count, as a string.
    """

    address: str
    name: str
    symbol: str
    decimals: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
        }


@dataclass(frozen=True)
class NetworkStats:
    block_height: int
    gas_price_gwei: str
    max_fee_per_gas_gwei: str | None
    network_name: str
    chain_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentBlock": self.block_height,
            "gasPrice": self.gas_price_gwei,
            "maxFeePerGas": self.max_fee_per_gas_gwei,
            "networkName": self.network_name,
            "chainId": self.chain_id,
        }


@dataclass(frozen=True)
class GasEstimate:
    """Cost of a transaction at the current gas price.

    Attributes:
        gas_limit: Gas units assumed for the transaction.
        gas_price_gwei: Gas price rendered in gwei.
        estimated_cost_native: gas_limit * gas_price rendered in native units.
        estimated_cost_smallest_unit: Same cost in wei, as a base-10 string.
    """

    gas_limit: int
    gas_price_gwei: str
    estimated_cost_native: str
    estimated_cost_smallest_unit: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "gasLimit": self.gas_limit,
            "gasPrice": self.gas_price_gwei,
            "estimatedCostNative": self.estimated_cost_native,
            "estimatedCostSmallestUnit": self.estimated_cost_smallest_unit,
        }
