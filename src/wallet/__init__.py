"""Wallet session and the models its reads produce."""

from wallet.errors import ConstructionFailure, TransportFailure, WalletError
from wallet.models import BalanceSufficiency, ContractDescriptor, GasEstimate, NetworkStats
from wallet.session import WalletSession
from wallet.units import format_ether, format_gwei, format_units

__all__ = [
    "BalanceSufficiency",
    "ConstructionFailure",
    "ContractDescriptor",
    "GasEstimate",
    "NetworkStats",
    "TransportFailure",
    "WalletError",
    "WalletSession",
    "format_ether",
    "format_gwei",
    "format_units",
]
