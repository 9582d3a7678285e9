"""Ledger access: the async RPC capability the wallet session reads from."""

from ledger.client import CONTRACT_FIELDS, LedgerClient
from ledger.models import FeeData, NetworkIdentity
from ledger.web3_client import Web3LedgerClient

__all__ = [
    "CONTRACT_FIELDS",
    "FeeData",
    "LedgerClient",
    "NetworkIdentity",
    "Web3LedgerClient",
]
