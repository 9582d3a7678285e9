"""Shared fixtures: a healthy mock ledger and a session bound to it."""

from unittest.mock import AsyncMock, Mock

import pytest

from config.settings import WalletConfig
from ledger.client import LedgerClient
from ledger.models import FeeData, NetworkIdentity
from wallet.session import WalletSession

TEST_SECRET = "0x1234567890abcdef1234567890abcdef1234567890abcdef1234567890abcdef"
TEST_API_KEY = "12345678901234567890123456789012"

CONTRACT_FIELDS = {"name": "Tether USD", "symbol": "USDT", "decimals": 6}


def make_ledger(**overrides) -> Mock:
    """Create a mock LedgerClient with healthy defaults.

    Keyword arguments replace individual async methods, e.g.
    make_ledger(get_fee_data=AsyncMock(side_effect=ConnectionError("down"))).
    """
    ledger = Mock(spec=LedgerClient)
    ledger.get_balance = AsyncMock(return_value=1_500_000_000_000_000_000)
    ledger.get_token_balance = AsyncMock(return_value=300_000_000)
    ledger.get_fee_data = AsyncMock(
        return_value=FeeData(
            gas_price=20_000_000_000,
            max_fee_per_gas=40_000_000_000,
            max_priority_fee_per_gas=1_000_000_000,
        )
    )
    ledger.get_block_number = AsyncMock(return_value=19_000_000)
    ledger.get_network = AsyncMock(return_value=NetworkIdentity(name="mainnet", chain_id=1))
    ledger.read_contract_field = AsyncMock(
        side_effect=lambda token_address, field: CONTRACT_FIELDS[field]
    )
    ledger.close = AsyncMock()
    for name, value in overrides.items():
        setattr(ledger, name, value)
    return ledger


@pytest.fixture
def wallet_config():
    """WalletConfig with the synthetic delay switched off."""
    return WalletConfig(simulation_delay_ms=0)


@pytest.fixture
def ledger():
    return make_ledger()


@pytest.fixture
def session(ledger, wallet_config):
    return WalletSession(
        secret=TEST_SECRET,
        endpoint_credential=TEST_API_KEY,
        config=wallet_config,
        ledger=ledger,
    )
