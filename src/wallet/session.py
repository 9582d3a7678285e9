"""Wallet session: one identity bound to one ledger client."""

import logging
from typing import Optional

from config.settings import WalletConfig
from identity.models import WalletIdentity, derive_identity
from ledger.client import LedgerClient
from ledger.models import NetworkIdentity
from ledger.web3_client import Web3LedgerClient
from wallet.errors import ConstructionFailure, TransportFailure
from wallet.models import BalanceSufficiency, ContractDescriptor, GasEstimate, NetworkStats
from wallet.units import format_ether, format_gwei, format_units

logger = logging.getLogger(__name__)


class WalletSession:
    """Read-only view of one wallet on one ledger.

    Holds the derived identity and the ledger binding for its lifetime;
    neither is reassigned after construction. Every read goes to the
    ledger, nothing is cached between calls.

    Attributes:
        config: Session configuration (token contract, thresholds, gas limit).
    """

    def __init__(
        self,
        secret: str,
        endpoint_credential: str,
        network: Optional[str] = None,
        config: Optional[WalletConfig] = None,
        ledger: Optional[LedgerClient] = None,
        rpc_url: Optional[str] = None,
    ):
        """Initialize WalletSession.

        Args:
            secret: Private key, 64 hex characters with or without 0x.
            endpoint_credential: Remote endpoint API key.
            network: Network name. Defaults to config.network.
            config: Session configuration. Defaults to WalletConfig().
            ledger: Pre-built ledger client. Built from the network and
                credential when omitted.
            rpc_url: Explicit RPC URL for the built ledger client.

        Raises:
            ConstructionFailure: If the secret cannot be parsed as key material,
                or the network has no known endpoint and no rpc_url is given.
        """
        self.config = config or WalletConfig()
        self._network = network or self.config.network

        try:
            # Handle creation only, bad credentials surface on the first read
            self._ledger: LedgerClient = ledger or Web3LedgerClient(
                network=self._network,
                api_key=endpoint_credential,
                rpc_url=rpc_url,
                timeout_seconds=self.config.rpc_timeout_seconds,
            )
            self._identity: WalletIdentity = derive_identity(secret)
        except Exception as e:
            raise ConstructionFailure(f"Initialization failed: {e}") from e

        self._token_address = self.config.token_contract_address
        self._closed = False

        logger.info(f"Wallet session initialized for {self._identity.address} on {self._network}")

    @property
    def address(self) -> str:
        """Return the wallet address."""
        return self._identity.address

    @property
    def network_name(self) -> str:
        """Return the configured network name."""
        return self._network

    async def _native_balance_wei(self) -> int:
        return await self._ledger.get_balance(self.address)

    async def native_balance(self) -> str:
        """Get the native coin balance in whole units.

        Returns:
            Balance as a decimal string, e.g. "1.5".

        Raises:
            TransportFailure: If the balance read fails.
        """
        try:
            balance = await self._native_balance_wei()
        except Exception as e:
            raise TransportFailure("get native balance", e) from e
        return format_ether(balance)

    async def token_balance(self) -> str:
        """Get the token balance scaled by the configured token decimals.

        Raises:
            TransportFailure: If the balance read fails.
        """
        try:
            balance = await self._ledger.get_token_balance(self._token_address, self.address)
        except Exception as e:
            raise TransportFailure("get token balance", e) from e
        return format_units(balance, self.config.token_decimals)

    async def check_native_balance(self) -> BalanceSufficiency:
        """Compare the native balance against config.min_native_balance.

        Returns:
            SUFFICIENT or INSUFFICIENT, or UNKNOWN if the balance could not be read.
        """
        try:
            balance = await self._native_balance_wei()
        except Exception as e:
            logger.error(f"Error checking balance: {e}")
            return BalanceSufficiency.UNKNOWN

        if balance >= self.config.min_native_balance_wei:
            return BalanceSufficiency.SUFFICIENT
        return BalanceSufficiency.INSUFFICIENT

    async def has_sufficient_native_balance(self) -> bool:
        """Return True only when the balance is known to meet the minimum.

        A failed read reports False, never sufficiency.
        """
        return await self.check_native_balance() is BalanceSufficiency.SUFFICIENT

    async def network(self) -> NetworkIdentity:
        """Read the network identity reported by the node.

        Raises:
            TransportFailure: If the read fails.
        """
        try:
            return await self._ledger.get_network()
        except Exception as e:
            raise TransportFailure("get network", e) from e

    async def contract_info(self) -> ContractDescriptor:
        """Read name, symbol and decimals of the token contract.

        Raises:
            TransportFailure: If any of the three reads fails.
        """
        try:
            name = await self._ledger.read_contract_field(self._token_address, "name")
            symbol = await self._ledger.read_contract_field(self._token_address, "symbol")
            decimals = await self._ledger.read_contract_field(self._token_address, "decimals")
        except Exception as e:
            raise TransportFailure("get contract info", e) from e

        return ContractDescriptor(
            address=self._token_address,
            name=str(name),
            symbol=str(symbol),
            decimals=str(decimals),
        )

    async def network_stats(self) -> NetworkStats:
        """Read block height, fee data and network identity.

        Raises:
            TransportFailure: If any read fails.
        """
        try:
            block_number = await self._ledger.get_block_number()
            fee_data = await self._ledger.get_fee_data()
            network = await self._ledger.get_network()
        except Exception as e:
            raise TransportFailure("get network stats", e) from e

        max_fee = fee_data.max_fee_per_gas
        return NetworkStats(
            block_height=block_number,
            gas_price_gwei=format_gwei(fee_data.gas_price),
            max_fee_per_gas_gwei=format_gwei(max_fee) if max_fee else None,
            network_name=network.name,
            chain_id=str(network.chain_id),
        )

    async def estimate_transaction_cost(self, gas_limit: Optional[int] = None) -> GasEstimate:
        """Estimate the cost of a transaction at the current gas price.

        Args:
            gas_limit: Gas units. Defaults to config.gas_limit.

        Returns:
            GasEstimate computed with integer wei arithmetic.

        Raises:
            TransportFailure: If fee data is unavailable.
        """
        limit = gas_limit if gas_limit is not None else self.config.gas_limit
        try:
            fee_data = await self._ledger.get_fee_data()
            if fee_data.gas_price is None:
                raise ValueError("node returned no gas price")
        except Exception as e:
            raise TransportFailure("estimate transaction cost", e) from e

        cost_wei = int(fee_data.gas_price) * int(limit)
        return GasEstimate(
            gas_limit=limit,
            gas_price_gwei=format_gwei(fee_data.gas_price),
            estimated_cost_native=format_ether(cost_wei),
            estimated_cost_smallest_unit=str(cost_wei),
        )

    async def cleanup(self) -> None:
        """Release the ledger handle. Idempotent."""
        if self._closed:
            return
        self._closed = True
        logger.info("Cleaning up wallet session resources")
        await self._ledger.close()

    async def __aenter__(self) -> "WalletSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.cleanup()
