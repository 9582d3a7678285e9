"""LedgerClient backed by web3.py's async HTTP provider."""

import logging
from typing import Optional

from aiohttp import ClientTimeout
from web3 import AsyncHTTPProvider, AsyncWeb3

from ledger.client import CONTRACT_FIELDS
from ledger.models import FeeData, NetworkIdentity

logger = logging.getLogger(__name__)

# Minimal read-only ERC-20 ABI
ERC20_ABI = [
    {
        "constant": True,
        "inputs": [{"name": "owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "symbol",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "name",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
]

# Infura host prefix and chain id per supported network name
INFURA_NETWORKS: dict[str, tuple[str, int]] = {
    "mainnet": ("mainnet", 1),
    "goerli": ("goerli", 5),
    "sepolia": ("sepolia", 11155111),
    "holesky": ("holesky", 17000),
    "arbitrum": ("arbitrum-mainnet", 42161),
    "arbitrum-goerli": ("arbitrum-goerli", 421613),
    "arbitrum-sepolia": ("arbitrum-sepolia", 421614),
    "base": ("base-mainnet", 8453),
    "base-goerli": ("base-goerli", 84531),
    "base-sepolia": ("base-sepolia", 84532),
    "bnb": ("bsc-mainnet", 56),
    "bnbt": ("bsc-testnet", 97),
    "linea": ("linea-mainnet", 59144),
    "linea-goerli": ("linea-goerli", 59140),
    "linea-sepolia": ("linea-sepolia", 59141),
    "matic": ("polygon-mainnet", 137),
    "matic-amoy": ("polygon-amoy", 80002),
    "matic-mumbai": ("polygon-mumbai", 80001),
    "optimism": ("optimism-mainnet", 10),
    "optimism-goerli": ("optimism-goerli", 420),
    "optimism-sepolia": ("optimism-sepolia", 11155420),
}

CHAIN_NAMES: dict[int, str] = {
    chain_id: name for name, (_, chain_id) in INFURA_NETWORKS.items()
}



class Web3LedgerClient:
    """Read-only ledger access over JSON-RPC.

    Creating the client only builds the provider handle; nothing is sent
    until the first read, so a bad API key surfaces on that read.

    Attributes:
        INFURA_URL_TEMPLATE: RPC URL used when no explicit URL is given.
    """

    INFURA_URL_TEMPLATE = "https://{host}.infura.io/v3/{api_key}"

    def __init__(
        self,
        network: str,
        api_key: str,
        rpc_url: Optional[str] = None,
        timeout_seconds: float = 30.0,
    ):
        """Initialize Web3LedgerClient.

        Args:
            network: Network name, a key of INFURA_NETWORKS (e.g. "mainnet", "matic").
            api_key: Infura project key.
            rpc_url: Explicit RPC URL, overrides the Infura URL.
            timeout_seconds: Total HTTP timeout per request.

        Raises:
            ValueError: If no rpc_url is given and Infura does not serve the network.
        """
        self._network = network
        if rpc_url:
            self._rpc_url = rpc_url
        else:
            if network not in INFURA_NETWORKS:
                raise ValueError(f"Unsupported Infura network: {network}")
            host, _ = INFURA_NETWORKS[network]
            self._rpc_url = self.INFURA_URL_TEMPLATE.format(host=host, api_key=api_key)
        provider = AsyncHTTPProvider(
            self._rpc_url,
            request_kwargs={"timeout": ClientTimeout(total=timeout_seconds)},
        )
        self._w3 = AsyncWeb3(provider)
        self._closed = False

    @property
    def network(self) -> str:
        """Return the configured network name."""
        return self._network

    def _token(self, token_address: str):
        return self._w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(token_address),
            abi=ERC20_ABI,
        )

    async def get_balance(self, address: str) -> int:
        return int(await self._w3.eth.get_balance(AsyncWeb3.to_checksum_address(address)))

    async def get_token_balance(self, token_address: str, owner: str) -> int:
        contract = self._token(token_address)
        balance = await contract.functions.balanceOf(
            AsyncWeb3.to_checksum_address(owner)
        ).call()
        return int(balance)

    async def get_fee_data(self) -> FeeData:
        """Read fee data the way ethers' getFeeData does.

        On EIP-1559 chains max_fee_per_gas is 2 * baseFee + priority fee.
        """
        gas_price = int(await self._w3.eth.gas_price)
        block = await self._w3.eth.get_block("latest")
        base_fee = block.get("baseFeePerGas")
        if base_fee is None:
            return FeeData(gas_price=gas_price)

        priority_fee = int(await self._w3.eth.max_priority_fee)
        return FeeData(
            gas_price=gas_price,
            max_fee_per_gas=int(base_fee) * 2 + priority_fee,
            max_priority_fee_per_gas=priority_fee,
        )

    async def get_block_number(self) -> int:
        return int(await self._w3.eth.block_number)

    async def get_network(self) -> NetworkIdentity:
        chain_id = int(await self._w3.eth.chain_id)
        return NetworkIdentity(name=CHAIN_NAMES.get(chain_id, "unknown"), chain_id=chain_id)

    async def read_contract_field(self, token_address: str, field: str) -> str | int:
        if field not in CONTRACT_FIELDS:
            raise ValueError(f"Unsupported contract field: {field}")
        contract = self._token(token_address)
        return await contract.functions[field]().call()

    async def close(self) -> None:
        """Release the provider's HTTP session. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        disconnect = getattr(self._w3.provider, "disconnect", None)
        if disconnect is not None:
            await disconnect()
        logger.debug(f"Ledger client for {self._network} closed")
