"""Interface of the remote ledger capability."""

from typing import Protocol, runtime_checkable

from ledger.models import FeeData, NetworkIdentity

CONTRACT_FIELDS = ("name", "symbol", "decimals")


@runtime_checkable
class LedgerClient(Protocol):
    """Async read-only access to a ledger node.

    Every method may fail independently with a transport-level error.
    Timeouts are the implementation's responsibility.
    """

    async def get_balance(self, address: str) -> int:
        ...

    async def get_token_balance(self, token_address: str, owner: str) -> int:
        ...

    async def get_fee_data(self) -> FeeData:
        ...

    async def get_block_number(self) -> int:
        ...

    async def get_network(self) -> NetworkIdentity:
        ...

    async def read_contract_field(self, token_address: str, field: str) -> str | int:
        ...

    async def close(self) -> None:
        ...
