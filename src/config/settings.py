# src/config/settings.py
import re
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")
NATIVE_DECIMALS = 18


class SystemConfig(BaseModel):
    name: str = "Wallet Probe"
    version: str = "1.0.0"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


class WalletConfig(BaseModel):
    """Session configuration passed explicitly into WalletSession.

    Attributes:
        flash_amount: Default token amount used by the transfer simulation.
        network: Ledger network name (e.g. "mainnet", "sepolia").
        gas_limit: Gas limit used for cost estimates.
        token_contract_address: ERC-20 contract whose balance and metadata are read.
        token_symbol: Display symbol for the token.
        token_decimals: Decimal precision used to scale token balances.
        min_native_balance: Minimum native balance, in whole native units.
        simulation_delay_ms: Synthetic processing delay of the simulate step.
        rpc_timeout_seconds: HTTP timeout handed to the ledger client.
    """

    flash_amount: str = "300"
    network: str = "mainnet"
    gas_limit: int = Field(default=21000, gt=0)
    token_contract_address: str = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
    token_symbol: str = "USDT"
    token_decimals: int = Field(default=6, ge=0, le=36)
    min_native_balance: Decimal = Field(default=Decimal("0.01"), ge=0)
    simulation_delay_ms: int = Field(default=2000, ge=0)
    rpc_timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("token_contract_address")
    @classmethod
    def _check_address(cls, value: str) -> str:
        if not ADDRESS_PATTERN.match(value):
            raise ValueError("token_contract_address must be a 0x-prefixed 40-hex string")
        return value

    @field_validator("flash_amount")
    @classmethod
    def _check_amount(cls, value: str) -> str:
        try:
            parsed = Decimal(value)
        except InvalidOperation as e:
            raise ValueError(f"flash_amount is not numeric: {value!r}") from e
        if not parsed.is_finite() or parsed < 0:
            raise ValueError(f"flash_amount must be a finite non-negative number: {value!r}")
        return value

    @computed_field
    @property
    def min_native_balance_wei(self) -> int:
        """Minimum native balance in the smallest unit (wei)."""
        return int(self.min_native_balance.scaleb(NATIVE_DECIMALS))


class LedgerCredentials(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WALLET_")

    private_key: str = ""
    infura_api_key: str = ""
    rpc_url: Optional[str] = None


class Settings(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    wallet: WalletConfig = Field(default_factory=WalletConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    credentials: LedgerCredentials = Field(default_factory=LedgerCredentials)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file with env var credentials."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        # Credentials only ever come from the environment.
        data.pop("credentials", None)
        credentials = LedgerCredentials()

        return cls(
            **data,
            credentials=credentials,
        )
