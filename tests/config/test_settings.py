# tests/config/test_settings.py
from decimal import Decimal

import pytest
from pydantic import ValidationError

from config.settings import Settings, WalletConfig


class TestWalletConfig:
    def test_defaults(self):
        config = WalletConfig()
        assert config.flash_amount == "300"
        assert config.network == "mainnet"
        assert config.gas_limit == 21000
        assert config.token_contract_address == "0xdAC17F958D2ee523a2206206994597C13D831ec7"
        assert config.token_decimals == 6
        assert config.min_native_balance == Decimal("0.01")
        assert config.simulation_delay_ms == 2000

    def test_min_native_balance_wei(self):
        assert WalletConfig().min_native_balance_wei == 10**16
        assert WalletConfig(min_native_balance="1.5").min_native_balance_wei == 15 * 10**17

    def test_rejects_bad_contract_address(self):
        with pytest.raises(ValidationError):
            WalletConfig(token_contract_address="0x1234")

    def test_rejects_non_positive_gas_limit(self):
        with pytest.raises(ValidationError):
            WalletConfig(gas_limit=0)

    @pytest.mark.parametrize("amount", ["abc", "NaN", "-1"])
    def test_rejects_bad_flash_amount(self, amount):
        with pytest.raises(ValidationError):
            WalletConfig(flash_amount=amount)


class TestSettings:
    def test_load_settings_from_yaml(self, tmp_path):
        config_content = """
system:
  name: "Test Probe"

wallet:
  network: "sepolia"
  gas_limit: 50000
  min_native_balance: "0.05"
  simulation_delay_ms: 0
"""
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(config_content)

        settings = Settings.from_yaml(config_file)

        assert settings.system.name == "Test Probe"
        assert settings.wallet.network == "sepolia"
        assert settings.wallet.gas_limit == 50000
        assert settings.wallet.min_native_balance == Decimal("0.05")
        assert settings.wallet.simulation_delay_ms == 0

    def test_settings_defaults(self, tmp_path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("")

        settings = Settings.from_yaml(config_file)

        assert settings.wallet.flash_amount == "300"
        assert settings.logging.level == "INFO"

    def test_credentials_come_from_env(self, tmp_path, monkeypatch):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("credentials:\n  private_key: from-yaml\n")
        monkeypatch.setenv("WALLET_PRIVATE_KEY", "from-env")
        monkeypatch.setenv("WALLET_INFURA_API_KEY", "k" * 32)

        settings = Settings.from_yaml(config_file)

        assert settings.credentials.private_key == "from-env"
        assert settings.credentials.infura_api_key == "k" * 32
        assert settings.credentials.rpc_url is None

    def test_invalid_wallet_section_raises(self, tmp_path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("wallet:\n  gas_limit: -5\n")

        with pytest.raises(ValidationError):
            Settings.from_yaml(config_file)
