"""Tests for main.py helper functions."""
import os
from unittest.mock import AsyncMock, patch

import pytest

from conftest import TEST_API_KEY, TEST_SECRET, make_ledger
from config.settings import Settings, WalletConfig
from wallet.session import WalletSession

VALID_ENV = {
    "WALLET_PRIVATE_KEY": TEST_SECRET,
    "WALLET_INFURA_API_KEY": TEST_API_KEY,
}


def test_validate_env_vars_success():
    """Test env var validation with all required vars present."""
    from main import validate_env_vars

    with patch.dict(os.environ, VALID_ENV):
        validate_env_vars()


def test_validate_env_vars_missing_key():
    """Test env var validation fails when WALLET_PRIVATE_KEY missing."""
    from main import validate_env_vars

    with patch.dict(os.environ, {"WALLET_INFURA_API_KEY": TEST_API_KEY}, clear=True):
        with pytest.raises(SystemExit):
            validate_env_vars()


def test_load_and_validate_config_success(tmp_path):
    """Test successful config loading and validation."""
    from main import load_and_validate_config

    config_file = tmp_path / "settings.yaml"
    config_file.write_text("wallet:\n  network: sepolia\n")

    with patch.dict(os.environ, VALID_ENV):
        with patch("main.load_dotenv"):
            settings = load_and_validate_config(config_file)

    assert settings.wallet.network == "sepolia"
    assert settings.credentials.private_key == TEST_SECRET


def test_load_and_validate_config_missing_yaml(tmp_path):
    """Test config loading fails with missing YAML."""
    from main import load_and_validate_config

    with patch.dict(os.environ, VALID_ENV):
        with patch("main.load_dotenv"):
            with pytest.raises(SystemExit):
                load_and_validate_config(tmp_path / "missing.yaml")


def test_load_and_validate_config_bad_api_key(tmp_path):
    """Test config loading fails on a malformed API key."""
    from main import load_and_validate_config

    config_file = tmp_path / "settings.yaml"
    config_file.write_text("")

    env = {**VALID_ENV, "WALLET_INFURA_API_KEY": "too-short"}
    with patch.dict(os.environ, env):
        with patch("main.load_dotenv"):
            with pytest.raises(SystemExit):
                load_and_validate_config(config_file)


def test_load_and_validate_config_bad_private_key(tmp_path):
    from main import load_and_validate_config

    config_file = tmp_path / "settings.yaml"
    config_file.write_text("")

    env = {**VALID_ENV, "WALLET_PRIVATE_KEY": "0xdeadbeef"}
    with patch.dict(os.environ, env):
        with patch("main.load_dotenv"):
            with pytest.raises(SystemExit):
                load_and_validate_config(config_file)


def test_create_session_exits_on_bad_secret():
    from main import create_session

    settings = Settings()
    settings.credentials.private_key = "bad"
    settings.credentials.infura_api_key = TEST_API_KEY

    with pytest.raises(SystemExit):
        create_session(settings)


def test_create_session_exits_on_unsupported_network():
    from main import create_session

    settings = Settings()
    settings.credentials.private_key = TEST_SECRET
    settings.credentials.infura_api_key = TEST_API_KEY
    settings.wallet.network = "fantom"

    with pytest.raises(SystemExit):
        create_session(settings)


def test_parse_args_defaults():
    from main import DEFAULT_CONFIG_PATH, parse_args

    args = parse_args([])
    assert args.config == DEFAULT_CONFIG_PATH
    assert args.amount is None
    assert args.network is None


@pytest.mark.asyncio
async def test_run_healthy_session_cleans_up():
    from main import run

    ledger = make_ledger()
    session = WalletSession(
        secret=TEST_SECRET,
        endpoint_credential=TEST_API_KEY,
        config=WalletConfig(simulation_delay_ms=0),
        ledger=ledger,
    )

    assert await run(session, "10") is True
    ledger.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_reports_failure_without_raising():
    from main import run

    ledger = make_ledger(get_fee_data=AsyncMock(side_effect=ConnectionError("down")))
    session = WalletSession(
        secret=TEST_SECRET,
        endpoint_credential=TEST_API_KEY,
        config=WalletConfig(simulation_delay_ms=0),
        ledger=ledger,
    )

    assert await run(session) is False
    ledger.close.assert_awaited_once()
