# main.py
"""Main entry point for the wallet probe."""
import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from config.settings import Settings
from identity.validators import validate_endpoint_credential, validate_secret
from simulation.runner import SimulationRunner
from validation.validation_report import validate_wallet
from wallet.errors import ConstructionFailure, TransportFailure
from wallet.session import WalletSession

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings (defaults when None)."""
    log_config = (settings or Settings()).logging
    logging.basicConfig(
        level=log_config.level,
        format=log_config.format,
        datefmt=log_config.datefmt,
        force=True,
    )


def validate_env_vars() -> None:
    """Validate required environment variables are set.

    Raises:
        SystemExit: If any required env var is missing.
    """
    required_vars = [
        "WALLET_PRIVATE_KEY",
        "WALLET_INFURA_API_KEY",
    ]

    missing = [var for var in required_vars if not os.getenv(var)]

    if missing:
        logger.error(f"Missing required environment variables: {', '.join(missing)}")
        logger.error("Please check your .env file")
        sys.exit(1)


def validate_credentials(settings: Settings) -> None:
    """Check credential formats before any network call.

    Raises:
        SystemExit: If the private key or API key is malformed.
    """
    if not validate_secret(settings.credentials.private_key):
        logger.error("Invalid private key format")
        sys.exit(1)

    if not validate_endpoint_credential(settings.credentials.infura_api_key):
        logger.error("Invalid Infura API key format")
        sys.exit(1)


def print_startup_banner(settings: Settings) -> None:
    """Print startup banner."""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.system.name}")
    logger.info(f"Network: {settings.wallet.network}")
    logger.info(f"Version: {settings.system.version}")
    logger.info("=" * 60)


def load_and_validate_config(config_path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load and validate configuration.

    Args:
        config_path: YAML settings file.

    Returns:
        Settings object loaded from YAML.

    Raises:
        SystemExit: If config file missing, env vars invalid, or YAML parsing fails.
    """
    load_dotenv()
    logger.info("✓ Loaded environment variables")

    validate_env_vars()
    logger.info("✓ Environment variables validated")

    if not config_path.exists():
        logger.error(f"{config_path} not found")
        sys.exit(1)

    try:
        settings = Settings.from_yaml(config_path)
        logger.info(f"✓ Settings loaded from {config_path}")
    except Exception as e:
        logger.error(f"Failed to parse {config_path}: {e}")
        sys.exit(1)

    validate_credentials(settings)
    logger.info("✓ Credentials format validated")

    return settings


def create_session(settings: Settings) -> WalletSession:
    """Create the wallet session.

    Raises:
        SystemExit: If the session cannot be initialized.
    """
    try:
        session = WalletSession(
            secret=settings.credentials.private_key,
            endpoint_credential=settings.credentials.infura_api_key,
            network=settings.wallet.network,
            config=settings.wallet,
            rpc_url=settings.credentials.rpc_url,
        )
    except ConstructionFailure as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"📍 Wallet address: {session.address}")
    return session


def _dump(data: dict) -> str:
    return json.dumps(data, indent=2, default=str)


async def run(session: WalletSession, amount: Optional[str] = None) -> bool:
    """Validate, report and simulate a transfer for one session.

    Returns:
        True if the simulation succeeded.
    """
    try:
        validation = await validate_wallet(session)
        logger.info(f"🔍 Wallet validation:\n{_dump(validation.to_dict())}")

        try:
            stats = await session.network_stats()
            logger.info(f"📊 Network statistics:\n{_dump(stats.to_dict())}")
        except TransportFailure as e:
            logger.warning(str(e))

        try:
            contract = await session.contract_info()
            logger.info(f"📋 Token contract:\n{_dump(contract.to_dict())}")
        except TransportFailure as e:
            logger.warning(str(e))

        runner = SimulationRunner(session)
        result = await runner.simulate_transfer(amount)
        logger.info(f"Simulation details:\n{_dump(result.to_dict())}")

        if result.success:
            logger.info("🎉 Transfer simulation completed successfully")
        else:
            logger.error(f"❌ Transfer simulation failed: {result.error}")
        return result.success
    finally:
        await session.cleanup()


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check wallet balances and simulate a token transfer (dry run)."
    )
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--amount", default=None, help="Token amount to simulate")
    parser.add_argument("--network", default=None, help="Override the configured network")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging()

    settings = load_and_validate_config(args.config)
    if args.network:
        settings.wallet.network = args.network
    configure_logging(settings)
    print_startup_banner(settings)

    session = create_session(settings)
    success = asyncio.run(run(session, args.amount))
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
