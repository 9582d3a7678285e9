"""Wallet identity derived from secret key material."""

from dataclasses import dataclass, field

from eth_account import Account


class InvalidSecretError(ValueError):
    """Raised when a secret cannot be parsed as key material."""


@dataclass(frozen=True)
class WalletIdentity:
    """Secret key plus the public address derived from it.

    Attributes:
        address: Checksummed, 0x-prefixed 40-hex address.
        secret: Raw key material. Excluded from repr and comparison.
    """

    address: str
    secret: str = field(repr=False, compare=False)


def derive_identity(secret: str) -> WalletIdentity:
    """Derive the public address for a secret key.

    Args:
        secret: 64 hex characters, with or without the 0x prefix.

    Returns:
        WalletIdentity for the secret.

    Raises:
        InvalidSecretError: If the secret is not valid key material.
    """
    if not isinstance(secret, str) or not secret:
        raise InvalidSecretError("secret must be a non-empty string")

    try:
        account = Account.from_key(secret)
    except Exception as e:
        # eth-account raises a mix of ValueError, binascii.Error and
        # eth_keys ValidationError depending on the defect.
        raise InvalidSecretError(f"invalid private key: {e.__class__.__name__}") from e

    return WalletIdentity(address=account.address, secret=secret)
