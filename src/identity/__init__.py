"""Wallet identity derivation and offline credential checks."""

from identity.models import InvalidSecretError, WalletIdentity, derive_identity
from identity.validators import (
    ENDPOINT_CREDENTIAL_LENGTH,
    format_decimal_amount,
    validate_endpoint_credential,
    validate_secret,
)

__all__ = [
    "ENDPOINT_CREDENTIAL_LENGTH",
    "InvalidSecretError",
    "WalletIdentity",
    "derive_identity",
    "format_decimal_amount",
    "validate_endpoint_credential",
    "validate_secret",
]
