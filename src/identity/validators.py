"""Offline checks run before any network round trip."""

import logging
import math
from decimal import Decimal, InvalidOperation

from identity.models import derive_identity

logger = logging.getLogger(__name__)

ENDPOINT_CREDENTIAL_LENGTH = 32


def validate_secret(secret: str) -> bool:
    """Return True if the secret derives a non-empty address."""
    try:
        identity = derive_identity(secret)
    except Exception:
        return False
    return bool(identity.address)


def validate_endpoint_credential(credential: str) -> bool:
    """Check the endpoint API key shape.

    This is a length-only pre-filter that rejects obviously malformed
    keys. It does not authenticate anything; a 32-character string of
    any content passes.
    """
    return isinstance(credential, str) and len(credential) == ENDPOINT_CREDENTIAL_LENGTH


def format_decimal_amount(amount: str | int | float | Decimal) -> str:
    """Render an amount with exactly 6 fractional digits.

    The amount is parsed as a float and rounded from its binary value,
    so "0.0000025" renders as "0.000003". Negative zero renders as
    "0.000000".

    Args:
        amount: Numeric string or number.

    Returns:
        Fixed-point string, e.g. "123.456789" or "0.000000".

    Raises:
        ValueError: If the amount is not a finite number.
    """
    if isinstance(amount, bool):
        raise ValueError(f"Amount is not numeric: {amount!r}")

    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation as e:
        raise ValueError(f"Amount is not numeric: {amount!r}") from e

    if not value.is_finite():
        raise ValueError(f"Amount must be finite: {amount!r}")

    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Amount out of float range: {amount!r}")
    if number == 0:
        number = 0.0

    return f"{number:.6f}"
