"""Conversion between smallest-unit integers and display decimals."""

from decimal import Decimal, localcontext

from eth_utils import from_wei


def _trim(value: Decimal) -> str:
    text = f"{value:f}"
    if "." not in text:
        return f"{text}.0"
    whole, fraction = text.split(".")
    fraction = fraction.rstrip("0") or "0"
    return f"{whole}.{fraction}"


def format_units(value: int, decimals: int) -> str:
    """Render an integer amount of smallest units as a decimal string.

    Exact (no float), trailing zeros trimmed, always at least one
    fractional digit: format_units(0, 18) == "0.0",
    format_units(420000000000000, 18) == "0.00042".
    """
    with localcontext() as ctx:
        ctx.prec = 100
        return _trim(Decimal(int(value)).scaleb(-decimals))


def format_ether(value: int) -> str:
    return _trim(Decimal(from_wei(int(value), "ether")))


def format_gwei(value: int) -> str:
    return _trim(Decimal(from_wei(int(value), "gwei")))
