"""Tests for smallest-unit formatting."""

import pytest

from wallet.units import format_ether, format_gwei, format_units


class TestFormatUnits:
    @pytest.mark.parametrize(
        "value,decimals,expected",
        [
            (0, 18, "0.0"),
            (10**18, 18, "1.0"),
            (1_500_000_000_000_000_000, 18, "1.5"),
            (1, 18, "0.000000000000000001"),
            (300_000_000, 6, "300.0"),
            (1_234_567, 6, "1.234567"),
            (42, 0, "42.0"),
        ],
    )
    def test_format_units(self, value, decimals, expected):
        assert format_units(value, decimals) == expected

    def test_large_balance_is_exact(self):
        assert format_ether(123_456_789_123_456_789_123_456_789) == "123456789.123456789123456789"

    def test_format_ether_zero_and_small(self):
        assert format_ether(0) == "0.0"
        assert format_ether(420_000_000_000_000) == "0.00042"

    def test_format_gwei(self):
        assert format_gwei(20_000_000_000) == "20.0"
        assert format_gwei(1_500_000_001) == "1.500000001"
