"""Tests for amount parsing."""

import pytest
from decimal import Decimal

from finledger.domain.errors import ValidationError
from finledger.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("€ 99", Decimal("99")),
        ("  0  ", Decimal("0")),
        (10, Decimal("10")),
        (2.5, Decimal("2.5")),
        (Decimal("7.25"), Decimal("7.25")),
    ],
)
def test_parse_valid_amounts(raw, expected):
    """Test parsing supported amount formats."""
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", None, "abc", "12abc", "NaN", "Infinity", float("nan"), True])
def test_parse_rejects_non_numeric(raw):
    """Test that non-numeric input is rejected instead of producing NaN."""
    with pytest.raises(ValidationError):
        parse_amount(raw)


@pytest.mark.parametrize("raw", ["-1", -0.01, Decimal("-3")])
def test_parse_rejects_negative(raw):
    """Test that negative amounts are rejected."""
    with pytest.raises(ValidationError, match="must not be negative"):
        parse_amount(raw)


@pytest.mark.parametrize(
    "raw",
    ["1e5000", "1000000000000000", Decimal("1e15"), "1e-19", "0.1234567890123456", 1e300],
)
def test_parse_rejects_amounts_that_cannot_be_stored_exactly(raw):
    """Test the magnitude and precision limits."""
    with pytest.raises(ValidationError):
        parse_amount(raw)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("999,999,999,999,999", Decimal("999999999999999")),
        ("1234567890.12345", Decimal("1234567890.12345")),
        ("0.000000000000000001", Decimal("1e-18")),
        ("0E-5000", Decimal("0")),
        ("1.50000000000000000000", Decimal("1.5")),
    ],
)
def test_parse_accepts_amounts_within_limits(raw, expected):
    assert parse_amount(raw) == expected
