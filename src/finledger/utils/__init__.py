"""Utility functions for finledger."""

from finledger.utils.date_parser import parse_date
from finledger.utils.amount_parser import parse_amount
from finledger.utils.formatting import format_amount, format_percentage

__all__ = ["parse_date", "parse_amount", "format_amount", "format_percentage"]
