"""Utility functions for dairyledger."""

from dairyledger.utils.date_parser import parse_date, parse_month, get_month_range
from dairyledger.utils.amount_parser import parse_amount
from dairyledger.utils.currency import format_inr

__all__ = ["parse_date", "parse_month", "get_month_range", "parse_amount", "format_inr"]
