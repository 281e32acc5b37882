"""Utility functions for erpledger."""

from erpledger.utils.date_parser import parse_date, parse_month
from erpledger.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_month", "parse_amount"]
