"""Domain services package."""

from matter_finance.utils.currency_utils import format_currency

from .projection import compute_financial_summary

__all__ = ["compute_financial_summary", "format_currency"]
