"""Application use cases package."""

from .get_matter_financial_summary import (
    GetMatterFinancialSummaryUseCase,
    MatterFinancialView,
)

__all__ = [
    "GetMatterFinancialSummaryUseCase",
    "MatterFinancialView",
]
