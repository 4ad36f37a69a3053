"""Domain package for billing rules and core models."""

from .errors import RecordRetrievalError
from .models import (
    TRUST_VS_WIP_LABEL,
    FeedState,
    FeedStatus,
    FinancialSummary,
    MatterRecord,
    WidgetTotals,
    combine_feed_states,
)
from .services import compute_financial_summary, format_currency

__all__ = [
    "RecordRetrievalError",
    "TRUST_VS_WIP_LABEL",
    "FeedState",
    "FeedStatus",
    "FinancialSummary",
    "MatterRecord",
    "WidgetTotals",
    "combine_feed_states",
    "compute_financial_summary",
    "format_currency",
]
