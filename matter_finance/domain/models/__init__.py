"""Domain models package."""

from .feed_state import FeedState, FeedStatus, combine_feed_states
from .finance import TRUST_VS_WIP_LABEL, FinancialSummary
from .matter import MatterRecord, WidgetTotals

__all__ = [
    "FeedState",
    "FeedStatus",
    "combine_feed_states",
    "FinancialSummary",
    "TRUST_VS_WIP_LABEL",
    "MatterRecord",
    "WidgetTotals",
]
