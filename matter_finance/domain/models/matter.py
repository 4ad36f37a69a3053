"""Domain models for the records feeding the billing summary."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MatterRecord:
    """Matter record carrying the retainer target.

    Attributes:
        matter_id: Identifier of the matter.
        account_id: Client account the matter belongs to.
        retainer_amount: Target trust balance for the client.
    """

    matter_id: str | None = None
    account_id: str | None = None
    retainer_amount: Decimal | float | int | str | None = None


@dataclass(frozen=True)
class WidgetTotals:
    """Time-keeping totals and trust balance summarized for a matter."""

    trust_balance: Decimal | float | int | str | None = None
    wip_fees: Decimal | float | int | str | None = None
    wip_expenses: Decimal | float | int | str | None = None
    worked_fees: Decimal | float | int | str | None = None
    worked_expenses: Decimal | float | int | str | None = None


__all__ = ["MatterRecord", "WidgetTotals"]
