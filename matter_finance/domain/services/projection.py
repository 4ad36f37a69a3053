"""Pure projection of matter records into billing summary figures."""

from decimal import Decimal

from matter_finance.domain.models import (
    FinancialSummary,
    MatterRecord,
    WidgetTotals,
)
from matter_finance.utils.decimal_utils import default_zero

_ZERO = Decimal("0")


def compute_financial_summary(
    matter: MatterRecord | None,
    widget: WidgetTotals | None,
    logger=None,
) -> FinancialSummary:
    """Compute the billing summary for a matter.

    Either record may be missing, for instance while its feed is still
    loading or after it failed; missing records count as all-zero inputs.

    Args:
        matter: Matter record carrying the retainer amount.
        widget: Trust balance and time-keeping totals for the matter.
        logger: Optional logger used for a debug trace of the inputs.

    Returns:
        FinancialSummary: Derived figures and banner visibility.
    """
    matter = matter or MatterRecord()
    widget = widget or WidgetTotals()

    retainer_amount = default_zero(matter.retainer_amount)
    trust_balance = default_zero(widget.trust_balance)
    wip_fees = default_zero(widget.wip_fees)
    wip_expenses = default_zero(widget.wip_expenses)
    worked_fees = default_zero(widget.worked_fees)
    worked_expenses = default_zero(widget.worked_expenses)

    wip = wip_fees + wip_expenses
    worked = worked_fees + worked_expenses
    # Negative billed is a valid outcome and is shown as such.
    billed = worked - wip
    charges_to_cover_now = wip
    retainer_shortfall = max(retainer_amount - trust_balance, _ZERO)
    total_balance_due = charges_to_cover_now + retainer_shortfall
    show_banner = trust_balance < retainer_amount and wip > 0

    if logger is not None:
        logger.debug(
            f"Projected matter={matter.matter_id}: trust={trust_balance}, "
            f"retainer={retainer_amount}, wip={wip}, worked={worked}, "
            f"total_due={total_balance_due}"
        )

    return FinancialSummary(
        trust_balance=trust_balance,
        retainer_amount=retainer_amount,
        wip=wip,
        worked=worked,
        billed=billed,
        charges_to_cover_now=charges_to_cover_now,
        retainer_shortfall=retainer_shortfall,
        total_balance_due=total_balance_due,
        show_banner=show_banner,
    )


__all__ = ["compute_financial_summary"]
