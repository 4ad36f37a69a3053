"""Tests for the FinancialSummary model."""

from decimal import Decimal

from matter_finance.domain.models import (
    TRUST_VS_WIP_LABEL,
    FinancialSummary,
)


def _summary(**overrides) -> FinancialSummary:
    values = {
        "trust_balance": Decimal("200"),
        "retainer_amount": Decimal("1000"),
        "wip": Decimal("350"),
        "worked": Decimal("1000"),
        "billed": Decimal("650"),
        "charges_to_cover_now": Decimal("350"),
        "retainer_shortfall": Decimal("800"),
        "total_balance_due": Decimal("1150"),
        "show_banner": True,
    }
    values.update(overrides)
    return FinancialSummary(**values)


def test_trust_vs_wip_always_reports_total_balance_due() -> None:
    """The summary box shows the total balance due, never a credit."""
    summary = _summary()

    assert summary.trust_vs_wip_label == "Total Balance Due"
    assert summary.trust_vs_wip_label == TRUST_VS_WIP_LABEL
    assert summary.formatted_trust_vs_wip == "$1,150.00"


def test_formatted_properties() -> None:
    """Formatted properties render each amount as dollars."""
    summary = _summary(billed=Decimal("-50"))

    assert summary.formatted_trust_balance == "$200.00"
    assert summary.formatted_retainer_amount == "$1,000.00"
    assert summary.formatted_wip == "$350.00"
    assert summary.formatted_worked == "$1,000.00"
    assert summary.formatted_billed == "-$50.00"
    assert summary.formatted_pay_to_maintain_retainer == "$800.00"


def test_as_dict_exposes_raw_and_formatted_fields() -> None:
    """as_dict should carry every raw field with its formatted twin."""
    payload = _summary().as_dict()

    assert payload["wip"] == Decimal("350")
    assert payload["formatted_wip"] == "$350.00"
    assert payload["pay_to_maintain_retainer"] == Decimal("800")
    assert payload["formatted_total_balance_due"] == "$1,150.00"
    assert payload["trust_vs_wip_label"] == "Total Balance Due"
    assert payload["show_banner"] is True
