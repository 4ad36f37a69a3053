"""Domain models for the matter billing summary."""

from dataclasses import dataclass
from decimal import Decimal

from matter_finance.utils.currency_utils import format_currency

TRUST_VS_WIP_LABEL = "Total Balance Due"


@dataclass(frozen=True)
class FinancialSummary:
    """Derived billing figures for a single matter.

    Attributes:
        trust_balance: Client funds held in trust.
        retainer_amount: Target trust balance for the client.
        wip: Fees plus expenses recorded but not yet billed.
        worked: Fees plus expenses recorded to date.
        billed: Worked minus WIP; negative when WIP exceeds worked totals.
        charges_to_cover_now: Amount needed to cover the current WIP.
        retainer_shortfall: Amount needed to top trust back up to the
            retainer, never negative.
        total_balance_due: Charges to cover now plus the retainer shortfall.
        show_banner: Whether the potential amount due banner is shown.
    """

    trust_balance: Decimal
    retainer_amount: Decimal
    wip: Decimal
    worked: Decimal
    billed: Decimal
    charges_to_cover_now: Decimal
    retainer_shortfall: Decimal
    total_balance_due: Decimal
    show_banner: bool

    @property
    def pay_to_maintain_retainer(self) -> Decimal:
        return self.retainer_shortfall

    @property
    def trust_vs_wip_label(self) -> str:
        return TRUST_VS_WIP_LABEL

    @property
    def formatted_trust_balance(self) -> str:
        return format_currency(self.trust_balance)

    @property
    def formatted_retainer_amount(self) -> str:
        return format_currency(self.retainer_amount)

    @property
    def formatted_wip(self) -> str:
        return format_currency(self.wip)

    @property
    def formatted_worked(self) -> str:
        return format_currency(self.worked)

    @property
    def formatted_billed(self) -> str:
        return format_currency(self.billed)

    @property
    def formatted_charges_to_cover_now(self) -> str:
        return format_currency(self.charges_to_cover_now)

    @property
    def formatted_retainer_shortfall(self) -> str:
        return format_currency(self.retainer_shortfall)

    @property
    def formatted_pay_to_maintain_retainer(self) -> str:
        return format_currency(self.pay_to_maintain_retainer)

    @property
    def formatted_total_balance_due(self) -> str:
        return format_currency(self.total_balance_due)

    @property
    def formatted_trust_vs_wip(self) -> str:
        return format_currency(self.total_balance_due)

    def as_dict(self) -> dict[str, str | Decimal | bool]:
        """Return raw and formatted fields keyed by name.

        Returns:
            dict[str, str | Decimal | bool]: Flat mapping for presentation
            layers, with formatted values under ``formatted_<name>`` keys.
        """
        amounts = {
            "trust_balance": self.trust_balance,
            "retainer_amount": self.retainer_amount,
            "wip": self.wip,
            "worked": self.worked,
            "billed": self.billed,
            "charges_to_cover_now": self.charges_to_cover_now,
            "retainer_shortfall": self.retainer_shortfall,
            "pay_to_maintain_retainer": self.pay_to_maintain_retainer,
            "total_balance_due": self.total_balance_due,
        }
        payload: dict[str, str | Decimal | bool] = dict(amounts)
        for name, amount in amounts.items():
            payload[f"formatted_{name}"] = format_currency(amount)
        payload["trust_vs_wip_label"] = self.trust_vs_wip_label
        payload["formatted_trust_vs_wip"] = self.formatted_trust_vs_wip
        payload["show_banner"] = self.show_banner
        return payload


__all__ = ["FinancialSummary", "TRUST_VS_WIP_LABEL"]
