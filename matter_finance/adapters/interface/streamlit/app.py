"""Streamlit matter finance widget entry point."""

import streamlit as st
import altair as alt

from matter_finance.application.use_cases.get_matter_financial_summary import (
    MatterFinancialView,
)
from matter_finance.domain.models import FinancialSummary
from matter_finance.infrastructure.container import build_summary_use_case
from matter_finance.infrastructure.logging.logger import get_usage_logger


def _fetch_matter_view(matter_id: str) -> MatterFinancialView:
    """Fetch both records for a matter and project the summary."""
    use_case = build_summary_use_case()
    return use_case.execute(matter_id)


@st.cache_data(show_spinner=False, ttl=60)
def _load_matter_view(matter_id: str) -> MatterFinancialView:
    """Cached wrapper around _fetch_matter_view for Streamlit sessions."""
    return _fetch_matter_view(matter_id)


def _prepare_breakdown_chart_data(
    summary: FinancialSummary,
) -> list[dict[str, str | float]]:
    """Split the total balance due into its two components.

    Args:
        summary: Projected billing summary.

    Returns:
        list[dict[str, str | float]]: Altair-ready rows, empty when nothing
        is due.
    """
    if summary.total_balance_due == 0:
        return []
    return [
        {
            "component": "Charges to cover now",
            "amount": float(summary.charges_to_cover_now),
            "amount_label": summary.formatted_charges_to_cover_now,
        },
        {
            "component": "Pay to maintain retainer",
            "amount": float(summary.pay_to_maintain_retainer),
            "amount_label": summary.formatted_pay_to_maintain_retainer,
        },
    ]


def _render_breakdown_chart(summary: FinancialSummary) -> None:
    """Render a stacked bar of the total balance due."""
    data = _prepare_breakdown_chart_data(summary)
    if not data:
        st.info("Nothing is currently due on this matter.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=4,
    ).encode(
        x=alt.X("sum(amount):Q", title=None),
        color=alt.Color(
            "component:N",
            scale=alt.Scale(range=["#e76f51", "#457b9d"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("component:N"),
            alt.Tooltip("amount_label:N"),
        ],
    ).properties(height=80)
    st.altair_chart(chart, width="stretch")


def _render_summary(view: MatterFinancialView) -> None:
    """Render the summary boxes, banner and action bar."""
    summary = view.summary

    if summary.show_banner:
        st.warning(
            "Total potential amount due: "
            f"{summary.formatted_total_balance_due}"
        )

    trust_col, wip_col, worked_col, billed_col = st.columns(4)
    trust_col.metric("Trust Balance", summary.formatted_trust_balance)
    wip_col.metric("WIP", summary.formatted_wip)
    worked_col.metric("Worked", summary.formatted_worked)
    billed_col.metric("Billed", summary.formatted_billed)

    retainer_col, maintain_col, due_col = st.columns(3)
    retainer_col.metric("Retainer", summary.formatted_retainer_amount)
    maintain_col.metric(
        "Pay to Maintain Retainer",
        summary.formatted_pay_to_maintain_retainer,
    )
    due_col.metric(
        summary.trust_vs_wip_label,
        summary.formatted_trust_vs_wip,
    )

    _render_breakdown_chart(summary)
    st.caption(f"Account: {view.account_id or '—'}")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Matter Finance", layout="wide")
    st.title("Matter Finance")

    matter_id = st.sidebar.text_input(
        "Matter ID",
        value=st.query_params.get("matter_id", ""),
    ).strip()
    if not matter_id:
        st.info("Enter a matter ID to load its billing summary.")
        return

    get_usage_logger().info(f"Matter summary viewed: matter={matter_id}")
    with st.spinner("Loading matter finances..."):
        view = _load_matter_view(matter_id)

    if view.has_error:
        # Failed feeds are retried on the next rerun.
        _load_matter_view.clear()
        st.error(view.error_message)
    _render_summary(view)


if __name__ == "__main__":  # pragma: no cover
    main()
