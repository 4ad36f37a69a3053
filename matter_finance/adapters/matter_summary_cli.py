"""CLI adapter printing the billing summary for a matter.

This module wires the GetMatterFinancialSummaryUseCase to the configured
records backend and prints either a readable summary or JSON.
"""

import argparse
import json
import sys

from matter_finance.application.use_cases.get_matter_financial_summary import (
    MatterFinancialView,
)
from matter_finance.infrastructure.container import build_summary_use_case
from matter_finance.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matter-summary",
        description="Print the trust, WIP and balance due summary for a matter.",
    )
    parser.add_argument("matter_id", help="Identifier of the matter record.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print raw and formatted fields as JSON.",
    )
    return parser


def _render_text(view: MatterFinancialView) -> str:
    """Render the view as aligned text lines."""
    summary = view.summary
    lines = [
        f"Matter {view.matter_id} (account={view.account_id or '-'})",
        f"Trust Balance:     {summary.formatted_trust_balance}",
        f"Retainer:          {summary.formatted_retainer_amount}",
        f"WIP:               {summary.formatted_wip}",
        f"Worked:            {summary.formatted_worked}",
        f"Billed:            {summary.formatted_billed}",
        f"Pay to Maintain:   {summary.formatted_pay_to_maintain_retainer}",
        f"{summary.trust_vs_wip_label}: {summary.formatted_trust_vs_wip}",
    ]
    if summary.show_banner:
        lines.append(
            "Total potential amount due: "
            f"{summary.formatted_total_balance_due}"
        )
    return "\n".join(lines)


def _render_json(view: MatterFinancialView) -> str:
    payload = {
        "matter_id": view.matter_id,
        "account_id": view.account_id,
        "has_error": view.has_error,
        "error_message": view.error_message,
        **view.summary.as_dict(),
    }
    return json.dumps(payload, default=str, indent=2)


def main(argv: list[str] | None = None) -> int:
    """Run the summary use case for one matter.

    Args:
        argv: Optional argument list; defaults to ``sys.argv[1:]``.

    Returns:
        int: 1 when a feed failed, else 0.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    use_case = build_summary_use_case()

    view = use_case.execute(args.matter_id)

    if view.has_error:
        logger.error(view.error_message)
        print(view.error_message, file=sys.stderr)
    print(_render_json(view) if args.json else _render_text(view))
    return 1 if view.has_error else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
