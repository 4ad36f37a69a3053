"""Tests for the matter_summary_cli adapter."""

import json
from decimal import Decimal

from matter_finance.adapters import matter_summary_cli
from matter_finance.application.use_cases.get_matter_financial_summary import (
    MatterFinancialView,
)
from matter_finance.domain.models import (
    FeedState,
    MatterRecord,
    WidgetTotals,
)
from matter_finance.domain.services import compute_financial_summary


class _Logger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def error(self, msg: str) -> None:
        self.messages.append(msg)

    def info(self, msg: str) -> None:
        self.messages.append(msg)


def _view(matter_feed: FeedState | None = None) -> MatterFinancialView:
    summary = compute_financial_summary(
        MatterRecord(retainer_amount=1000),
        WidgetTotals(
            trust_balance=200,
            wip_fees=300,
            wip_expenses=50,
            worked_fees=900,
            worked_expenses=100,
        ),
    )
    return MatterFinancialView(
        matter_id="M-1",
        account_id="ACC-9",
        summary=summary,
        matter_feed=matter_feed or FeedState.ready(),
        widget_feed=FeedState.ready(),
    )


def _patch(monkeypatch, view: MatterFinancialView) -> _Logger:
    logger = _Logger()

    class _FakeUseCase:
        def execute(self, matter_id):
            assert matter_id == "M-1"
            return view

    monkeypatch.setattr(
        matter_summary_cli,
        "build_summary_use_case",
        lambda: _FakeUseCase(),
    )
    monkeypatch.setattr(
        matter_summary_cli,
        "get_app_logger",
        lambda: logger,
    )
    return logger


def test_main_prints_text_summary(monkeypatch, capsys) -> None:
    """The CLI should print each figure and the banner line."""
    _patch(monkeypatch, _view())

    exit_code = matter_summary_cli.main(["M-1"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "account=ACC-9" in captured.out
    assert "WIP:               $350.00" in captured.out
    assert "Total Balance Due: $1,150.00" in captured.out
    assert "Total potential amount due: $1,150.00" in captured.out


def test_main_prints_json(monkeypatch, capsys) -> None:
    _patch(monkeypatch, _view())

    matter_summary_cli.main(["M-1", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["matter_id"] == "M-1"
    assert Decimal(payload["billed"]) == Decimal("650")
    assert payload["formatted_retainer_shortfall"] == "$800.00"
    assert payload["show_banner"] is True
    assert payload["has_error"] is False


def test_main_reports_feed_errors(monkeypatch, capsys) -> None:
    """Feed failures go to stderr and the log, with exit status 1."""
    logger = _patch(
        monkeypatch,
        _view(FeedState.failed("Error loading Matter: boom")),
    )

    exit_code = matter_summary_cli.main(["M-1"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Error loading Matter: boom" in captured.err
    assert logger.messages == ["Error loading Matter: boom"]
