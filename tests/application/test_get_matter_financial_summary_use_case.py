"""Tests for the GetMatterFinancialSummaryUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from matter_finance.application.use_cases.get_matter_financial_summary import (
    GetMatterFinancialSummaryUseCase,
)
from matter_finance.domain.errors import RecordRetrievalError
from matter_finance.domain.models import (
    FeedStatus,
    MatterRecord,
    WidgetTotals,
)


class FakeMatterRepository:
    def __init__(self, matter=None, error: Exception | None = None) -> None:
        self._matter = matter
        self._error = error
        self.calls: list[str] = []

    def fetch_matter(self, matter_id: str):
        self.calls.append(matter_id)
        if self._error:
            raise self._error
        return self._matter


class FakeWidgetRepository:
    def __init__(self, widget=None, error: Exception | None = None) -> None:
        self._widget = widget
        self._error = error
        self.calls: list[str] = []

    def fetch_widget_for_matter(self, matter_id: str):
        self.calls.append(matter_id)
        if self._error:
            raise self._error
        return self._widget


def _matter() -> MatterRecord:
    return MatterRecord(
        matter_id="M-1",
        account_id="ACC-9",
        retainer_amount=Decimal("1000"),
    )


def _widget() -> WidgetTotals:
    return WidgetTotals(
        trust_balance=Decimal("200"),
        wip_fees=Decimal("300"),
        wip_expenses=Decimal("50"),
        worked_fees=Decimal("900"),
        worked_expenses=Decimal("100"),
    )


def test_execute_combines_both_feeds() -> None:
    """Both records should feed the projection and mark feeds ready."""
    use_case = GetMatterFinancialSummaryUseCase(
        FakeMatterRepository(_matter()),
        FakeWidgetRepository(_widget()),
        logger=MagicMock(),
    )

    view = use_case.execute("M-1")

    assert view.matter_id == "M-1"
    assert view.account_id == "ACC-9"
    assert view.summary.total_balance_due == Decimal("1150")
    assert view.summary.show_banner is True
    assert view.matter_feed.status is FeedStatus.READY
    assert view.widget_feed.status is FeedStatus.READY
    assert view.has_error is False
    assert view.is_loading is False
    assert view.error_message == ""


def test_execute_reports_matter_failure_and_uses_widget() -> None:
    """A failed matter feed should not block the widget totals."""
    logger = MagicMock()
    use_case = GetMatterFinancialSummaryUseCase(
        FakeMatterRepository(error=RecordRetrievalError("timeout")),
        FakeWidgetRepository(_widget()),
        logger=logger,
    )

    view = use_case.execute("M-1")

    assert view.has_error
    assert view.matter_feed.status is FeedStatus.ERROR
    assert view.widget_feed.status is FeedStatus.READY
    assert view.error_message == "Error loading Matter: timeout"
    assert view.account_id is None
    assert view.summary.retainer_amount == 0
    assert view.summary.wip == Decimal("350")
    assert view.summary.show_banner is False
    logger.error.assert_called_once_with("Error loading Matter: timeout")


def test_execute_reports_both_failures() -> None:
    """Both failures should be reported and the summary zeroed."""
    use_case = GetMatterFinancialSummaryUseCase(
        FakeMatterRepository(error=RecordRetrievalError("a")),
        FakeWidgetRepository(error=RecordRetrievalError("b")),
        logger=MagicMock(),
    )

    view = use_case.execute("M-1")

    assert view.error_message == (
        "Error loading Matter: a; Error loading TS Finance Widget: b"
    )
    assert view.summary.total_balance_due == 0
    assert view.summary.formatted_total_balance_due == "$0.00"


def test_execute_treats_missing_records_as_ready() -> None:
    """Records not found are not errors; the summary is zero-defaulted."""
    logger = MagicMock()
    use_case = GetMatterFinancialSummaryUseCase(
        FakeMatterRepository(None),
        FakeWidgetRepository(None),
        logger=logger,
    )

    view = use_case.execute("M-404")

    assert not view.has_error
    assert view.matter_feed.status is FeedStatus.READY
    assert view.summary.show_banner is False
    assert logger.warning.call_count == 2


def test_execute_with_blank_matter_id_skips_repositories() -> None:
    """No matter id means both feeds stay idle."""
    matters = FakeMatterRepository(_matter())
    widgets = FakeWidgetRepository(_widget())
    use_case = GetMatterFinancialSummaryUseCase(
        matters,
        widgets,
        logger=MagicMock(),
    )

    view = use_case.execute("  ")

    assert matters.calls == []
    assert widgets.calls == []
    assert view.matter_feed.status is FeedStatus.IDLE
    assert view.widget_feed.status is FeedStatus.IDLE
    assert view.summary.total_balance_due == 0


def test_execute_propagates_unexpected_errors() -> None:
    """Only retrieval errors are absorbed into feed state."""
    use_case = GetMatterFinancialSummaryUseCase(
        FakeMatterRepository(error=KeyError("bug")),
        FakeWidgetRepository(_widget()),
        logger=MagicMock(),
    )

    with pytest.raises(KeyError):
        use_case.execute("M-1")
