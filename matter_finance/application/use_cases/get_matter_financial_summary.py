"""Use case combining the matter and widget feeds into a billing summary."""

from dataclasses import dataclass

from matter_finance.application.ports.matter_repository import (
    MatterRepositoryPort,
    WidgetRepositoryPort,
)
from matter_finance.domain.errors import RecordRetrievalError
from matter_finance.domain.models import (
    FeedState,
    FinancialSummary,
    MatterRecord,
    WidgetTotals,
    combine_feed_states,
)
from matter_finance.domain.services import compute_financial_summary
from matter_finance.infrastructure.logging.logger import get_app_logger

MATTER_ERROR_PREFIX = "Error loading Matter: "
WIDGET_ERROR_PREFIX = "Error loading TS Finance Widget: "


@dataclass(frozen=True)
class MatterFinancialView:
    """Billing summary for a matter plus the state of both feeds.

    Attributes:
        matter_id: Matter the view was built for.
        account_id: Client account read from the matter record.
        summary: Projection of whatever records were available.
        matter_feed: State of the matter record feed.
        widget_feed: State of the widget totals feed.
    """

    matter_id: str | None
    account_id: str | None
    summary: FinancialSummary
    matter_feed: FeedState
    widget_feed: FeedState

    @property
    def is_loading(self) -> bool:
        return self.matter_feed.is_loading or self.widget_feed.is_loading

    @property
    def has_error(self) -> bool:
        return self.matter_feed.has_error or self.widget_feed.has_error

    @property
    def error_message(self) -> str:
        return combine_feed_states(
            self.matter_feed,
            self.widget_feed,
        ).error_message


class GetMatterFinancialSummaryUseCase:
    """Fetch both records for a matter and project the billing summary."""

    def __init__(
        self,
        matter_repository: MatterRepositoryPort,
        widget_repository: WidgetRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            matter_repository: Port providing matter records.
            widget_repository: Port providing widget totals.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._matter_repository = matter_repository
        self._widget_repository = widget_repository
        self._logger = logger or get_app_logger()

    def execute(self, matter_id: str | None) -> MatterFinancialView:
        """Return the billing view for a matter.

        A failed feed is reported in its state and its record is treated as
        absent; the summary is always computed.

        Args:
            matter_id: Identifier of the matter to summarize.

        Returns:
            MatterFinancialView: Summary and feed states.
        """
        if not matter_id or not matter_id.strip():
            return MatterFinancialView(
                matter_id=None,
                account_id=None,
                summary=compute_financial_summary(None, None),
                matter_feed=FeedState.idle(),
                widget_feed=FeedState.idle(),
            )
        matter_id = matter_id.strip()

        matter, matter_feed = self._load_matter(matter_id)
        widget, widget_feed = self._load_widget(matter_id)
        summary = compute_financial_summary(matter, widget, self._logger)

        self._logger.info(
            f"Matter summary computed: matter={matter_id}, "
            f"total_balance_due={summary.total_balance_due}, "
            f"show_banner={summary.show_banner}"
        )

        return MatterFinancialView(
            matter_id=matter_id,
            account_id=matter.account_id if matter else None,
            summary=summary,
            matter_feed=matter_feed,
            widget_feed=widget_feed,
        )

    def _load_matter(
        self,
        matter_id: str,
    ) -> tuple[MatterRecord | None, FeedState]:
        try:
            matter = self._matter_repository.fetch_matter(matter_id)
        except RecordRetrievalError as exc:
            message = f"{MATTER_ERROR_PREFIX}{exc}"
            self._logger.error(message)
            return None, FeedState.failed(message)
        if matter is None:
            self._logger.warning(f"No matter record found for {matter_id}")
        return matter, FeedState.ready()

    def _load_widget(
        self,
        matter_id: str,
    ) -> tuple[WidgetTotals | None, FeedState]:
        try:
            widget = self._widget_repository.fetch_widget_for_matter(matter_id)
        except RecordRetrievalError as exc:
            message = f"{WIDGET_ERROR_PREFIX}{exc}"
            self._logger.error(message)
            return None, FeedState.failed(message)
        if widget is None:
            self._logger.warning(f"No finance widget found for {matter_id}")
        return widget, FeedState.ready()


__all__ = [
    "GetMatterFinancialSummaryUseCase",
    "MatterFinancialView",
    "MATTER_ERROR_PREFIX",
    "WIDGET_ERROR_PREFIX",
]
