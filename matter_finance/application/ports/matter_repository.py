"""Application ports for matter and widget record retrieval."""

from typing import Protocol

from matter_finance.domain.models import MatterRecord, WidgetTotals


class MatterRepositoryPort(Protocol):
    """Port exposing read access to matter records."""

    def fetch_matter(self, matter_id: str) -> MatterRecord | None:
        """Return the matter record, or None when it does not exist.

        Raises:
            RecordRetrievalError: If the backend cannot be read.
        """


class WidgetRepositoryPort(Protocol):
    """Port exposing read access to per-matter finance widget totals."""

    def fetch_widget_for_matter(self, matter_id: str) -> WidgetTotals | None:
        """Return the widget totals, or None when the matter has none.

        Raises:
            RecordRetrievalError: If the backend cannot be read.
        """


__all__ = ["MatterRepositoryPort", "WidgetRepositoryPort"]
