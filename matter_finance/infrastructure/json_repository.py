"""Repositories reading matter records from a JSON export.

The export is a single document of the form::

    {
        "matters": [{"id": ..., "account_id": ..., "retainer_amount": ...}],
        "widgets": [{"matter_id": ..., "trust_balance": ...,
                     "total_wip_fees": ..., "total_wip_expenses": ...,
                     "total_fees": ..., "total_expenses": ...}]
    }
"""

import json
from pathlib import Path

from matter_finance.application.ports.matter_repository import (
    MatterRepositoryPort,
    WidgetRepositoryPort,
)
from matter_finance.domain.errors import RecordRetrievalError
from matter_finance.domain.models import MatterRecord, WidgetTotals


def _load_export(path: Path) -> dict:
    """Read and validate the JSON export.

    Args:
        path: Location of the export file.

    Returns:
        dict: Parsed document.

    Raises:
        RecordRetrievalError: If the file is missing or not a JSON object.
    """
    try:
        with path.open(encoding="utf-8") as handle:
            document = json.load(handle)
    except OSError as exc:
        raise RecordRetrievalError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RecordRetrievalError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(document, dict):
        raise RecordRetrievalError(f"Expected a JSON object in {path}")
    return document


def _find_row(rows, key: str, matter_id: str) -> dict | None:
    for row in rows or []:
        if isinstance(row, dict) and str(row.get(key)) == matter_id:
            return row
    return None


class JsonMatterRepository(MatterRepositoryPort):
    """Repository reading matter records from a JSON export."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def fetch_matter(self, matter_id: str) -> MatterRecord | None:
        document = _load_export(self._path)
        row = _find_row(document.get("matters"), "id", matter_id)
        if row is None:
            return None
        return MatterRecord(
            matter_id=str(row.get("id")),
            account_id=row.get("account_id"),
            retainer_amount=row.get("retainer_amount"),
        )


class JsonWidgetRepository(WidgetRepositoryPort):
    """Repository reading finance widget totals from a JSON export."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def fetch_widget_for_matter(self, matter_id: str) -> WidgetTotals | None:
        document = _load_export(self._path)
        row = _find_row(document.get("widgets"), "matter_id", matter_id)
        if row is None:
            return None
        return WidgetTotals(
            trust_balance=row.get("trust_balance"),
            wip_fees=row.get("total_wip_fees"),
            wip_expenses=row.get("total_wip_expenses"),
            worked_fees=row.get("total_fees"),
            worked_expenses=row.get("total_expenses"),
        )


__all__ = ["JsonMatterRepository", "JsonWidgetRepository"]
