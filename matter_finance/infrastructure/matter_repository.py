"""SQLAlchemy-backed repositories for matter and widget records."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from matter_finance.application.ports.database import DatabaseEnginePort
from matter_finance.application.ports.matter_repository import (
    MatterRepositoryPort,
    WidgetRepositoryPort,
)
from matter_finance.domain.errors import RecordRetrievalError
from matter_finance.domain.models import MatterRecord, WidgetTotals

_MATTER_QUERY = text(
    """
    SELECT id, account_id, retainer_amount
    FROM matters
    WHERE id = :matter_id
    LIMIT 1
    """
)

_WIDGET_QUERY = text(
    """
    SELECT trust_balance,
           total_wip_fees,
           total_wip_expenses,
           total_fees,
           total_expenses
    FROM ts_finance_widgets
    WHERE matter_id = :matter_id
    ORDER BY updated_at DESC
    LIMIT 1
    """
)


class SqlAlchemyMatterRepository(MatterRepositoryPort):
    """Repository reading matter records with SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the records engine.
        """
        self._db_port = db_port

    def fetch_matter(self, matter_id: str) -> MatterRecord | None:
        try:
            engine = self._db_port.get_records_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    _MATTER_QUERY,
                    {"matter_id": matter_id},
                ).first()
        except SQLAlchemyError as exc:
            raise RecordRetrievalError(str(exc)) from exc
        if row is None:
            return None
        return MatterRecord(
            matter_id=row.id,
            account_id=row.account_id,
            retainer_amount=row.retainer_amount,
        )


class SqlAlchemyWidgetRepository(WidgetRepositoryPort):
    """Repository reading the latest finance widget row for a matter."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_widget_for_matter(self, matter_id: str) -> WidgetTotals | None:
        try:
            engine = self._db_port.get_records_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    _WIDGET_QUERY,
                    {"matter_id": matter_id},
                ).first()
        except SQLAlchemyError as exc:
            raise RecordRetrievalError(str(exc)) from exc
        if row is None:
            return None
        return WidgetTotals(
            trust_balance=row.trust_balance,
            wip_fees=row.total_wip_fees,
            wip_expenses=row.total_wip_expenses,
            worked_fees=row.total_fees,
            worked_expenses=row.total_expenses,
        )


__all__ = ["SqlAlchemyMatterRepository", "SqlAlchemyWidgetRepository"]
