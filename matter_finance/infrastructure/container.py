"""Composition root for wiring infrastructure adapters."""

from matter_finance.application.ports.database import DatabaseEnginePort
from matter_finance.application.use_cases.get_matter_financial_summary import (
    GetMatterFinancialSummaryUseCase,
)
from matter_finance.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from matter_finance.infrastructure.logging.logger import get_app_logger
from matter_finance.infrastructure.repository_factory import (
    create_repositories,
)
from matter_finance.infrastructure.settings import MatterFinanceSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: MatterFinanceSettings | None = None,
) -> GetMatterFinancialSummaryUseCase:
    """Return the summary use case wired to the configured backend."""
    resolved_db = db_port or build_database_adapter()
    logger = get_app_logger()
    matter_repository, widget_repository = create_repositories(
        resolved_db,
        logger=logger,
        settings=settings,
    )
    return GetMatterFinancialSummaryUseCase(
        matter_repository=matter_repository,
        widget_repository=widget_repository,
        logger=logger,
    )


__all__ = ["build_database_adapter", "build_summary_use_case"]
