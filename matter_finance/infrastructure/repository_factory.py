"""Factory helpers to select the matter records backend."""

from matter_finance.application.ports.database import DatabaseEnginePort
from matter_finance.application.ports.matter_repository import (
    MatterRepositoryPort,
    WidgetRepositoryPort,
)
from matter_finance.infrastructure.json_repository import (
    JsonMatterRepository,
    JsonWidgetRepository,
)
from matter_finance.infrastructure.logging.logger import get_app_logger
from matter_finance.infrastructure.matter_repository import (
    SqlAlchemyMatterRepository,
    SqlAlchemyWidgetRepository,
)
from matter_finance.infrastructure.settings import (
    SUPPORTED_BACKENDS,
    MatterFinanceSettings,
)


def create_repositories(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: MatterFinanceSettings | None = None,
) -> tuple[MatterRepositoryPort, WidgetRepositoryPort]:
    """Return matter and widget repositories based on configuration.

    Args:
        db_port: Port providing access to the records engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from the environment
            when omitted.

    Returns:
        tuple[MatterRepositoryPort, WidgetRepositoryPort]: Concrete
        repositories for both feeds.

    Raises:
        RuntimeError: If the JSON backend is selected without a file.
        ValueError: If the backend is not supported.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or MatterFinanceSettings.from_env()
    backend = resolved_settings.backend

    if backend == "sqlalchemy":
        return (
            SqlAlchemyMatterRepository(db_port),
            SqlAlchemyWidgetRepository(db_port),
        )

    if backend == "json":
        if resolved_settings.json_file is None:
            resolved_logger.warning(
                "Missing JSON export path; set MATTER_FINANCE_JSON_FILE "
                "to enable the backend"
            )
            raise RuntimeError(
                "JSON backend requires a MATTER_FINANCE_JSON_FILE path."
            )
        return (
            JsonMatterRepository(resolved_settings.json_file),
            JsonWidgetRepository(resolved_settings.json_file),
        )

    raise ValueError(
        f"Unsupported records backend: {backend}. "
        f"Expected one of {', '.join(SUPPORTED_BACKENDS)}."
    )


__all__ = ["create_repositories"]
