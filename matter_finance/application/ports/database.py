"""Database ports for the matter finance widget.

This module defines the application-layer protocol for accessing the records
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine for the matter records database."""

    def get_records_engine(self) -> Engine:
        """Get the engine for the records database.

        Returns:
            Engine: SQLAlchemy engine connected to the records backend.
        """


__all__ = ["DatabaseEnginePort"]
