"""Application ports package."""

from .database import DatabaseEnginePort
from .matter_repository import MatterRepositoryPort, WidgetRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "MatterRepositoryPort",
    "WidgetRepositoryPort",
]
