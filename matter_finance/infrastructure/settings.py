"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from matter_finance.infrastructure.logging.logger import get_app_logger
from matter_finance.utils.utils import get_project_root

SUPPORTED_BACKENDS = ("sqlalchemy", "json")


@dataclass(frozen=True)
class MatterFinanceSettings:
    """Settings for selecting the records backend.

    Attributes:
        backend: Backend identifier (sqlalchemy or json).
        json_file: Optional path to a JSON export of matter records.
    """

    backend: str = "sqlalchemy"
    json_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "MatterFinanceSettings":
        """Build settings from environment variables.

        Returns:
            MatterFinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = (
            os.getenv("MATTER_FINANCE_BACKEND", "sqlalchemy").strip().lower()
        )
        json_file = _resolve_json_file(
            os.getenv("MATTER_FINANCE_JSON_FILE"),
            get_app_logger(),
        )
        return cls(backend=backend, json_file=json_file)


def _resolve_json_file(raw_value: str | None, logger) -> Optional[Path]:
    """Resolve the JSON export from the environment value or data/.

    An explicit value may be a path or a ``file://`` URI. Without one, the
    only ``*.json`` file in ``data/`` is used; several files are ambiguous.
    """
    if raw_value:
        if urlparse(raw_value).scheme == "file":
            raw_value = unquote(urlparse(raw_value).path)
        path = Path(raw_value).expanduser().resolve()
        if not path.is_file():
            logger.warning(f"JSON export not found: {path}")
        return path

    candidates = sorted((get_project_root() / "data").glob("*.json"))
    if len(candidates) > 1:
        logger.warning(
            f"{len(candidates)} JSON exports in data/; "
            "set MATTER_FINANCE_JSON_FILE to pick one"
        )
    return candidates[0].resolve() if len(candidates) == 1 else None


__all__ = ["MatterFinanceSettings", "SUPPORTED_BACKENDS"]
