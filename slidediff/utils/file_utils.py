"""File I/O helpers for configuration and diff output."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from slidediff.schemas.config_schema import DiffConfig

logger = logging.getLogger(__name__)


def ensure_directory(path: str | Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_config(path: Optional[str | Path] = None) -> DiffConfig:
    """Load a DiffConfig from YAML, or the defaults when no path is given."""
    if path is None:
        return DiffConfig()
    logger.debug(f"Loading config from {path}")
    return DiffConfig.from_yaml(path)


def save_model_json(model: BaseModel, path: str | Path, indent: int = 2) -> None:
    """Write a pydantic model to a JSON file, creating parent directories."""
    path = Path(path)
    ensure_directory(path.parent)
    path.write_text(model.model_dump_json(indent=indent), encoding="utf-8")
