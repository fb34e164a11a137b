"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from sis.domain.exceptions import ValidationError
from sis.domain.service.stock_aggregator import (
    DEFAULT_EXPIRY_THRESHOLD_DAYS,
    DEFAULT_LOW_STOCK_THRESHOLD,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    expiry_threshold_days: int = DEFAULT_EXPIRY_THRESHOLD_DAYS
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    log_level: str = "WARNING"
    seed_demo: bool = False

    @property
    def inventory_file(self) -> Path:
        return self.data_dir / "inventory.json"

    @staticmethod
    def from_env() -> Settings:
        data_dir = os.getenv("SIS_DATA_DIR")
        return Settings(
            data_dir=Path(data_dir).expanduser() if data_dir else _DEFAULT_DATA_DIR,
            expiry_threshold_days=_int_env(
                "SIS_EXPIRY_THRESHOLD_DAYS", DEFAULT_EXPIRY_THRESHOLD_DAYS
            ),
            low_stock_threshold=_int_env(
                "SIS_LOW_STOCK_THRESHOLD", DEFAULT_LOW_STOCK_THRESHOLD
            ),
            log_level=_log_level_env("SIS_LOG_LEVEL", "WARNING"),
            seed_demo=_bool_env("SIS_SEED_DEMO"),
        )


def _log_level_env(name: str, default: str) -> str:
    level = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValidationError(f"{name} must be a logging level name, got {level!r}")
    return level


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError(f"{name} must be an integer, got {raw!r}") from exc


def _bool_env(name: str) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if raw in ("", "0", "false", "no", "off"):
        return False
    if raw in ("1", "true", "yes", "on"):
        return True
    raise ValidationError(f"{name} must be a boolean flag, got {raw!r}")
