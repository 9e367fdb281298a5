"""Configuration dataclasses for the Academic Request Tracker."""

import os
from dataclasses import dataclass, field

from src.ingest.column_mapper import ColumnMapping


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass
class AppConfig:
    """Top-level application configuration."""
    csv_url: str = field(default_factory=lambda: os.environ.get("SHEET_CSV_URL", "").strip())
    request_timeout: float = field(default_factory=lambda: _env_float("SHEET_CSV_TIMEOUT", 30.0))
    columns: ColumnMapping = field(default_factory=ColumnMapping)

    # Name of the env var, used in the missing-config message
    url_env_var: str = "SHEET_CSV_URL"

    @property
    def has_source(self) -> bool:
        return bool(self.csv_url)
