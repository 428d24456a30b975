from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from config_loader import get_section

DEFAULT_CATALOG = "data/products.csv"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _resolve_config_path(workspace: Optional[str], value: Optional[str], default_relative: str) -> str:
    base = Path(workspace or ".")
    candidate = Path(value) if value else Path(default_relative)
    if candidate.is_absolute():
        return str(candidate.resolve())
    return str((base / candidate).resolve())


@dataclass
class CatalogConfig:
    path: str
    encoding: str = "utf-8"

    def __post_init__(self):
        if not self.encoding:
            raise ValueError("catalog.encoding cannot be empty")


@dataclass
class LogsConfig:
    log_level: str = "INFO"
    # Optional file receiving a copy of all log records.
    log_file: Optional[str] = None

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"logs.log_level must be one of: {', '.join(LOG_LEVELS)}")

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


@dataclass
class SearchConfig:
    catalog: CatalogConfig
    logs: LogsConfig

    @classmethod
    def from_app_config(cls, config: Dict[str, Any]) -> "SearchConfig":
        workspace = config.get("workspace")
        catalog_section = get_section(config, "catalog")
        logs_section = get_section(config, "logs")

        catalog_cfg = CatalogConfig(
            path=_resolve_config_path(workspace, catalog_section.get("path"), DEFAULT_CATALOG),
            encoding=catalog_section.get("encoding") or "utf-8",
        )

        raw_log_file = logs_section.get("log_file")
        log_file = _resolve_config_path(workspace, raw_log_file, "") if raw_log_file else None
        logs_cfg = LogsConfig(
            log_level=logs_section.get("log_level") or "INFO",
            log_file=log_file,
        )

        return cls(catalog=catalog_cfg, logs=logs_cfg)
