# src/utils/logging_config.py
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Atributos que todo LogRecord já carrega; o resto veio de extra={...}
_RESERVED_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """
    Appends the structured `extra={...}` fields to the formatted line:
    `... | message | asset_id=AAPL count=60`
    """

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {k: v for k, v in vars(record).items() if k not in _RESERVED_KEYS}
        if not extras:
            return base
        return base + " | " + " ".join(f"{k}={v}" for k, v in sorted(extras.items()))


def _level_from_env(default: int) -> int:
    name = os.getenv("LOG_LEVEL")
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = "analysis.log",
) -> None:
    """
    Console (stdout) + optional file under $LOG_DIR (default ./logs).

    LOG_LEVEL in the environment overrides `level`. Calling it again only
    adjusts the level, handlers are never duplicated.
    """
    root = logging.getLogger()
    root.setLevel(_level_from_env(level))

    if root.handlers:
        return

    formatter = ExtraFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file is None:
        return

    log_dir = Path(os.getenv("LOG_DIR") or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_dir / log_file, encoding="utf-8")
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
