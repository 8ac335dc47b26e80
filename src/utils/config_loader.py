# src/utils/config_loader.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.domain.services.document_preparation import DEFAULT_FORUM_POST_LIMIT
from src.domain.services.momentum_interpreter import DEFAULT_OBV_LOOKBACK

logger = logging.getLogger(__name__)

DEFAULT_ANALYSIS_CONFIG_FILE = Path("config") / "data_sources.yaml"


@dataclass(frozen=True)
class AnalysisConfig:
    company_aliases: dict[str, tuple[str, ...]] = field(default_factory=dict)
    forum_post_limit: int = DEFAULT_FORUM_POST_LIMIT
    obv_lookback: int = DEFAULT_OBV_LOOKBACK

    def __post_init__(self) -> None:
        if self.forum_post_limit < 0:
            raise ValueError("forum_post_limit must be >= 0")
        if self.obv_lookback < 1:
            raise ValueError("obv_lookback must be >= 1")


def _parse_assets(assets: list[dict[str, Any]]) -> dict[str, tuple[str, ...]]:
    aliases: dict[str, tuple[str, ...]] = {}
    for asset in assets:
        symbol = str(asset.get("symbol", "")).strip().upper()
        if not symbol:
            raise ValueError("Every asset entry must declare a symbol")
        names = asset.get("company_names") or []
        aliases[symbol] = tuple(str(n).strip().lower() for n in names if str(n).strip())
    return aliases


def load_analysis_config(
    config_path: str | Path = DEFAULT_ANALYSIS_CONFIG_FILE,
) -> AnalysisConfig:
    """
    Load config/data_sources.yaml.

    A missing file falls back to defaults (no aliases) so ad-hoc tickers
    can still be analyzed.
    """
    path = Path(config_path)
    if not path.exists():
        logger.warning(
            "Analysis config not found, using defaults",
            extra={"path": str(path)},
        )
        return AnalysisConfig()

    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    sentiment_cfg = config.get("sentiment", {}) or {}
    indicators_cfg = config.get("indicators", {}) or {}

    return AnalysisConfig(
        company_aliases=_parse_assets(config.get("assets", []) or []),
        forum_post_limit=int(
            sentiment_cfg.get("forum_post_limit", DEFAULT_FORUM_POST_LIMIT)
        ),
        obv_lookback=int(indicators_cfg.get("obv_lookback", DEFAULT_OBV_LOOKBACK)),
    )
