# src/domain/services/price_performance.py

from __future__ import annotations

from typing import Sequence

from src.entities.candle import Candle
from src.entities.ticker_analysis import PricePerformance


def compute_price_performance(candles: Sequence[Candle]) -> PricePerformance:
    """
    Desempenho do período coberto pela série (ex: YTD quando a série
    começa no primeiro pregão do ano).

    Série vazia -> todos os campos None.
    """
    if not candles:
        return PricePerformance()

    first_close = candles[0].close
    latest_close = candles[-1].close

    growth_pct = None
    if first_close:
        growth_pct = (latest_close - first_close) / first_close * 100

    return PricePerformance(
        first_close=first_close,
        latest_close=latest_close,
        period_high=max(c.high for c in candles),
        period_low=min(c.low for c in candles),
        growth_pct=growth_pct,
    )
