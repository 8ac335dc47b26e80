# src/entities/ticker_analysis.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.entities.indicator_set import IndicatorSet
from src.entities.sentiment_summary import SentimentReport


class MacdCrossover(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class ObvTrend(str, Enum):
    RISING = "rising"
    FALLING = "falling"
    FLAT = "flat"


@dataclass(frozen=True)
class PricePerformance:
    first_close: Optional[float] = None
    latest_close: Optional[float] = None
    period_high: Optional[float] = None
    period_low: Optional[float] = None
    growth_pct: Optional[float] = None


@dataclass(frozen=True)
class MomentumSignals:
    macd_crossover: Optional[MacdCrossover] = None
    macd_difference: Optional[float] = None
    obv_trend: Optional[ObvTrend] = None
    obv_pct_change: Optional[float] = None
    obv_lookback: int = 10


@dataclass(frozen=True)
class TickerAnalysis:
    """
    Resultado consolidado de uma análise: indicadores + sentimento.

    Criado a cada execução e descartado; nada aqui é persistido
    pelo domínio.
    """

    ticker: str
    candle_count: int
    indicators: IndicatorSet
    price_performance: PricePerformance
    momentum: MomentumSignals
    sentiment: SentimentReport
