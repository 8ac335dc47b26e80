# src/domain/services/momentum_interpreter.py

from __future__ import annotations

from typing import Optional, Sequence

from src.entities.indicator_set import IndicatorSet
from src.entities.ticker_analysis import MacdCrossover, MomentumSignals, ObvTrend

DEFAULT_OBV_LOOKBACK = 10
OBV_FLAT_BAND_PCT = 2.0


def macd_crossover(
    macd: Optional[float],
    signal: Optional[float],
) -> Optional[MacdCrossover]:
    if macd is None or signal is None:
        return None

    diff = macd - signal
    if diff > 0:
        return MacdCrossover.BULLISH
    if diff < 0:
        return MacdCrossover.BEARISH
    return MacdCrossover.NEUTRAL


def obv_pct_change(
    history: Sequence[float],
    lookback: int = DEFAULT_OBV_LOOKBACK,
) -> Optional[float]:
    """
    Percent change of OBV over the last `lookback` periods.

    Uses the first value as reference when the history is shorter than
    the lookback. Undefined (None) for empty history or a zero reference.
    """
    if not history:
        return None

    current = history[-1]
    prior = history[-(lookback + 1)] if len(history) > lookback else history[0]

    if prior == 0:
        return None

    return (current - prior) / abs(prior) * 100


def obv_trend(pct_change: Optional[float]) -> Optional[ObvTrend]:
    if pct_change is None:
        return None
    if pct_change > OBV_FLAT_BAND_PCT:
        return ObvTrend.RISING
    if pct_change < -OBV_FLAT_BAND_PCT:
        return ObvTrend.FALLING
    return ObvTrend.FLAT


def interpret_momentum(
    indicators: IndicatorSet,
    obv_lookback: int = DEFAULT_OBV_LOOKBACK,
) -> MomentumSignals:
    macd = indicators.macd.value
    signal = indicators.macd_signal.value
    pct = obv_pct_change(indicators.obv.series, obv_lookback)

    return MomentumSignals(
        macd_crossover=macd_crossover(macd, signal),
        macd_difference=macd - signal if macd is not None and signal is not None else None,
        obv_trend=obv_trend(pct),
        obv_pct_change=pct,
        obv_lookback=obv_lookback,
    )
