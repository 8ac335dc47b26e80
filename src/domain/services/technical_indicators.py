# src/domain/services/technical_indicators.py

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from src.entities.indicator_set import (
    EmaPeriod,
    IndicatorSeries,
    IndicatorSet,
    TrendAnnotation,
    TrendLabel,
)

MACD_FAST_PERIOD = 12
MACD_SLOW_PERIOD = 26
MACD_SIGNAL_PERIOD = 9

TREND_PERIODS: tuple[EmaPeriod, ...] = (
    EmaPeriod.EMA_9,
    EmaPeriod.EMA_21,
    EmaPeriod.EMA_34,
    EmaPeriod.EMA_50,
)

_TREND_MESSAGES = {
    TrendLabel.BULLISH: "Bullish trend: EMA values decreasing smoothly",
    TrendLabel.BEARISH: "Bearish trend: EMA values increasing smoothly",
    TrendLabel.NEUTRAL: "Neutral trend: EMAs are mixed, show caution",
}

_TREND_POLARITY = {
    TrendLabel.BULLISH: 1,
    TrendLabel.BEARISH: -1,
    TrendLabel.NEUTRAL: 0,
}


PriceInput = Union[Sequence[float], pd.Series]


def _as_series(values: PriceInput) -> pd.Series:
    return pd.Series(values, dtype="float64").reset_index(drop=True)


def ema_series(values: PriceInput, period: int) -> pd.Series:
    """
    Exponential moving average seeded with the first raw value.

    k = 2 / (period + 1)
    ema[0] = values[0]
    ema[i] = values[i] * k + ema[i-1] * (1 - k)

    That is `ewm(span=period, adjust=False)`: no SMA warm-up, so the
    output always has the length of the input, even when the series is
    shorter than the period.
    """
    if period < 1:
        raise ValueError("period must be >= 1")

    return _as_series(values).ewm(span=period, adjust=False).mean()


def ema(values: PriceInput, period: int) -> list[float]:
    return ema_series(values, period).tolist()


def macd_series(closes: PriceInput) -> tuple[pd.Series, pd.Series]:
    """
    (macd_line, signal_line). Both EMAs cover the full input, so tail
    alignment is a pointwise subtraction.
    """
    close = _as_series(closes)

    macd_line = ema_series(close, MACD_FAST_PERIOD) - ema_series(close, MACD_SLOW_PERIOD)
    signal_line = macd_line.ewm(span=MACD_SIGNAL_PERIOD, adjust=False).mean()

    return macd_line, signal_line


def macd_lines(closes: PriceInput) -> tuple[list[float], list[float]]:
    macd_line, signal_line = macd_series(closes)
    return macd_line.tolist(), signal_line.tolist()


def obv_series(closes: PriceInput, volumes: PriceInput) -> pd.Series:
    """
    Cumulative OBV starting at 0, one value per candle after the first.
    """
    close = _as_series(closes)
    volume = _as_series(volumes)

    if len(close) != len(volume):
        raise ValueError("closes and volumes must have the same length")

    # diff() of the first candle is NaN: it has no OBV entry
    signed_volume = np.sign(close.diff()) * volume
    return signed_volume.iloc[1:].cumsum()


def on_balance_volume(closes: PriceInput, volumes: PriceInput) -> list[float]:
    return obv_series(closes, volumes).tolist()


def trend_annotation(
    ema9: Optional[float],
    ema21: Optional[float],
    ema34: Optional[float],
    ema50: Optional[float],
) -> Optional[TrendAnnotation]:
    values = (ema9, ema21, ema34, ema50)
    if any(v is None for v in values):
        return None

    if ema9 > ema21 > ema34 > ema50:
        label = TrendLabel.BULLISH
    elif ema9 < ema21 < ema34 < ema50:
        label = TrendLabel.BEARISH
    else:
        label = TrendLabel.NEUTRAL

    return TrendAnnotation(
        label=label,
        polarity=_TREND_POLARITY[label],
        message=_TREND_MESSAGES[label],
    )


def build_indicator_set(
    closes: PriceInput,
    volumes: PriceInput,
    asset_id: Optional[str] = None,
) -> IndicatorSet:
    """
    Compute every supported indicator for one price series.

    Never raises for empty or short series: indicators that cannot be
    computed come back as empty IndicatorSeries (value None) and the
    trend annotation as None.
    """
    close = _as_series(closes)
    volume = _as_series(volumes)

    emas = {
        period: IndicatorSeries.from_values(ema_series(close, int(period)).tolist())
        for period in EmaPeriod
    }

    macd_line, signal_line = macd_series(close)

    annotation = trend_annotation(*(emas[p].value for p in TREND_PERIODS))

    return IndicatorSet(
        emas=emas,
        macd=IndicatorSeries.from_values(macd_line.tolist()),
        macd_signal=IndicatorSeries.from_values(signal_line.tolist()),
        obv=IndicatorSeries.from_values(obv_series(close, volume).tolist()),
        trend_annotation=annotation,
        asset_id=asset_id,
    )
