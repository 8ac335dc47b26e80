# tests/unit/domain/services/test_price_performance.py

from datetime import datetime, timedelta, timezone

import pytest

from src.domain.services.price_performance import compute_price_performance
from src.entities.candle import Candle
from src.entities.ticker_analysis import PricePerformance


def _candles(closes, highs, lows):
    base = datetime(2025, 1, 2, tzinfo=timezone.utc)
    return [
        Candle(
            timestamp=base + timedelta(days=i),
            open=c,
            high=h,
            low=l,
            close=c,
            volume=1000,
        )
        for i, (c, h, l) in enumerate(zip(closes, highs, lows))
    ]


def test_price_performance_over_period():
    candles = _candles([10.0, 12.0, 15.0], [11.0, 13.0, 16.0], [9.0, 11.0, 14.0])

    perf = compute_price_performance(candles)

    assert perf.first_close == 10.0
    assert perf.latest_close == 15.0
    assert perf.period_high == 16.0
    assert perf.period_low == 9.0
    assert perf.growth_pct == pytest.approx(50.0)


def test_price_performance_negative_growth():
    candles = _candles([20.0, 15.0], [21.0, 16.0], [19.0, 14.0])

    assert compute_price_performance(candles).growth_pct == pytest.approx(-25.0)


def test_price_performance_empty_series():
    assert compute_price_performance([]) == PricePerformance()
