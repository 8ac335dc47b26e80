# src/entities/indicator_set.py

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Optional


class EmaPeriod(IntEnum):
    EMA_9 = 9
    EMA_21 = 21
    EMA_34 = 34
    EMA_50 = 50
    EMA_100 = 100
    EMA_200 = 200


class TrendLabel(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class IndicatorSeries:
    """
    Latest scalar plus full history of one indicator.

    value is None exactly when the series is empty; otherwise it is
    the last element of the series.
    """

    value: Optional[float]
    series: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))

        if not self.series:
            if self.value is not None:
                raise ValueError("value must be None when series is empty")
            return

        last = self.series[-1]
        both_nan = (
            self.value is not None
            and math.isnan(self.value)
            and math.isnan(last)
        )
        if self.value != last and not both_nan:
            raise ValueError("value must equal the last element of series")

    @classmethod
    def from_values(cls, values) -> "IndicatorSeries":
        values = tuple(values)
        return cls(value=values[-1] if values else None, series=values)

    @classmethod
    def empty(cls) -> "IndicatorSeries":
        return cls(value=None, series=())

    def __len__(self) -> int:
        return len(self.series)


@dataclass(frozen=True)
class TrendAnnotation:
    label: TrendLabel
    polarity: int
    message: str


@dataclass(frozen=True)
class IndicatorSet:
    """
    Snapshot imutável dos indicadores técnicos de uma série de preços.

    Entidade de domínio:
    - Não conhece pandas nem a origem dos candles
    - Períodos de EMA são um conjunto fechado (EmaPeriod)
    """

    emas: Mapping[EmaPeriod, IndicatorSeries]
    macd: IndicatorSeries
    macd_signal: IndicatorSeries
    obv: IndicatorSeries
    trend_annotation: Optional[TrendAnnotation] = None
    asset_id: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        missing = set(EmaPeriod) - set(self.emas)
        if missing:
            raise ValueError(
                f"IndicatorSet is missing EMA periods: {sorted(int(p) for p in missing)}"
            )
        object.__setattr__(
            self,
            "emas",
            MappingProxyType({period: self.emas[period] for period in EmaPeriod}),
        )

    def ema(self, period: int) -> IndicatorSeries:
        return self.emas[EmaPeriod(period)]

    @property
    def is_empty(self) -> bool:
        return len(self.macd) == 0
