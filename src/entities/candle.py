# src/entities/candle.py
import math
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Candle:
    """
    Uma observação OHLCV de um período de negociação.

    Séries de candles são sempre consumidas em ordem temporal crescente;
    a ordenação é garantida pelo use case, não pela entidade.
    """

    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float

    def __post_init__(self):
        if not math.isfinite(self.close) or not math.isfinite(self.volume):
            raise ValueError("Close and volume must be finite numbers")

        if self.close <= 0:
            raise ValueError("Close price must be positive")

        if self.volume < 0:
            raise ValueError("Volume cannot be negative")
