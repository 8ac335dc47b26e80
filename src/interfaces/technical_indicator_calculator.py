# src/interfaces/technical_indicator_calculator.py
from abc import ABC, abstractmethod
from typing import Iterable

from src.entities.candle import Candle
from src.entities.indicator_set import IndicatorSet


class TechnicalIndicatorCalculatorPort(ABC):
    @abstractmethod
    def calculate(
        self,
        asset_id: str,
        candles: Iterable[Candle],
    ) -> IndicatorSet:
        """
        Calcula indicadores técnicos a partir de candles.

        Nunca falha para séries vazias ou curtas: indicadores
        não calculáveis retornam vazios.
        """
        ...
