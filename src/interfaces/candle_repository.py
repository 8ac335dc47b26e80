# src/interfaces/candle_repository.py
from abc import ABC, abstractmethod

from src.entities.candle import Candle


class CandleRepository(ABC):
    """
    Porta de leitura/escrita da série diária de candles de um ativo.

    A análise só consome closes e volumes, mas o contrato trafega o
    Candle completo para que high/low alimentem o desempenho do período.
    """

    @abstractmethod
    def load_candles(self, asset_id: str) -> list[Candle]:
        """
        Série do ativo, mais antiga primeiro, com timestamps em UTC.

        Raises:
            FileNotFoundError: ativo sem série persistida
            ValueError: colunas obrigatórias ausentes
        """
        ...

    @abstractmethod
    def save_candles(self, asset_id: str, candles: list[Candle]) -> None:
        """
        Substitui a série inteira do ativo (sem merge incremental).

        Raises:
            ValueError: lista vazia
        """
        ...
