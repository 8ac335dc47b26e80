# src/adapters/technical_indicator_calculator.py
import logging
from typing import Iterable

import pandas as pd

from src.domain.services.technical_indicators import build_indicator_set
from src.entities.candle import Candle
from src.entities.indicator_set import IndicatorSet
from src.interfaces.technical_indicator_calculator import TechnicalIndicatorCalculatorPort

logger = logging.getLogger(__name__)


class TechnicalIndicatorCalculator(TechnicalIndicatorCalculatorPort):
    """
    Adapter Candle -> DataFrame -> IndicatorSet.

    Frames and orders the candles; the domain service runs the
    ewm/cumsum computations directly on the close/volume Series.
    """

    def calculate(
        self,
        asset_id: str,
        candles: Iterable[Candle],
    ) -> IndicatorSet:
        # 1. Converter para DataFrame (infra detail)
        df = pd.DataFrame(
            [
                {
                    "timestamp": c.timestamp,
                    "close": c.close,
                    "volume": c.volume,
                }
                for c in candles
            ],
            columns=["timestamp", "close", "volume"],
        )

        if df.empty:
            logger.info(
                "No candles to compute indicators",
                extra={"asset_id": asset_id},
            )
            return build_indicator_set([], [], asset_id=asset_id)

        df = df.sort_values("timestamp", kind="stable").reset_index(drop=True)

        # 2. Indicadores técnicos
        indicators = build_indicator_set(
            df["close"].astype("float64"),
            df["volume"].astype("float64"),
            asset_id=asset_id,
        )

        logger.info(
            "Technical indicators computed",
            extra={
                "asset_id": asset_id,
                "rows": len(df),
                "trend": indicators.trend_annotation.label.value
                if indicators.trend_annotation
                else None,
            },
        )

        return indicators
