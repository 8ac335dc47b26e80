# src/adapters/parquet_candle_repository.py

from pathlib import Path
import logging

import pandas as pd

from src.entities.candle import Candle
from src.interfaces.candle_repository import CandleRepository

from src.infrastructure.schemas.candle_parquet_schema import (
    CANDLE_PARQUET_COLUMNS,
    CANDLE_PARQUET_DTYPES,
)

logger = logging.getLogger(__name__)


class ParquetCandleRepository(CandleRepository):
    """
    Repository adapter for Candle persistence using Parquet files.

    Storage layout:
      data/raw/candles/AAPL/candles_AAPL_1d.parquet

    Current behavior:
    - Overwrites existing candle files
    - Integer timestamps are read as epoch milliseconds
    - All timestamps come back timezone-aware (UTC)
    """

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir)

        if not self.output_dir.exists():
            raise FileNotFoundError(
                f"Candle directory does not exist: {self.output_dir.resolve()}\n"
                "Check data_paths.yaml or environment configuration."
            )

        if not self.output_dir.is_dir():
            raise NotADirectoryError(
                f"Candle path is not a directory: {self.output_dir.resolve()}"
            )

        logger.info(
            "ParquetCandleRepository initialized",
            extra={"output_dir": str(self.output_dir.resolve())},
        )

    @staticmethod
    def _normalize_symbol(asset_id: str) -> str:
        return asset_id.split(".")[0].upper()

    def _filepath(self, asset_id: str) -> Path:
        clean_symbol = self._normalize_symbol(asset_id)
        return self.output_dir / clean_symbol / f"candles_{clean_symbol}_1d.parquet"

    @staticmethod
    def _parse_timestamps(values: pd.Series) -> pd.Series:
        if pd.api.types.is_integer_dtype(values):
            return pd.to_datetime(values, unit="ms", utc=True)
        return pd.to_datetime(values, utc=True, errors="raise")

    def load_candles(self, asset_id: str) -> list[Candle]:
        filepath = self._filepath(asset_id)

        if not filepath.exists():
            raise FileNotFoundError(
                f"No candle file found for {asset_id}\n"
                f"Expected path: {filepath.resolve()}"
            )

        logger.info(
            "Loading candles from parquet",
            extra={"asset_id": asset_id, "path": str(filepath)},
        )

        df = pd.read_parquet(filepath)

        missing = CANDLE_PARQUET_COLUMNS - set(df.columns)
        if missing:
            raise ValueError(
                f"Invalid candle parquet schema for {asset_id}. "
                f"Missing columns: {sorted(missing)}. "
                f"File: {filepath.resolve()}"
            )

        df["timestamp"] = self._parse_timestamps(df["timestamp"])
        df = df.astype(CANDLE_PARQUET_DTYPES)
        df = df.sort_values("timestamp").reset_index(drop=True)

        candles = [
            Candle(
                timestamp=row.timestamp.to_pydatetime(),
                open=float(row.open),
                high=float(row.high),
                low=float(row.low),
                close=float(row.close),
                volume=float(row.volume),
            )
            for row in df.itertuples(index=False)
        ]

        logger.info(
            "Candles loaded successfully",
            extra={"asset_id": asset_id, "count": len(candles)},
        )

        return candles

    def save_candles(self, asset_id: str, candles: list[Candle]) -> None:
        if not candles:
            raise ValueError("No candles to save")

        filepath = self._filepath(asset_id)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame(
            [
                {
                    "timestamp": c.timestamp,
                    "open": c.open,
                    "high": c.high,
                    "low": c.low,
                    "close": c.close,
                    "volume": c.volume,
                }
                for c in candles
            ]
        )

        df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
        df = df.astype(CANDLE_PARQUET_DTYPES)
        df = df.sort_values("timestamp").reset_index(drop=True)

        df.to_parquet(filepath, index=False)

        logger.info(
            "Candles saved successfully",
            extra={
                "asset_id": asset_id,
                "count": len(candles),
                "path": str(filepath),
            },
        )
