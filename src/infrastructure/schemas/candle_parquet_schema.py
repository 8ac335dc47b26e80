# src/infrastructure/schemas/candle_parquet_schema.py

CANDLE_PARQUET_COLUMNS = {
    "timestamp",
    "open",
    "high",
    "low",
    "close",
    "volume",
}

# float64: indicator parity depends on full-precision closes
CANDLE_PARQUET_DTYPES = {
    "open": "float64",
    "high": "float64",
    "low": "float64",
    "close": "float64",
    "volume": "float64",
}
