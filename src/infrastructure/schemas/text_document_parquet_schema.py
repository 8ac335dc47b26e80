# src/infrastructure/schemas/text_document_parquet_schema.py

from __future__ import annotations

from typing import Dict, List

# ordered: parquet column order is part of the contract
TEXT_DOCUMENT_PARQUET_COLUMNS: List[str] = [
    "source_id",
    "title",
    "text",
]

TEXT_DOCUMENT_PARQUET_DTYPES: Dict[str, str] = {
    "source_id": "string",
    "title": "string",
    "text": "string",
}
