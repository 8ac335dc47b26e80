# src/adapters/parquet_text_document_repository.py

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from src.entities.text_document import TextDocument
from src.infrastructure.schemas.text_document_parquet_schema import (
    TEXT_DOCUMENT_PARQUET_COLUMNS,
    TEXT_DOCUMENT_PARQUET_DTYPES,
)
from src.interfaces.text_document_repository import TextDocumentRepository

logger = logging.getLogger(__name__)


class ParquetTextDocumentRepository(TextDocumentRepository):
    """
    Parquet-based repository for TextDocument batches.

    Storage layout:
      data/raw/documents/AAPL/documents_AAPL.parquet

    A missing file means "no documents collected" and loads as an empty
    batch; sentiment then resolves to neutral instead of failing.
    """

    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = Path(output_dir)

        # Fail fast: path exists but is not a directory
        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise NotADirectoryError(
                f"Documents output_dir is not a directory: {self.output_dir.resolve()}"
            )

        self.output_dir.mkdir(parents=True, exist_ok=True)

        logger.info(
            "ParquetTextDocumentRepository initialized",
            extra={"output_dir": str(self.output_dir.resolve())},
        )

    @staticmethod
    def _normalize_symbol(asset_id: str) -> str:
        return asset_id.split(".")[0].upper()

    def _filepath(self, asset_id: str) -> Path:
        symbol = self._normalize_symbol(asset_id)
        return self.output_dir / symbol / f"documents_{symbol}.parquet"

    def load_documents(self, asset_id: str) -> list[TextDocument]:
        filepath = self._filepath(asset_id)

        if not filepath.exists():
            logger.warning(
                "No documents file found, using empty batch",
                extra={"asset_id": asset_id, "path": str(filepath)},
            )
            return []

        df = pd.read_parquet(filepath)

        missing = {"source_id", "text"} - set(df.columns)
        if missing:
            raise ValueError(
                f"Invalid documents parquet schema for {asset_id}. "
                f"Missing columns: {sorted(missing)}. "
                f"File: {filepath.resolve()}"
            )

        if "title" not in df.columns:
            df["title"] = None

        documents = [
            TextDocument(
                source_id=row.source_id,
                text="" if pd.isna(row.text) else str(row.text),
                title=None if pd.isna(row.title) else str(row.title),
            )
            for row in df.itertuples(index=False)
        ]

        logger.info(
            "Documents loaded",
            extra={"asset_id": asset_id, "count": len(documents)},
        )

        return documents

    def save_documents(self, asset_id: str, documents: list[TextDocument]) -> None:
        filepath = self._filepath(asset_id)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame(
            [
                {
                    "source_id": d.source_id.value,
                    "title": d.title,
                    "text": d.text,
                }
                for d in documents
            ],
            columns=TEXT_DOCUMENT_PARQUET_COLUMNS,
        )
        df = df.astype(TEXT_DOCUMENT_PARQUET_DTYPES)

        df.to_parquet(filepath, index=False)

        logger.info(
            "Documents saved",
            extra={
                "asset_id": self._normalize_symbol(asset_id),
                "count": len(df),
                "path": str(filepath.resolve()),
            },
        )
