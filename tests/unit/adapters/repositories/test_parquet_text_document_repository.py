# tests/unit/adapters/repositories/test_parquet_text_document_repository.py

from pathlib import Path

import pandas as pd
import pytest

from src.adapters.parquet_text_document_repository import ParquetTextDocumentRepository
from src.entities.text_document import DocumentSource, TextDocument


@pytest.fixture
def repo(tmp_path: Path) -> ParquetTextDocumentRepository:
    return ParquetTextDocumentRepository(output_dir=tmp_path / "documents")


def test_repository_creates_missing_directory(tmp_path: Path):
    ParquetTextDocumentRepository(output_dir=tmp_path / "new")

    assert (tmp_path / "new").is_dir()


def test_repository_raises_if_path_is_not_directory(tmp_path: Path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("not a dir")

    with pytest.raises(NotADirectoryError):
        ParquetTextDocumentRepository(output_dir=file_path)


def test_save_and_load_preserves_documents(repo):
    documents = [
        TextDocument(source_id=DocumentSource.NEWS, title="Apple beats", text="Apple beats"),
        TextDocument(source_id=DocumentSource.SOCIAL_FORUM, title="AAPL?", text="AAPL? thoughts"),
        TextDocument(source_id=DocumentSource.SOCIAL_STREAM, text="$AAPL bullish"),
    ]

    repo.save_documents("aapl", documents)

    assert repo.load_documents("AAPL") == documents


def test_load_missing_file_returns_empty_batch(repo):
    assert repo.load_documents("MSFT") == []


def test_load_without_title_column(repo, tmp_path):
    filepath = tmp_path / "documents" / "TSLA" / "documents_TSLA.parquet"
    filepath.parent.mkdir(parents=True)
    pd.DataFrame({"source_id": ["news"], "text": ["Tesla deliveries jump"]}).to_parquet(
        filepath, index=False
    )

    loaded = repo.load_documents("TSLA")

    assert loaded == [
        TextDocument(source_id=DocumentSource.NEWS, text="Tesla deliveries jump")
    ]


def test_load_raises_if_schema_is_invalid(repo, tmp_path):
    filepath = tmp_path / "documents" / "TSLA" / "documents_TSLA.parquet"
    filepath.parent.mkdir(parents=True)
    pd.DataFrame({"body": ["missing source and text"]}).to_parquet(filepath, index=False)

    with pytest.raises(ValueError):
        repo.load_documents("TSLA")
