# src/interfaces/text_document_repository.py

from __future__ import annotations

from abc import ABC, abstractmethod

from src.entities.text_document import TextDocument


class TextDocumentRepository(ABC):
    @abstractmethod
    def load_documents(self, asset_id: str) -> list[TextDocument]:
        """All documents collected for the asset, in collection order."""
        ...

    @abstractmethod
    def save_documents(self, asset_id: str, documents: list[TextDocument]) -> None:
        """Overwrite the document batch persisted for the asset."""
        ...
