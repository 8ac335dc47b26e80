# src/entities/text_document.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DocumentSource(str, Enum):
    NEWS = "news"
    SOCIAL_FORUM = "social-forum"
    SOCIAL_STREAM = "social-stream"


@dataclass(frozen=True, slots=True)
class TextDocument:
    """
    Free-text document tagged with the source it was collected from.

    Invariants:
    - source_id is a DocumentSource (plain strings are coerced)
    - text is a string (can be empty but not None)
    - title, when provided, is a string; used only for relevance and dedup
    """

    source_id: DocumentSource
    text: str
    title: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.source_id, DocumentSource):
            try:
                source = DocumentSource(str(self.source_id).strip().lower())
            except ValueError as exc:
                raise ValueError(
                    f"Unknown document source: {self.source_id!r}"
                ) from exc
            object.__setattr__(self, "source_id", source)

        if not isinstance(self.text, str):
            raise TypeError("text must be a string")

        if self.title is not None and not isinstance(self.title, str):
            raise TypeError("title must be a string when provided")
