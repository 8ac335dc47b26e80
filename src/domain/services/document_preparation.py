# src/domain/services/document_preparation.py

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from src.entities.text_document import DocumentSource, TextDocument

DEFAULT_FORUM_POST_LIMIT = 10


def _document_key(document: TextDocument) -> str:
    return document.title if document.title is not None else document.text


def is_relevant_news(
    document: TextDocument,
    ticker: str,
    company_aliases: Sequence[str] = (),
) -> bool:
    """
    A headline is relevant when it mentions the ticker or one of the
    company names associated with it (case-insensitive).
    """
    headline = _document_key(document).lower()
    if ticker.lower() in headline:
        return True
    return any(alias.lower() in headline for alias in company_aliases if alias)


def dedupe_by_title(documents: Iterable[TextDocument]) -> list[TextDocument]:
    seen: set[str] = set()
    unique: list[TextDocument] = []

    for document in documents:
        key = _document_key(document)
        if key in seen:
            continue
        seen.add(key)
        unique.append(document)

    return unique


def prepare_documents(
    documents: Iterable[TextDocument],
    ticker: str,
    company_aliases: Mapping[str, Sequence[str]] | None = None,
    forum_post_limit: int = DEFAULT_FORUM_POST_LIMIT,
) -> list[TextDocument]:
    """
    Seleciona o lote de documentos que entra no pipeline de sentimento.

    - news: apenas manchetes que citam o ticker ou o nome da empresa
    - social-forum: dedup por título (mantém o primeiro) e corte em
      forum_post_limit
    - social-stream: sem filtro

    A ordem relativa dentro de cada fonte é preservada.
    """
    aliases = (company_aliases or {}).get(ticker.upper(), ())

    news: list[TextDocument] = []
    forum: list[TextDocument] = []
    stream: list[TextDocument] = []

    for document in documents:
        if document.source_id == DocumentSource.NEWS:
            if is_relevant_news(document, ticker, aliases):
                news.append(document)
        elif document.source_id == DocumentSource.SOCIAL_FORUM:
            forum.append(document)
        else:
            stream.append(document)

    forum = dedupe_by_title(forum)[: max(forum_post_limit, 0)]

    return news + forum + stream
