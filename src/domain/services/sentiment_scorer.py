# src/domain/services/sentiment_scorer.py

from __future__ import annotations

from typing import Mapping, Optional

from src.domain.services.sentiment_lexicon import NEGATIVE_LEXICON, POSITIVE_LEXICON
from src.entities.scored_document import (
    ScoredDocument,
    SentimentBucket,
    SentimentLabel,
)
from src.entities.text_document import TextDocument

STRONG_THRESHOLD = 3
MODERATE_THRESHOLD = 1


def score_text(
    text: Optional[str],
    positive: Mapping[str, int] = POSITIVE_LEXICON,
    negative: Mapping[str, int] = NEGATIVE_LEXICON,
) -> int:
    """
    Sum the weight of every lexicon phrase contained in the text.

    Matching is case-insensitive substring containment, so "up" also
    matches inside "upgrade" and both weights count. Every matching
    entry contributes once, regardless of how many times it occurs.
    """
    if not text:
        return 0

    lowered = text.lower()
    score = 0

    for phrase, weight in positive.items():
        if phrase in lowered:
            score += weight

    for phrase, weight in negative.items():
        if phrase in lowered:
            score += weight

    return score


def classify_score(score: float) -> SentimentLabel:
    if score > 0:
        return SentimentLabel.BULLISH
    if score < 0:
        return SentimentLabel.BEARISH
    return SentimentLabel.NEUTRAL


def bucket_for_score(score: float) -> SentimentBucket:
    # first match wins; bands are disjoint over the integers
    if score >= STRONG_THRESHOLD:
        return SentimentBucket.STRONG_BULLISH
    if score >= MODERATE_THRESHOLD:
        return SentimentBucket.MODERATE_BULLISH
    if score <= -STRONG_THRESHOLD:
        return SentimentBucket.STRONG_BEARISH
    if score <= -MODERATE_THRESHOLD:
        return SentimentBucket.MODERATE_BEARISH
    return SentimentBucket.NEUTRAL


def score_document(document: TextDocument) -> ScoredDocument:
    score = score_text(document.text)
    return ScoredDocument(
        document=document,
        score=score,
        label=classify_score(score),
        bucket=bucket_for_score(score),
    )
