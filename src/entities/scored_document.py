# src/entities/scored_document.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.entities.text_document import TextDocument


class SentimentLabel(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class SentimentBucket(str, Enum):
    # Ordem de declaração = ordem de exibição nos gráficos de distribuição
    STRONG_BULLISH = "strongBullish"
    MODERATE_BULLISH = "moderateBullish"
    NEUTRAL = "neutral"
    MODERATE_BEARISH = "moderateBearish"
    STRONG_BEARISH = "strongBearish"


@dataclass(frozen=True, slots=True)
class ScoredDocument:
    """
    A TextDocument paired with its lexicon score and derived classes.
    """

    document: TextDocument
    score: int
    label: SentimentLabel
    bucket: SentimentBucket

    def __post_init__(self) -> None:
        if isinstance(self.score, bool) or not isinstance(self.score, int):
            raise TypeError("score must be an integer")
