# src/entities/sentiment_summary.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from src.entities.scored_document import ScoredDocument, SentimentBucket
from src.entities.text_document import DocumentSource


class VerdictLabel(str, Enum):
    STRONGLY_BULLISH = "strongly bullish"
    MILDLY_BULLISH = "mildly bullish"
    NEUTRAL = "neutral"
    MILDLY_BEARISH = "mildly bearish"
    STRONGLY_BEARISH = "strongly bearish"


@dataclass(frozen=True)
class SourceSentimentSummary:
    """
    Estatísticas de sentimento de uma única fonte.

    Invariantes:
    - bullish + bearish + neutral == count
    - soma da distribuição por bucket == count
    - buckets bullish (strong + moderate) == bullish_count, idem bearish;
      bucket neutral == neutral_count
    - average_score == 0.0 quando count == 0 (convenção, não erro)
    """

    source_id: DocumentSource
    count: int
    bullish_count: int
    bearish_count: int
    neutral_count: int
    average_score: float
    bucket_distribution: Mapping[SentimentBucket, int]

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must be >= 0")

        if self.bullish_count + self.bearish_count + self.neutral_count != self.count:
            raise ValueError("bullish/bearish/neutral tallies must sum to count")

        distribution = {
            bucket: int(self.bucket_distribution.get(bucket, 0))
            for bucket in SentimentBucket
        }
        if sum(distribution.values()) != self.count:
            raise ValueError("bucket distribution must sum to count")

        bullish_buckets = (
            distribution[SentimentBucket.STRONG_BULLISH]
            + distribution[SentimentBucket.MODERATE_BULLISH]
        )
        bearish_buckets = (
            distribution[SentimentBucket.STRONG_BEARISH]
            + distribution[SentimentBucket.MODERATE_BEARISH]
        )
        if bullish_buckets != self.bullish_count:
            raise ValueError("bullish buckets must match bullish_count")
        if distribution[SentimentBucket.NEUTRAL] != self.neutral_count:
            raise ValueError("neutral bucket must match neutral_count")
        if bearish_buckets != self.bearish_count:
            raise ValueError("bearish buckets must match bearish_count")

        object.__setattr__(self, "bucket_distribution", MappingProxyType(distribution))


@dataclass(frozen=True)
class CombinedSentimentVerdict:
    score: float
    label: VerdictLabel
    total_documents: int


@dataclass(frozen=True)
class SentimentReport:
    summaries: Mapping[DocumentSource, SourceSentimentSummary]
    documents: tuple[ScoredDocument, ...]
    verdict: CombinedSentimentVerdict

    def __post_init__(self) -> None:
        object.__setattr__(self, "summaries", MappingProxyType(dict(self.summaries)))
        object.__setattr__(self, "documents", tuple(self.documents))

    def summary_for(self, source: DocumentSource) -> SourceSentimentSummary:
        return self.summaries[DocumentSource(source)]
