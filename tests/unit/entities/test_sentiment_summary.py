# tests/unit/entities/test_sentiment_summary.py

import pytest

from src.entities.scored_document import SentimentBucket
from src.entities.sentiment_summary import SourceSentimentSummary
from src.entities.text_document import DocumentSource


def _summary(**overrides) -> SourceSentimentSummary:
    values = dict(
        source_id=DocumentSource.NEWS,
        count=3,
        bullish_count=2,
        bearish_count=1,
        neutral_count=0,
        average_score=1.0,
        bucket_distribution={
            SentimentBucket.STRONG_BULLISH: 1,
            SentimentBucket.MODERATE_BULLISH: 1,
            SentimentBucket.MODERATE_BEARISH: 1,
        },
    )
    values.update(overrides)
    return SourceSentimentSummary(**values)


def test_summary_fills_missing_buckets_with_zero():
    summary = _summary()

    assert list(summary.bucket_distribution) == list(SentimentBucket)
    assert summary.bucket_distribution[SentimentBucket.NEUTRAL] == 0
    assert summary.bucket_distribution[SentimentBucket.STRONG_BEARISH] == 0


def test_summary_rejects_tallies_not_matching_count():
    with pytest.raises(ValueError):
        _summary(neutral_count=1)


def test_summary_rejects_distribution_not_matching_count():
    with pytest.raises(ValueError):
        _summary(bucket_distribution={SentimentBucket.NEUTRAL: 3})


def test_summary_rejects_bullish_buckets_not_matching_bullish_count():
    with pytest.raises(ValueError):
        _summary(
            bucket_distribution={
                SentimentBucket.STRONG_BULLISH: 1,
                SentimentBucket.MODERATE_BEARISH: 2,
            }
        )


def test_summary_rejects_neutral_bucket_not_matching_neutral_count():
    with pytest.raises(ValueError):
        _summary(
            bucket_distribution={
                SentimentBucket.STRONG_BULLISH: 2,
                SentimentBucket.NEUTRAL: 1,
            }
        )


def test_summary_rejects_bearish_buckets_not_matching_bearish_count():
    with pytest.raises(ValueError):
        _summary(
            bullish_count=1,
            bearish_count=2,
            bucket_distribution={
                SentimentBucket.STRONG_BULLISH: 2,
                SentimentBucket.STRONG_BEARISH: 1,
            },
        )


def test_summary_accepts_consistent_tallies_and_buckets():
    summary = _summary(
        count=4,
        neutral_count=1,
        bucket_distribution={
            SentimentBucket.STRONG_BULLISH: 1,
            SentimentBucket.MODERATE_BULLISH: 1,
            SentimentBucket.NEUTRAL: 1,
            SentimentBucket.STRONG_BEARISH: 1,
        },
    )

    assert summary.bucket_distribution[SentimentBucket.STRONG_BEARISH] == 1
