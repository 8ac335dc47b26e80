# tests/unit/domain/services/test_sentiment_scorer.py

import pytest

from src.domain.services.sentiment_lexicon import NEGATIVE_LEXICON, POSITIVE_LEXICON
from src.domain.services.sentiment_scorer import (
    bucket_for_score,
    classify_score,
    score_document,
    score_text,
)
from src.entities.scored_document import SentimentBucket, SentimentLabel
from src.entities.text_document import DocumentSource, TextDocument


def test_lexicons_are_disjoint_and_weights_in_range():
    assert not set(POSITIVE_LEXICON) & set(NEGATIVE_LEXICON)
    assert all(1 <= w <= 3 for w in POSITIVE_LEXICON.values())
    assert all(-3 <= w <= -1 for w in NEGATIVE_LEXICON.values())


def test_lexicons_are_read_only():
    with pytest.raises(TypeError):
        POSITIVE_LEXICON["moon"] = 3  # type: ignore[index]


def test_score_text_sums_every_matching_phrase():
    # surge (+3) + record high (+3) + strong (+2) + beat (+2)
    score = score_text("Stock surges on record high after strong beat")

    assert score >= 10
    assert score == 10


def test_score_text_without_matches_is_zero():
    assert score_text("Quarterly report scheduled for Thursday") == 0


@pytest.mark.parametrize("text", ["", None])
def test_score_text_empty_input_is_zero(text):
    assert score_text(text) == 0


def test_score_text_is_case_insensitive():
    assert score_text("BULLISH") == score_text("bullish") == 2


def test_score_text_matches_substrings_inside_words():
    # "upgrade" (+2) also contains "up" (+1)
    assert score_text("Analyst upgrade") == 3


def test_score_text_opposite_matches_cancel():
    assert score_text("gain and loss") == 0


def test_score_text_counts_each_phrase_once():
    assert score_text("gain gain gain") == 1


def test_score_text_negative_phrases():
    # crash (-3) + sell-off (-2) + sell (-1)
    assert score_text("Crash and sell-off") == -6


@pytest.mark.parametrize(
    "score, label",
    [
        (4, SentimentLabel.BULLISH),
        (1, SentimentLabel.BULLISH),
        (0, SentimentLabel.NEUTRAL),
        (-1, SentimentLabel.BEARISH),
        (-7, SentimentLabel.BEARISH),
    ],
)
def test_classify_score_uses_sign_only(score, label):
    assert classify_score(score) == label


@pytest.mark.parametrize(
    "score, bucket",
    [
        (10, SentimentBucket.STRONG_BULLISH),
        (3, SentimentBucket.STRONG_BULLISH),
        (2, SentimentBucket.MODERATE_BULLISH),
        (1, SentimentBucket.MODERATE_BULLISH),
        (0, SentimentBucket.NEUTRAL),
        (-1, SentimentBucket.MODERATE_BEARISH),
        (-2, SentimentBucket.MODERATE_BEARISH),
        (-3, SentimentBucket.STRONG_BEARISH),
        (-10, SentimentBucket.STRONG_BEARISH),
    ],
)
def test_bucket_thresholds(score, bucket):
    assert bucket_for_score(score) == bucket


def test_every_integer_score_lands_in_exactly_one_bucket():
    for score in range(-25, 26):
        assert isinstance(bucket_for_score(score), SentimentBucket)


def test_score_document_carries_document_and_classes():
    doc = TextDocument(source_id=DocumentSource.NEWS, text="Shares plunge")

    scored = score_document(doc)

    assert scored.document is doc
    assert scored.score == -3
    assert scored.label == SentimentLabel.BEARISH
    assert scored.bucket == SentimentBucket.STRONG_BEARISH
