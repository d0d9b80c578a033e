"""History capacity, ordering and per-sentiment counts."""

from __future__ import annotations

from datetime import datetime

import pytest

from services.history import HISTORY_CAPACITY, HistoryTracker
from services.models import AggregateStats, ClassificationResult, Sentiment, SentimentScores
from services.sentiment import analyze


def _result(sentiment: Sentiment, confidence: int = 70) -> ClassificationResult:
    return ClassificationResult(
        sentiment=sentiment,
        scores=SentimentScores(positive=50, neutral=25, negative=25),
        confidence=confidence,
    )


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 5, 1, 15, 7)


def test_new_tracker_starts_empty() -> None:
    tracker = HistoryTracker()

    assert tracker.history == ()
    assert tracker.stats == AggregateStats()
    assert tracker.stats.total == 0


def test_record_builds_entry_from_result(fixed_clock) -> None:
    tracker = HistoryTracker(clock=fixed_clock)

    entry = tracker.record("Great Stuff!", _result(Sentiment.POSITIVE, confidence=88))

    assert entry.text == "Great Stuff!"
    assert entry.sentiment is Sentiment.POSITIVE
    assert entry.confidence == 88
    assert entry.timestamp == "03:07 PM"
    assert tracker.history == (entry,)


def test_time_format_is_configurable(fixed_clock) -> None:
    tracker = HistoryTracker(time_format="%H:%M", clock=fixed_clock)

    entry = tracker.record("fine", _result(Sentiment.NEUTRAL))

    assert entry.timestamp == "15:07"


def test_newest_entry_is_first() -> None:
    tracker = HistoryTracker()
    tracker.record("first", _result(Sentiment.POSITIVE))
    tracker.record("second", _result(Sentiment.NEGATIVE))

    assert [entry.text for entry in tracker.history] == ["second", "first"]


def test_eleventh_record_evicts_the_first() -> None:
    tracker = HistoryTracker()
    for i in range(1, 12):
        tracker.record(f"text {i}", _result(Sentiment.NEUTRAL))

    texts = [entry.text for entry in tracker.history]
    assert len(texts) == 10
    assert texts[0] == "text 11"
    assert texts[-1] == "text 2"
    assert "text 1" not in texts


def test_eviction_removes_one_entry_per_insert() -> None:
    tracker = HistoryTracker()
    for i in range(25):
        tracker.record(str(i), _result(Sentiment.POSITIVE))
        assert len(tracker) == min(i + 1, HISTORY_CAPACITY)

    assert [entry.text for entry in tracker.history] == [str(i) for i in range(24, 14, -1)]


def test_eviction_does_not_touch_counts() -> None:
    tracker = HistoryTracker()
    for _ in range(15):
        tracker.record("good", _result(Sentiment.POSITIVE))

    assert tracker.stats.positive == 15
    assert len(tracker) == HISTORY_CAPACITY


def test_capacity_is_fixed_at_ten() -> None:
    assert HISTORY_CAPACITY == 10


def test_counts_partition_records_by_sentiment() -> None:
    tracker = HistoryTracker()
    texts = [
        "great",
        "awful",
        "it is fine",
        "The sky is blue today",
        "love it",
        "good bad",
    ]
    for text in texts:
        tracker.record(text, analyze(text))

    stats = tracker.stats
    assert (stats.positive, stats.neutral, stats.negative) == (2, 3, 1)
    assert stats.total == len(texts)


def test_stats_snapshot_is_detached() -> None:
    tracker = HistoryTracker()
    tracker.record("great", _result(Sentiment.POSITIVE))

    snapshot = tracker.stats
    snapshot.increment(Sentiment.NEGATIVE)

    assert tracker.stats.negative == 0
    assert snapshot.negative == 1


def test_trackers_do_not_share_state() -> None:
    first = HistoryTracker()
    second = HistoryTracker()
    first.record("great", _result(Sentiment.POSITIVE))

    assert second.stats.total == 0
    assert second.history == ()


def test_summary_is_json_ready(fixed_clock) -> None:
    tracker = HistoryTracker(clock=fixed_clock)
    tracker.record("meh", _result(Sentiment.NEUTRAL, confidence=50))

    assert tracker.summary() == {
        "stats": {"positive": 0, "neutral": 1, "negative": 0, "total": 1},
        "history": [
            {"text": "meh", "sentiment": "neutral", "confidence": 50, "time": "03:07 PM"}
        ],
    }
