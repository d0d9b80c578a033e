"""Prometheus counters fed by analyses."""

from __future__ import annotations

from prometheus_client import REGISTRY

from services.models import ClassificationResult, Sentiment, SentimentScores
from services.observability import elapsed, record_analysis


def _sample(name: str, **labels) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_record_analysis_counts_by_sentiment() -> None:
    result = ClassificationResult(
        sentiment=Sentiment.NEGATIVE,
        scores=SentimentScores(positive=10, neutral=10, negative=80),
        confidence=99,
    )
    before = _sample("sentiment_analyses_total", sentiment="negative")
    observed = _sample("sentiment_confidence_count")

    record_analysis(result, 0.001)

    assert _sample("sentiment_analyses_total", sentiment="negative") == before + 1
    assert _sample("sentiment_confidence_count") == observed + 1


def test_elapsed_without_start_is_zero() -> None:
    assert elapsed(None) == 0.0
