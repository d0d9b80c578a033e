"""Value objects shared by the analyzer, the history tracker and the API."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict


class Sentiment(str, Enum):
    """Classification label."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class SentimentScores:
    """Integer percentages per category; they always add up to 100."""

    positive: int
    neutral: int
    negative: int

    def as_dict(self) -> Dict[str, int]:
        return {
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative,
        }


@dataclass(frozen=True)
class RawScores:
    """Keyword scores after intensifier and exclamation adjustments."""

    positive: float
    negative: float
    neutral: int

    @property
    def total(self) -> float:
        return self.positive + self.negative + self.neutral


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of a single analysis."""

    sentiment: Sentiment
    scores: SentimentScores
    confidence: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sentiment": self.sentiment.value,
            "scores": self.scores.as_dict(),
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class HistoryEntry:
    """One analysed text as shown in the history list."""

    text: str
    sentiment: Sentiment
    confidence: int
    timestamp: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "sentiment": self.sentiment.value,
            "confidence": self.confidence,
            "time": self.timestamp,
        }


@dataclass
class AggregateStats:
    """Running count of analyses per sentiment."""

    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def increment(self, sentiment: Sentiment) -> None:
        setattr(self, sentiment.value, getattr(self, sentiment.value) + 1)

    def snapshot(self) -> "AggregateStats":
        return replace(self)

    def as_dict(self) -> Dict[str, int]:
        return {
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative,
            "total": self.total,
        }


__all__ = [
    "AggregateStats",
    "ClassificationResult",
    "HistoryEntry",
    "RawScores",
    "Sentiment",
    "SentimentScores",
]
