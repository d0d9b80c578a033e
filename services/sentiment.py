"""
sentiment.py
-------------

This module exposes a lightweight keyword sentiment analyzer. It sorts a
short text into positive, neutral or negative by counting whole-word
hits against three fixed word lists, then turns the counts into integer
percentages and a heuristic confidence score.

Two adjustments favour whichever of the positive and negative scores is
already ahead: an intensifier anywhere in the text ("very",
"extremely", "absolutely", matched as substrings) multiplies it by 1.5,
and every exclamation mark adds 0.5 to it. Neutral hits are never
adjusted.

Percentages are rounded half-up. Neutral takes the remainder so the
three always add up to 100, which means it can dip below zero when both
other percentages round up (12.5 and 87.5 become 13 and 88). That
artifact is kept as is.

A text with no keyword at all gets a fixed neutral result
(33/34/33, confidence 50).
"""

from __future__ import annotations

import math

from services.lexicon import KEYWORD_PATTERN, WORD_CATEGORY, has_intensifier
from services.logging_utils import get_structured_logger, log_performance
from services.models import ClassificationResult, RawScores, Sentiment, SentimentScores

logger = get_structured_logger(__name__)

INTENSIFIER_FACTOR = 1.5
EXCLAMATION_BONUS = 0.5
POLAR_CONFIDENCE_BONUS = 20
NEUTRAL_CONFIDENCE_BONUS = 15
MAX_CONFIDENCE = 99

FALLBACK_RESULT = ClassificationResult(
    sentiment=Sentiment.NEUTRAL,
    scores=SentimentScores(positive=33, neutral=34, negative=33),
    confidence=50,
)


class EmptyInputError(ValueError):
    """Raised when there is no text to analyse."""


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _boost_leader(positive: float, negative: float, boost) -> tuple[float, float]:
    if positive > negative:
        return boost(positive), negative
    if negative > positive:
        return positive, boost(negative)
    return positive, negative


class SentimentService:
    """Keyword-based sentiment classification."""

    @log_performance(__name__)
    def score_keywords(self, text: str) -> RawScores:
        """Count keyword hits and apply the intensifier and exclamation boosts.

        Args:
            text: The text to score. Case is ignored for matching.

        Returns:
            The adjusted scores before they are turned into percentages.
        """
        lowered = text.lower()
        counts = {sentiment: 0 for sentiment in Sentiment}
        for match in KEYWORD_PATTERN.finditer(lowered):
            counts[WORD_CATEGORY[match.group(0)]] += 1

        positive: float = counts[Sentiment.POSITIVE]
        negative: float = counts[Sentiment.NEGATIVE]

        if has_intensifier(lowered):
            positive, negative = _boost_leader(
                positive, negative, lambda score: score * INTENSIFIER_FACTOR
            )

        exclamations = text.count("!")
        if exclamations > 0:
            positive, negative = _boost_leader(
                positive, negative, lambda score: score + exclamations * EXCLAMATION_BONUS
            )

        return RawScores(
            positive=positive,
            negative=negative,
            neutral=counts[Sentiment.NEUTRAL],
        )

    def analyze_sentiment(self, text: str) -> ClassificationResult:
        """Classify ``text`` as positive, neutral or negative.

        Raises:
            EmptyInputError: If ``text`` is empty or only whitespace.
        """
        if not text or not text.strip():
            raise EmptyInputError("Please enter some text to analyze!")

        raw = self.score_keywords(text)
        total = raw.total
        if total == 0:
            logger.debug("No sentiment keywords matched", length=len(text))
            return FALLBACK_RESULT

        pos_percent = _round_half_up(raw.positive / total * 100)
        neg_percent = _round_half_up(raw.negative / total * 100)
        neu_percent = 100 - pos_percent - neg_percent

        if pos_percent > neg_percent and pos_percent > neu_percent:
            sentiment = Sentiment.POSITIVE
            confidence = min(pos_percent + POLAR_CONFIDENCE_BONUS, MAX_CONFIDENCE)
        elif neg_percent > pos_percent and neg_percent > neu_percent:
            sentiment = Sentiment.NEGATIVE
            confidence = min(neg_percent + POLAR_CONFIDENCE_BONUS, MAX_CONFIDENCE)
        else:
            # Every tie lands here, including a three-way one.
            sentiment = Sentiment.NEUTRAL
            confidence = min(
                max(pos_percent, neg_percent, neu_percent) + NEUTRAL_CONFIDENCE_BONUS,
                MAX_CONFIDENCE,
            )

        result = ClassificationResult(
            sentiment=sentiment,
            scores=SentimentScores(
                positive=pos_percent,
                neutral=neu_percent,
                negative=neg_percent,
            ),
            confidence=confidence,
        )
        logger.debug(
            "Classified text",
            sentiment=sentiment.value,
            confidence=confidence,
            raw_positive=raw.positive,
            raw_negative=raw.negative,
            raw_neutral=raw.neutral,
        )
        return result


_default_service = SentimentService()


def analyze(text: str) -> ClassificationResult:
    """Classify ``text`` with the default :class:`SentimentService`."""
    return _default_service.analyze_sentiment(text)


def score_keywords(text: str) -> RawScores:
    """Score ``text`` with the default :class:`SentimentService`."""
    return _default_service.score_keywords(text)


__all__ = [
    "EmptyInputError",
    "FALLBACK_RESULT",
    "SentimentService",
    "analyze",
    "score_keywords",
]
