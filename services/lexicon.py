"""Fixed English vocabulary used by the keyword sentiment analyzer."""

from __future__ import annotations

import re
from typing import Dict, FrozenSet

from services.models import Sentiment

POSITIVE_WORDS: FrozenSet[str] = frozenset({
    "good",
    "great",
    "excellent",
    "amazing",
    "wonderful",
    "fantastic",
    "love",
    "best",
    "perfect",
    "awesome",
    "brilliant",
    "outstanding",
    "superb",
    "incredible",
    "beautiful",
    "happy",
    "delighted",
    "satisfied",
    "pleased",
    "recommend",
    "impressive",
})

NEGATIVE_WORDS: FrozenSet[str] = frozenset({
    "bad",
    "terrible",
    "awful",
    "horrible",
    "worst",
    "hate",
    "disappointing",
    "poor",
    "useless",
    "waste",
    "never",
    "not",
    "disappointed",
    "angry",
    "frustrated",
    "sad",
    "unfortunate",
    "regret",
    "inferior",
    "pathetic",
    "unacceptable",
})

NEUTRAL_WORDS: FrozenSet[str] = frozenset({
    "okay",
    "fine",
    "average",
    "normal",
    "standard",
    "acceptable",
    "decent",
})

# Substring triggers: "every" counts as "very".
INTENSIFIERS = ("very", "extremely", "absolutely")

WORD_CATEGORY: Dict[str, Sentiment] = {
    **{word: Sentiment.POSITIVE for word in POSITIVE_WORDS},
    **{word: Sentiment.NEGATIVE for word in NEGATIVE_WORDS},
    **{word: Sentiment.NEUTRAL for word in NEUTRAL_WORDS},
}

# Longest first so no keyword can shadow a longer one sharing its prefix.
# ASCII boundaries: "café" splits after "caf", as a browser regex would.
KEYWORD_PATTERN = re.compile(
    r"\b(?:"
    + "|".join(sorted(WORD_CATEGORY, key=lambda word: (-len(word), word)))
    + r")\b",
    re.ASCII,
)


def has_intensifier(lowered: str) -> bool:
    return any(word in lowered for word in INTENSIFIERS)


__all__ = [
    "INTENSIFIERS",
    "KEYWORD_PATTERN",
    "NEGATIVE_WORDS",
    "NEUTRAL_WORDS",
    "POSITIVE_WORDS",
    "WORD_CATEGORY",
    "has_intensifier",
]
