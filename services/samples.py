"""Demo texts offered by the dashboard's "try a sample" button."""

from __future__ import annotations

import random
from typing import Optional, Tuple

SAMPLE_TEXTS: Tuple[str, ...] = (
    "This is absolutely amazing! I love it so much! Best purchase ever!",
    "It's okay, nothing special. Does what it's supposed to do.",
    "Terrible experience. Would not recommend to anyone. Very disappointed.",
)


def get_sample(index: int) -> str:
    if not 0 <= index < len(SAMPLE_TEXTS):
        raise IndexError(f"No sample text at index {index}")
    return SAMPLE_TEXTS[index]


def random_sample(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(SAMPLE_TEXTS)


__all__ = ["SAMPLE_TEXTS", "get_sample", "random_sample"]
