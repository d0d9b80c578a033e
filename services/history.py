"""
Rolling history of recent analyses and running sentiment counts
"""

from __future__ import annotations

from collections import deque
from datetime import datetime
from typing import Any, Callable, Deque, Dict, Optional, Tuple

from config import DEFAULT_TIME_FORMAT
from services.logging_utils import get_structured_logger
from services.models import AggregateStats, ClassificationResult, HistoryEntry

logger = get_structured_logger(__name__)

HISTORY_CAPACITY = 10


class HistoryTracker:
    """Owns the newest-first history list and the per-sentiment counts.

    Each caller keeps its own tracker; nothing here is shared between
    instances. State lives as long as the tracker does. The history
    holds at most ``HISTORY_CAPACITY`` entries.
    """

    def __init__(
        self,
        time_format: str = DEFAULT_TIME_FORMAT,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.time_format = time_format
        self._clock = clock or datetime.now
        self._entries: Deque[HistoryEntry] = deque()
        self._stats = AggregateStats()

    def record(self, text: str, result: ClassificationResult) -> HistoryEntry:
        """Count ``result`` and put ``text`` at the head of the history."""
        self._stats.increment(result.sentiment)

        entry = HistoryEntry(
            text=text,
            sentiment=result.sentiment,
            confidence=result.confidence,
            timestamp=self._clock().strftime(self.time_format),
        )
        self._entries.appendleft(entry)

        if len(self._entries) > HISTORY_CAPACITY:
            evicted = self._entries.pop()
            logger.debug("Evicted oldest history entry", evicted_time=evicted.timestamp)

        logger.info(
            "Recorded analysis",
            sentiment=result.sentiment.value,
            confidence=result.confidence,
            history_size=len(self._entries),
        )
        return entry

    @property
    def stats(self) -> AggregateStats:
        return self._stats.snapshot()

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def summary(self) -> Dict[str, Any]:
        return {
            "stats": self._stats.as_dict(),
            "history": [entry.to_dict() for entry in self._entries],
        }


__all__ = ["HistoryTracker"]
