"""
In-memory calculation history.
Newest first, bounded; plugs into CalculatorEngine as its history sink.
"""
from __future__ import annotations

from collections import deque
import logging
from typing import Optional

from multicalc.config import HISTORY_LIMIT
from multicalc.model.state import HistoryRecord

logger = logging.getLogger(__name__)


class HistoryLog:
    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}.")
        self._entries: deque[HistoryRecord] = deque(maxlen=limit)

    def __call__(self, record: HistoryRecord) -> None:
        self.record(record)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def limit(self) -> int:
        return self._entries.maxlen

    def record(self, record: HistoryRecord) -> None:
        # appendleft keeps the newest entry first; the oldest falls off the end
        self._entries.appendleft(record)
        logger.debug(f"History: {record} ({len(self._entries)}/{self.limit})")

    def entries(self) -> list[HistoryRecord]:
        return list(self._entries)

    def latest(self) -> Optional[HistoryRecord]:
        return self._entries[0] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()
        logger.info("History cleared.")
