import logging

import pytest

from multicalc.model.history import HistoryLog
from multicalc.model.state import CalculatorMode, HistoryRecord


def _record(i: int) -> HistoryRecord:
    return HistoryRecord(expression=f"{i} + 1", result=str(i + 1), mode=CalculatorMode.STANDARD.value)


def test_newest_first():
    history = HistoryLog()
    history(_record(1))
    history.record(_record(2))
    assert [r.expression for r in history.entries()] == ["2 + 1", "1 + 1"]
    assert history.latest().expression == "2 + 1"


def test_limit_drops_oldest():
    history = HistoryLog(limit=3)
    for i in range(5):
        history.record(_record(i))
    assert len(history) == 3
    assert history.limit == 3
    assert [r.result for r in history.entries()] == ["5", "4", "3"]


def test_default_limit():
    history = HistoryLog()
    for i in range(60):
        history.record(_record(i))
    assert len(history) == 50


def test_clear(caplog):
    history = HistoryLog()
    history.record(_record(1))
    with caplog.at_level(logging.INFO, logger="multicalc"):
        history.clear()
    assert len(history) == 0
    assert history.latest() is None
    assert "History cleared." in caplog.text


def test_invalid_limit():
    with pytest.raises(ValueError):
        HistoryLog(limit=0)


def test_record_text_and_timestamp():
    record = _record(2)
    assert str(record) == "2 + 1 = 3"
    assert record.timestamp.tzinfo is not None
