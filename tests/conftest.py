from __future__ import annotations

from typing import Callable

import pytest

from multicalc.controller.engine import CalculatorEngine
from multicalc.model.events import event_from_key
from multicalc.model.history import HistoryLog
from multicalc.model.state import CalculatorMode, CalculatorState


@pytest.fixture
def history() -> HistoryLog:
    return HistoryLog()


@pytest.fixture
def engine(history: HistoryLog) -> CalculatorEngine:
    return CalculatorEngine(history_sink=history)


@pytest.fixture
def scientific_engine(history: HistoryLog) -> CalculatorEngine:
    return CalculatorEngine(mode=CalculatorMode.SCIENTIFIC, history_sink=history)


@pytest.fixture
def programmer_engine(history: HistoryLog) -> CalculatorEngine:
    return CalculatorEngine(mode=CalculatorMode.PROGRAMMER, history_sink=history)


@pytest.fixture
def press() -> Callable[..., CalculatorState]:
    """press(engine, "1", "+", "2", "=") applies keypad labels in order."""
    def _press(engine: CalculatorEngine, *keys: str) -> CalculatorState:
        return engine.apply_all(event_from_key(key) for key in keys)
    return _press
