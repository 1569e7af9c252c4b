"""
Configuration & Mode Registry
=============================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: display width, numeric tolerances and size guards live in
   one place instead of being hardcoded across the libraries.
2. Modes: it holds the process-wide, read-only table mapping each
   calculator mode to the engine capabilities it enables.

Exports:
    DISPLAY_MAX_LENGTH (int): Widest plain number the display shows.
    MODE_CAPABILITIES (Mapping): CalculatorMode -> EngineCapabilities.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from multicalc.model.state import CalculatorMode


# Display
ERROR_DISPLAY: str = "Error"
DISPLAY_MAX_LENGTH: int = 9
SIGNIFICANT_DIGITS: int = 9
EXPONENT_FRACTION_DIGITS: int = 3

# Numerics
MAX_DETERMINANT_ORDER: int = 8  # Laplace expansion is O(n!)
PIVOT_TOLERANCE: float = 1e-12  # relative to the largest coefficient
BIT_MASK: int = 0xFF
MAX_EXPRESSION_DEPTH: int = 100  # nesting levels a graph expression may use

# Collaborators
HISTORY_LIMIT: int = 50
GRAPH_SAMPLES: int = 100


@dataclass(frozen=True)
class EngineCapabilities:
    """Which optional event families a CalculatorEngine accepts."""
    scientific: bool = False
    programmer: bool = False


MODE_CAPABILITIES: Mapping[CalculatorMode, EngineCapabilities] = MappingProxyType({
    CalculatorMode.STANDARD: EngineCapabilities(),
    CalculatorMode.SCIENTIFIC: EngineCapabilities(scientific=True),
    CalculatorMode.PROGRAMMER: EngineCapabilities(programmer=True),
    # The remaining modes drive their libraries directly; if a screen embeds
    # a keypad it behaves like the standard one.
    CalculatorMode.UNIT: EngineCapabilities(),
    CalculatorMode.GRAPH: EngineCapabilities(),
    CalculatorMode.MATRIX: EngineCapabilities(),
    CalculatorMode.EQUATION: EngineCapabilities(),
})


def capabilities_for(mode: CalculatorMode) -> EngineCapabilities:
    return MODE_CAPABILITIES[CalculatorMode(mode)]
