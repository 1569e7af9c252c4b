"""
Calculator State (Data Model)
=============================
This module defines the value objects the CalculatorEngine works with.

Why is this file needed?
------------------------
1. State Management: CalculatorState holds everything the display and the
   next keypress depend on, in one immutable snapshot.
2. Decoupling: the UI reads these objects; only the engine produces them.
3. Closed tags: operators, modes, angle units and bases are enumerations
   instead of free-form strings.

Classes:
    Operator, AngleUnit, NumericBase, CalculatorMode: enumerations.
    CalculatorState: The engine's state snapshot.
    HistoryRecord: One completed evaluation, handed to the history sink.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum, StrEnum
from typing import Optional


class Operator(StrEnum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    @property
    def symbol(self) -> str:
        return OPERATOR_SYMBOLS[self]


OPERATOR_SYMBOLS: dict[Operator, str] = {
    Operator.ADD: "+",
    Operator.SUB: "-",
    Operator.MUL: "×",
    Operator.DIV: "÷",
}


class AngleUnit(StrEnum):
    DEG = "deg"
    RAD = "rad"

    def toggled(self) -> AngleUnit:
        return AngleUnit.RAD if self is AngleUnit.DEG else AngleUnit.DEG


class NumericBase(IntEnum):
    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16


class CalculatorMode(StrEnum):
    STANDARD = "standard"
    SCIENTIFIC = "scientific"
    PROGRAMMER = "programmer"
    UNIT = "unit"
    GRAPH = "graph"
    MATRIX = "matrix"
    EQUATION = "equation"


@dataclass(frozen=True)
class CalculatorState:
    """
    Snapshot of the input state machine.

    Invariants:
    - 'display' parses to a finite number in 'numeric_base', or is "Error".
    - 'pending_operator' is None exactly when 'pending_operand' is None.
    """
    display: str = "0"
    pending_operand: Optional[float] = None
    pending_operator: Optional[Operator] = None
    awaiting_operand: bool = False
    angle_unit: AngleUnit = AngleUnit.DEG
    numeric_base: NumericBase = NumericBase.DEC

    def __post_init__(self) -> None:
        if (self.pending_operand is None) != (self.pending_operator is None):
            raise ValueError("pending_operand and pending_operator must be set together.")

    @property
    def has_pending_operation(self) -> bool:
        return self.pending_operator is not None


@dataclass(frozen=True)
class HistoryRecord:
    """One completed evaluation, e.g. expression="2 + 3", result="5"."""
    expression: str
    result: str
    mode: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __str__(self) -> str:
        return f"{self.expression} = {self.result}"
