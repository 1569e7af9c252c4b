"""
Input Events
============
Discrete inputs the UI feeds into CalculatorEngine.apply(). One frozen
dataclass per key kind, so the engine can dispatch on type.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from multicalc.analysis.scientific import ScientificOp
from multicalc.model.state import NumericBase, Operator


@dataclass(frozen=True)
class Digit:
    """A digit key: '0'-'9', plus 'A'-'F' in hexadecimal."""
    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"Digit expects a single character, got '{self.value}'.")


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class OperatorPressed:
    op: Operator


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class ToggleSign:
    pass


@dataclass(frozen=True)
class Percent:
    pass


@dataclass(frozen=True)
class ScientificFunction:
    op: ScientificOp


@dataclass(frozen=True)
class ToggleAngleUnit:
    pass


@dataclass(frozen=True)
class SetBase:
    base: NumericBase


Event = Union[
    Digit, DecimalPoint, OperatorPressed, Equals, Clear,
    ToggleSign, Percent, ScientificFunction, ToggleAngleUnit, SetBase,
]


KEY_EVENTS: dict[str, Event] = {
    ".": DecimalPoint(),
    "+": OperatorPressed(Operator.ADD),
    "-": OperatorPressed(Operator.SUB),
    "*": OperatorPressed(Operator.MUL),
    "×": OperatorPressed(Operator.MUL),
    "/": OperatorPressed(Operator.DIV),
    "÷": OperatorPressed(Operator.DIV),
    "=": Equals(),
    "AC": Clear(),
    "±": ToggleSign(),
    "neg": ToggleSign(),
    "%": Percent(),
    "deg/rad": ToggleAngleUnit(),
}


def event_from_key(key: str) -> Event:
    """
    Map a keypad label to its event.

    Single characters '0'-'9' and 'A'-'F' are digits, scientific function
    names ("sin", "factorial", ...) are ScientificFunction events, and
    "bin"/"oct"/"dec"/"hex" switch the numeral base.

    Raises:
        ValueError: If the label names no key.
    """
    if key in KEY_EVENTS:
        return KEY_EVENTS[key]
    if len(key) == 1 and key.upper() in "0123456789ABCDEF":
        return Digit(key)
    if key in {op.value for op in ScientificOp}:
        return ScientificFunction(ScientificOp(key))
    bases = {
        "bin": NumericBase.BIN, "oct": NumericBase.OCT, "dec": NumericBase.DEC, "hex": NumericBase.HEX,
    }
    if key.lower() in bases:
        return SetBase(bases[key.lower()])
    raise ValueError(f"Unknown key '{key}'.")
