from __future__ import annotations

from enum import StrEnum
import logging
import math
from typing import Callable

from multicalc.errors import DomainError
from multicalc.model.state import AngleUnit

logger = logging.getLogger(__name__)


class ScientificOp(StrEnum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    LOG = "log"
    LN = "ln"
    SQRT = "sqrt"
    SQUARE = "square"
    CUBE = "cube"
    POW = "pow"
    EXP = "exp"
    ABS = "abs"
    RECIPROCAL = "reciprocal"
    FACTORIAL = "factorial"


def to_radians(angle: float, unit: AngleUnit) -> float:
    """Convert an angle given in `unit` to radians."""
    return math.radians(angle) if unit == AngleUnit.DEG else angle


def from_radians(angle: float, unit: AngleUnit) -> float:
    """Convert an angle in radians to `unit`."""
    return math.degrees(angle) if unit == AngleUnit.DEG else angle


def factorial(value: float) -> float:
    """
    Factorial of a non-negative integer, computed iteratively.

    Args:
        value: The operand. Integral floats such as 5.0 are accepted.

    Raises:
        DomainError: If `value` is negative, not integral, or the result
            overflows a double (anything above 170!).

    Returns:
        value! as a float.
    """
    if not math.isfinite(value) or value < 0 or value != math.floor(value):
        raise DomainError(f"Factorial requires a non-negative integer, got {value}.")

    result = 1.0
    for i in range(2, int(value) + 1):
        result *= i
        if math.isinf(result):
            raise DomainError(f"{int(value)}! is too large to represent.")
    return result


def _log10(value: float) -> float:
    if value <= 0:
        raise DomainError(f"log is undefined for {value}.")
    return math.log10(value)


def _ln(value: float) -> float:
    if value <= 0:
        raise DomainError(f"ln is undefined for {value}.")
    return math.log(value)


def _sqrt(value: float) -> float:
    if value < 0:
        raise DomainError(f"sqrt is undefined for {value}.")
    return math.sqrt(value)


def _reciprocal(value: float) -> float:
    if value == 0:
        raise DomainError("Reciprocal of zero is undefined.")
    return 1 / value


# Functions that take no angle: value -> result
_PLAIN_FUNCTIONS: dict[ScientificOp, Callable[[float], float]] = {
    ScientificOp.LOG: _log10,
    ScientificOp.LN: _ln,
    ScientificOp.SQRT: _sqrt,
    ScientificOp.SQUARE: lambda v: v * v,
    ScientificOp.CUBE: lambda v: v * v * v,
    ScientificOp.POW: lambda v: v * v,
    ScientificOp.EXP: math.exp,
    ScientificOp.ABS: abs,
    ScientificOp.RECIPROCAL: _reciprocal,
    ScientificOp.FACTORIAL: factorial,
}

_FORWARD_TRIG: dict[ScientificOp, Callable[[float], float]] = {
    ScientificOp.SIN: math.sin,
    ScientificOp.COS: math.cos,
    ScientificOp.TAN: math.tan,
}

_INVERSE_TRIG: dict[ScientificOp, Callable[[float], float]] = {
    ScientificOp.ASIN: math.asin,
    ScientificOp.ACOS: math.acos,
    ScientificOp.ATAN: math.atan,
}


def apply(value: float, op: ScientificOp, angle_unit: AngleUnit = AngleUnit.DEG) -> float:
    """
    Apply a single-argument scientific function.

    Forward trig functions read `value` in `angle_unit`; inverse trig
    functions return their angle in `angle_unit`.

    Args:
        value: The operand.
        op: Which function to apply.
        angle_unit: Angle unit for trig functions. Ignored by the others.

    Raises:
        DomainError: If `value` lies outside the function's domain or the
            result is not a finite number.

    Returns:
        The function value.
    """
    op = ScientificOp(op)
    angle_unit = AngleUnit(angle_unit)

    try:
        if op in _FORWARD_TRIG:
            result = _FORWARD_TRIG[op](to_radians(value, angle_unit))
        elif op in _INVERSE_TRIG:
            result = from_radians(_INVERSE_TRIG[op](value), angle_unit)
        else:
            result = _PLAIN_FUNCTIONS[op](value)
    except (ValueError, OverflowError) as e:
        if isinstance(e, DomainError):
            raise
        # math.asin(2), math.exp(1000), ...
        raise DomainError(f"{op}({value}) is undefined: {e}") from e

    if not math.isfinite(result):
        raise DomainError(f"{op}({value}) is not a finite number.")

    logger.debug(f"{op}({value}) [{angle_unit}] = {result}")
    return result
