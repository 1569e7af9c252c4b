from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
import math

import numpy as np
from scipy import constants

from multicalc.config import DISPLAY_MAX_LENGTH, EXPONENT_FRACTION_DIGITS, SIGNIFICANT_DIGITS
from multicalc.errors import DomainError


ABSOLUTE_ZERO_CELSIUS = -constants.zero_Celsius


def celsius_to_kelvin(celsius: float) -> float:
    """Convert Celsius to Kelvin."""
    return celsius - ABSOLUTE_ZERO_CELSIUS


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to Celsius."""
    return kelvin + ABSOLUTE_ZERO_CELSIUS


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (fahrenheit - 32) * 5 / 9


def shortest_text(value: float) -> str:
    """
    Shortest decimal text that reads back as the same double.

    Plain notation is used for magnitudes in [1e-6, 1e21), exponential
    notation with an unpadded exponent ("1e+21", "1.5e-7") outside it.
    Negative zero prints as "0".
    """
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, trim='-')
    return np.format_float_scientific(value, trim='-', exp_digits=1)


def format_number(value: float) -> str:
    """
    Canonical display text for a calculator result.

    Values whose shortest text is wider than the display are shown in
    exponential form with a fixed mantissa ("1.235e+9", "3.333e-1").
    Everything else is rounded to 9 significant digits and printed in
    shortest form ("0.5", "120", "-42.125").

    Args:
        value: A finite number.

    Raises:
        DomainError: If `value` is infinite or NaN.

    Returns:
        The display text.
    """
    value = float(value)
    if not math.isfinite(value):
        raise DomainError(f"Result is not a finite number: {value}")

    if len(shortest_text(value)) > DISPLAY_MAX_LENGTH:
        return exponential_text(value, EXPONENT_FRACTION_DIGITS)
    return shortest_text(float(f"{value:.{SIGNIFICANT_DIGITS}g}"))


def exponential_text(value: float, fraction_digits: int) -> str:
    """
    Exponential notation with a fixed number of mantissa fraction digits.

    Rounds the exact binary value half away from zero, so 1234500000 with
    3 digits gives "1.235e+9".
    """
    if value == 0:
        return f"{0:.{fraction_digits}f}e+0"

    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-fraction_digits)
    exponent = exact.adjusted()
    mantissa = exact.scaleb(-exponent).quantize(quantum, rounding=ROUND_HALF_UP)
    if abs(mantissa) >= 10:
        # 9.9996 rounded up to 10.000
        exponent += 1
        mantissa = exact.scaleb(-exponent).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{mantissa}e{exponent:+d}"
