"""
Numeral Base Conversion
=======================
Integer parsing/formatting in binary, octal, decimal and hexadecimal, and
the 8-bit bitwise helpers of the programmer keypad.
"""
from __future__ import annotations

from enum import StrEnum
import logging
from typing import Optional

from multicalc.config import BIT_MASK
from multicalc.errors import DomainError, InvalidDigit
from multicalc.model.state import NumericBase

logger = logging.getLogger(__name__)

DIGITS = "0123456789ABCDEF"


class BitwiseOp(StrEnum):
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    NOT = "NOT"
    LSHIFT = "LSHIFT"
    RSHIFT = "RSHIFT"


def digit_alphabet(base: NumericBase | int) -> str:
    """Characters valid in `base`, e.g. '01234567' for octal."""
    return DIGITS[:NumericBase(base)]


def is_valid_digit(char: str, base: NumericBase | int) -> bool:
    return len(char) == 1 and char.upper() in digit_alphabet(base)


def parse_in_base(text: str, base: NumericBase | int) -> int:
    """
    Parse a non-negative integer written in `base`.

    Every character is checked against the base's alphabet before the
    value is accepted; hexadecimal letters may be either case.

    Raises:
        InvalidDigit: On the first character outside the alphabet, or for
            empty text.
    """
    base = NumericBase(base)
    if not text:
        raise InvalidDigit(text, 0, base)

    alphabet = digit_alphabet(base)
    value = 0
    for position, char in enumerate(text):
        digit = alphabet.find(char.upper())
        if digit < 0:
            raise InvalidDigit(text, position, base)
        value = value * base + digit
    return value


def format_in_base(value: int, base: NumericBase | int) -> str:
    """
    Render a non-negative integer in `base`; hexadecimal is uppercase.

    Raises:
        DomainError: If `value` is negative.
    """
    base = NumericBase(base)
    value = int(value)
    if value < 0:
        raise DomainError(f"Only non-negative integers can be shown in base {int(base)}, got {value}.")
    if value == 0:
        return "0"

    chars = []
    while value:
        value, digit = divmod(value, base)
        chars.append(DIGITS[digit])
    return "".join(reversed(chars))


def convert_base(text: str, from_base: NumericBase | int, to_base: NumericBase | int) -> str:
    return format_in_base(parse_in_base(text, from_base), to_base)


def bit_and(a: int, b: int) -> int:
    return (a & b) & BIT_MASK


def bit_or(a: int, b: int) -> int:
    return (a | b) & BIT_MASK


def bit_xor(a: int, b: int) -> int:
    return (a ^ b) & BIT_MASK


def bit_not(a: int) -> int:
    return ~a & BIT_MASK


def _check_shift(places: int) -> None:
    if places < 0:
        raise DomainError(f"Shift count must be non-negative, got {places}.")


def shift_left(a: int, places: int = 1) -> int:
    _check_shift(places)
    return (a << places) & BIT_MASK


def shift_right(a: int, places: int = 1) -> int:
    _check_shift(places)
    return (a >> places) & BIT_MASK


def apply_bitwise(op: BitwiseOp, value: int, operand: Optional[int] = None) -> int:
    """
    Apply a keypad bitwise operation to `value`.

    Binary operations use `operand`, defaulting to the all-ones byte the
    keypad applies; shifts move by `operand` places, defaulting to one.
    NOT ignores `operand`.

    Raises:
        DomainError: If a shift count is negative.
    """
    op = BitwiseOp(op)
    if op == BitwiseOp.NOT:
        result = bit_not(value)
    elif op in (BitwiseOp.LSHIFT, BitwiseOp.RSHIFT):
        places = 1 if operand is None else operand
        shift = shift_left if op == BitwiseOp.LSHIFT else shift_right
        result = shift(value, places)
    else:
        other = BIT_MASK if operand is None else operand
        binary = {BitwiseOp.AND: bit_and, BitwiseOp.OR: bit_or, BitwiseOp.XOR: bit_xor}[op]
        result = binary(value, other)

    logger.debug(f"{op}({value}, {operand}) = {result}")
    return result
