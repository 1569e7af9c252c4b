"""
Error Taxonomy
==============
Every failure the calculation libraries can report derives from
CalculatorError. Each class carries an ErrorKind tag so a UI can map
failures to its own (localized) messages without string matching.

The libraries raise; the CalculatorEngine catches CalculatorError and turns
it into the "Error" display. Everything else is left to the caller.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Optional


class ErrorKind(StrEnum):
    DIVISION_BY_ZERO = "division_by_zero"
    DOMAIN = "domain"
    DIMENSION_MISMATCH = "dimension_mismatch"
    NOT_SQUARE = "not_square"
    MATRIX_TOO_LARGE = "matrix_too_large"
    SINGULAR_SYSTEM = "singular_system"
    INVALID_DIGIT = "invalid_digit"
    UNKNOWN_UNIT = "unknown_unit"
    UNKNOWN_CATEGORY = "unknown_category"
    PARSE = "parse"


class CalculatorError(ValueError):
    """Base class for all reportable calculation failures."""
    kind: ErrorKind = ErrorKind.DOMAIN


class DivisionByZero(CalculatorError):
    kind = ErrorKind.DIVISION_BY_ZERO


class DomainError(CalculatorError):
    """An argument outside a function's domain (sqrt(-1), 2.5!, 1/0 as reciprocal...)."""
    kind = ErrorKind.DOMAIN


class MatrixError(CalculatorError):
    pass


class DimensionMismatch(MatrixError):
    kind = ErrorKind.DIMENSION_MISMATCH


class NotSquare(MatrixError):
    kind = ErrorKind.NOT_SQUARE


class MatrixTooLarge(MatrixError):
    kind = ErrorKind.MATRIX_TOO_LARGE


class SingularSystem(CalculatorError):
    kind = ErrorKind.SINGULAR_SYSTEM


class InvalidDigit(CalculatorError):
    kind = ErrorKind.INVALID_DIGIT

    def __init__(self, text: str, position: int, base: int) -> None:
        self.text = text
        self.position = position
        self.base = base
        if position < len(text):
            detail = f"'{text[position]}' at position {position}"
        else:
            detail = "empty input"
        super().__init__(f"Invalid base-{base} digit in '{text}': {detail}")


class ConversionError(CalculatorError):
    pass


class UnknownUnit(ConversionError):
    kind = ErrorKind.UNKNOWN_UNIT


class UnknownCategory(ConversionError):
    kind = ErrorKind.UNKNOWN_CATEGORY


class ParseError(CalculatorError):
    kind = ErrorKind.PARSE

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
