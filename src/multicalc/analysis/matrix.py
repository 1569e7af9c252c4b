"""
Matrix Algebra
==============
Dense numeric matrices for the matrix screen, plus add / multiply /
determinant over them.

The engine keeps no matrix state: callers create a Matrix, edit it cell
by cell and drop it when done.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Sequence

import numpy as np

from multicalc.config import MAX_DETERMINANT_ORDER
from multicalc.errors import DimensionMismatch, MatrixTooLarge, NotSquare

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Matrix:
    """
    A rows x cols matrix of doubles.

    'data' is always a float64 array of shape (rows, cols).
    """
    rows: int
    cols: int
    data: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise DimensionMismatch(f"Matrix needs at least one row and column, got {self.rows}x{self.cols}.")
        self.data = np.asarray(self.data, dtype=np.float64)
        if self.data.shape != (self.rows, self.cols):
            raise DimensionMismatch(
                f"Matrix data has shape {self.data.shape}, expected ({self.rows}, {self.cols})."
            )

    @staticmethod
    def zeros(rows: int, cols: int) -> Matrix:
        return Matrix(rows, cols, np.zeros((rows, cols)))

    @staticmethod
    def identity(n: int) -> Matrix:
        return Matrix(n, n, np.eye(n))

    @staticmethod
    def from_rows(rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from nested row lists; every row must have the same length."""
        if not rows or not rows[0]:
            raise DimensionMismatch("Matrix needs at least one row and column.")
        n_cols = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != n_cols:
                raise DimensionMismatch(f"Row {i} has {len(row)} entries, expected {n_cols}.")
        return Matrix(len(rows), n_cols, np.array(rows, dtype=np.float64))

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} matrix.")

    def get(self, row: int, col: int) -> float:
        self._check_cell(row, col)
        return float(self.data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check_cell(row, col)
        self.data[row, col] = value

    def to_list(self) -> list[list[float]]:
        return self.data.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum.

    Raises:
        DimensionMismatch: If the shapes differ.
    """
    if a.shape != b.shape:
        raise DimensionMismatch(f"Cannot add {a.rows}x{a.cols} and {b.rows}x{b.cols} matrices.")
    return Matrix(a.rows, a.cols, a.data + b.data)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Standard matrix product.

    Each cell is accumulated left to right over the shared dimension.

    Raises:
        DimensionMismatch: If `a.cols != b.rows`.
    """
    if a.cols != b.rows:
        raise DimensionMismatch(
            f"Cannot multiply {a.rows}x{a.cols} by {b.rows}x{b.cols}: inner dimensions differ."
        )
    result = Matrix.zeros(a.rows, b.cols)
    for i in range(a.rows):
        for j in range(b.cols):
            total = 0.0
            for k in range(a.cols):
                total += a.data[i, k] * b.data[k, j]
            result.data[i, j] = total
    return result


def _laplace(data: npt.NDArray[np.float64]) -> float:
    n = data.shape[0]
    if n == 1:
        return float(data[0, 0])
    if n == 2:
        return float(data[0, 0] * data[1, 1] - data[0, 1] * data[1, 0])

    det = 0.0
    minor_rows = data[1:]
    for i in range(n):
        minor = np.delete(minor_rows, i, axis=1)
        det += data[0, i] * (-1) ** i * _laplace(minor)
    return det


def determinant(m: Matrix) -> float:
    """
    Determinant by cofactor (Laplace) expansion along the first row.

    The expansion costs O(n!), so orders above MAX_DETERMINANT_ORDER are
    refused rather than left to run for minutes.

    Raises:
        NotSquare: If the matrix is not square.
        MatrixTooLarge: If the order exceeds MAX_DETERMINANT_ORDER.
    """
    if not m.is_square:
        raise NotSquare(f"Determinant needs a square matrix, got {m.rows}x{m.cols}.")
    if m.rows > MAX_DETERMINANT_ORDER:
        raise MatrixTooLarge(
            f"Determinant is limited to order {MAX_DETERMINANT_ORDER}, got {m.rows}."
        )
    det = _laplace(m.data)
    logger.debug(f"det of {m.rows}x{m.cols} matrix = {det}")
    return det
