from __future__ import annotations

import cmath
from dataclasses import dataclass
import logging
import math
from typing import Sequence, Union

import numpy as np

from multicalc.config import PIVOT_TOLERANCE
from multicalc.errors import DimensionMismatch, DomainError, SingularSystem

logger = logging.getLogger(__name__)

Root = Union[float, complex]


@dataclass(frozen=True)
class LinearSystem:
    """n equations in n unknowns: coefficients @ x = constants."""
    coefficients: Sequence[Sequence[float]]
    constants: Sequence[float]

    def __post_init__(self) -> None:
        n = len(self.constants)
        if n == 0:
            raise DimensionMismatch("A linear system needs at least one equation.")
        if len(self.coefficients) != n:
            raise DimensionMismatch(
                f"{len(self.coefficients)} coefficient rows for {n} constants."
            )
        for i, row in enumerate(self.coefficients):
            if len(row) != n:
                raise DimensionMismatch(f"Coefficient row {i} has {len(row)} entries, expected {n}.")

    @property
    def size(self) -> int:
        return len(self.constants)

    def solve(self) -> list[float]:
        return solve(self.coefficients, self.constants)


def solve(coefficients: Sequence[Sequence[float]], constants: Sequence[float]) -> list[float]:
    """
    Solve a square linear system by Gaussian elimination.

    Forward elimination runs without row exchanges: for each pivot row i,
    every row j below it subtracts (a[j][i] / a[i][i]) times row i. Back
    substitution then runs from the last row upward.

    Args:
        coefficients: n x n coefficient rows.
        constants: Right-hand side, length n.

    Raises:
        DimensionMismatch: If the shapes do not describe a square system.
        SingularSystem: If a pivot is (numerically) zero, i.e. no larger than
            PIVOT_TOLERANCE times the largest coefficient magnitude. Without row
            exchanges this also covers solvable systems whose equations are
            given in an unlucky order.

    Returns:
        The solution vector.
    """
    system = LinearSystem(coefficients, constants)
    n = system.size

    augmented = np.column_stack((
        np.array(system.coefficients, dtype=np.float64),
        np.array(system.constants, dtype=np.float64),
    ))

    # zero pivots are judged against the size of the coefficients
    tolerance = PIVOT_TOLERANCE * np.abs(augmented[:, :n]).max()

    for i in range(n):
        pivot = augmented[i, i]
        if abs(pivot) <= tolerance:
            raise SingularSystem(f"Zero pivot in row {i}; the system has no unique solution.")
        for j in range(i + 1, n):
            factor = augmented[j, i] / pivot
            augmented[j, i:] -= factor * augmented[i, i:]

    solution = np.zeros(n)
    for i in range(n - 1, -1, -1):
        total = augmented[i, i + 1:n] @ solution[i + 1:]
        solution[i] = (augmented[i, n] - total) / augmented[i, i]

    if not np.all(np.isfinite(solution)):
        raise SingularSystem("Elimination produced a non-finite solution.")

    logger.debug(f"Solved {n}x{n} system: {solution}")
    return solution.tolist()


def solve_quadratic(a: float, b: float, c: float) -> tuple[Root, Root]:
    """
    Roots of a*x^2 + b*x + c = 0.

    Returns two equal floats for a double root and a complex-conjugate pair
    when the discriminant is negative.

    Raises:
        DomainError: If `a` is zero (the equation is not quadratic).
    """
    if a == 0:
        raise DomainError("Leading coefficient must be non-zero for a quadratic.")

    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return (-b + root) / (2 * a), (-b - root) / (2 * a)
    if discriminant == 0:
        x = -b / (2 * a)
        return x, x

    root = cmath.sqrt(discriminant)
    return (-b + root) / (2 * a), (-b - root) / (2 * a)
