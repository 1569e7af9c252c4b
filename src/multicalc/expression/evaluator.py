from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, Optional

import numpy as np
import numpy.typing as npt

from multicalc.config import GRAPH_SAMPLES
from multicalc.expression.nodes import BinaryOp, Call, Literal, Node, UnaryOp, Variable
from multicalc.expression.parser import parse

logger = logging.getLogger(__name__)

Scalar = float | np.floating
ArrayOrScalar = Scalar | npt.NDArray[np.float64]

FUNCTIONS: dict[str, Callable[..., ArrayOrScalar]] = {
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "log": np.log10,
    "ln": np.log,
    "sqrt": np.sqrt,
    "pow": np.power,
}

BINARY_OPERATORS: dict[str, Callable[[ArrayOrScalar, ArrayOrScalar], ArrayOrScalar]] = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "^": np.power,
}


def evaluate_node(node: Node, x: ArrayOrScalar) -> ArrayOrScalar:
    """
    Interpret an AST at `x` (a number or an array of sample points).

    Out-of-domain arguments give NaN or +-inf following IEEE-754 rules,
    never an exception; callers filter non-finite samples.
    """
    if isinstance(node, Literal):
        return np.float64(node.value)
    if isinstance(node, Variable):
        return x
    if isinstance(node, UnaryOp):
        return np.negative(evaluate_node(node.operand, x))
    if isinstance(node, BinaryOp):
        return BINARY_OPERATORS[node.op](evaluate_node(node.left, x), evaluate_node(node.right, x))
    if isinstance(node, Call):
        return FUNCTIONS[node.function](*(evaluate_node(arg, x) for arg in node.args))
    raise TypeError(f"Unknown expression node: {node!r}")


@dataclass(frozen=True)
class GraphPoint:
    x: float
    y: float


@dataclass(frozen=True)
class GraphExpression:
    """
    An expression parsed once and evaluated at many points.

    Raises ParseError on construction if `text` is malformed.
    """
    text: str
    ast: Node = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ast", parse(self.text))

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def evaluate(self, x: float) -> float:
        with np.errstate(all="ignore"):
            return float(evaluate_node(self.ast, np.float64(x)))

    def evaluate_many(self, xs: npt.ArrayLike) -> npt.NDArray[np.float64]:
        xs = np.asarray(xs, dtype=np.float64)
        with np.errstate(all="ignore"):
            ys = evaluate_node(self.ast, xs)
        # constant expressions come back as scalars
        return np.broadcast_to(np.asarray(ys, dtype=np.float64), xs.shape).copy()

    def sample(
        self,
        x_min: float,
        x_max: float,
        steps: int = GRAPH_SAMPLES,
        y_range: Optional[tuple[float, float]] = None,
    ) -> list[GraphPoint]:
        """
        Evaluate the expression on `steps` equal intervals of [x_min, x_max].

        Non-finite samples are dropped, as are samples outside `y_range`
        when one is given.

        Args:
            x_min: Left end of the plotted range.
            x_max: Right end of the plotted range; must exceed x_min.
            steps: Number of intervals; steps + 1 points are evaluated.
            y_range: Optional (y_min, y_max) visible window.

        Returns:
            The plottable points in increasing x order.
        """
        if not x_max > x_min:
            raise ValueError(f"x_max ({x_max}) must be greater than x_min ({x_min}).")
        if steps < 1:
            raise ValueError(f"steps must be positive, got {steps}.")

        xs = np.linspace(x_min, x_max, steps + 1)
        ys = self.evaluate_many(xs)

        keep = np.isfinite(ys)
        if y_range is not None:
            y_min, y_max = y_range
            keep &= (ys >= y_min) & (ys <= y_max)

        logger.debug(f"Sampled '{self.text}': {int(keep.sum())}/{len(xs)} points kept")
        return [GraphPoint(float(x), float(y)) for x, y in zip(xs[keep], ys[keep])]


def evaluate(expression: str, x: float) -> float:
    """
    Evaluate a single-variable expression at `x`.

    Raises:
        ParseError: If `expression` is malformed.

    Returns:
        The value, possibly NaN or infinite for out-of-domain arguments.
    """
    return GraphExpression(expression).evaluate(x)


def sample(
    expression: str,
    x_min: float,
    x_max: float,
    steps: int = GRAPH_SAMPLES,
    y_range: Optional[tuple[float, float]] = None,
) -> list[GraphPoint]:
    return GraphExpression(expression).sample(x_min, x_max, steps, y_range)
