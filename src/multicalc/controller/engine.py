"""
Calculator Engine
=================
The input state machine shared by every keypad screen.

Why is this file needed?
------------------------
1. Sequencing: it turns digit/operator/function events into the next
   CalculatorState, including left-to-right chained evaluation.
2. Dispatch: scientific keys are routed to the scientific library and
   programmer keys to the base converter, gated by the capability set of
   the engine's mode instead of per-screen copies of the logic.
3. Safety: every arithmetic failure becomes the "Error" display; nothing
   raised by the libraries escapes to the host.
"""
from __future__ import annotations

from dataclasses import replace
import logging
import math
from typing import Callable, Iterable, Optional

from multicalc.analysis import scientific
from multicalc.config import ERROR_DISPLAY, EngineCapabilities, capabilities_for
from multicalc.conversion.bases import format_in_base, is_valid_digit, parse_in_base
from multicalc.errors import CalculatorError, DivisionByZero, DomainError
from multicalc.model.events import (
    Clear, DecimalPoint, Digit, Equals, Event, OperatorPressed, Percent,
    ScientificFunction, SetBase, ToggleAngleUnit, ToggleSign,
)
from multicalc.model.state import (
    AngleUnit, CalculatorMode, CalculatorState, HistoryRecord, NumericBase, Operator,
)
from multicalc.utils import format_number

logger = logging.getLogger(__name__)

HistorySink = Callable[[HistoryRecord], None]


def binary_op(left: float, right: float, op: Operator) -> float:
    """
    Apply one of the four keypad operators.

    Raises:
        DivisionByZero: If `op` is DIV and `right` is exactly zero.
    """
    op = Operator(op)
    if op == Operator.ADD:
        return left + right
    if op == Operator.SUB:
        return left - right
    if op == Operator.MUL:
        return left * right
    if right == 0:
        raise DivisionByZero(f"Cannot divide {left} by zero.")
    return left / right


class CalculatorEngine:
    """
    Owns one CalculatorState and replaces it on every applied event.

    Not safe for concurrent use; each screen owns its own engine and applies
    events one at a time.
    """

    def __init__(
        self,
        mode: CalculatorMode = CalculatorMode.STANDARD,
        capabilities: Optional[EngineCapabilities] = None,
        history_sink: Optional[HistorySink] = None,
        angle_unit: AngleUnit = AngleUnit.DEG,
        numeric_base: NumericBase = NumericBase.DEC,
    ) -> None:
        """
        Initialize the engine in its cleared state.

        Args:
            mode: The screen this engine serves; recorded in history entries
                and used to look up default capabilities.
            capabilities: Overrides the mode's capability set.
            history_sink: Receives one HistoryRecord per completed evaluation.
            angle_unit: Initial angle unit for trig keys.
            numeric_base: Initial numeral base of the display.
        """
        self.mode = CalculatorMode(mode)
        self.capabilities = capabilities if capabilities is not None else capabilities_for(self.mode)
        self._history_sinks: list[HistorySink] = []
        if history_sink is not None:
            self._history_sinks.append(history_sink)

        if NumericBase(numeric_base) != NumericBase.DEC and not self.capabilities.programmer:
            raise ValueError(f"Mode '{self.mode}' cannot start in base {int(numeric_base)}.")

        self.state = CalculatorState(
            angle_unit=AngleUnit(angle_unit),
            numeric_base=NumericBase(numeric_base),
        )

        self._handlers: dict[type, Callable[[Event], CalculatorState]] = {
            Digit: self._on_digit,
            DecimalPoint: self._on_decimal_point,
            OperatorPressed: self._on_operator,
            Equals: self._on_equals,
            Clear: self._on_clear,
            ToggleSign: self._on_toggle_sign,
            Percent: self._on_percent,
            ScientificFunction: self._on_scientific,
            ToggleAngleUnit: self._on_toggle_angle_unit,
            SetBase: self._on_set_base,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def display(self) -> str:
        return self.state.display

    @property
    def is_error(self) -> bool:
        return self.state.display == ERROR_DISPLAY

    def add_history_sink(self, sink: HistorySink) -> None:
        self._history_sinks.append(sink)

    def apply(self, event: Event) -> CalculatorState:
        """
        Apply one input event and return the new state.

        While the display shows "Error" every event except Clear is ignored.

        Raises:
            TypeError: If `event` is not one of the engine's event types.
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unsupported calculator event: {event!r}")

        if self.is_error and not isinstance(event, Clear):
            logger.debug(f"Ignoring {event} until Clear.")
            return self.state

        try:
            new_state = handler(event)
        except CalculatorError as e:
            logger.warning(f"{type(e).__name__} on {event}: {e}")
            new_state = CalculatorState(
                display=ERROR_DISPLAY,
                awaiting_operand=True,
                angle_unit=self.state.angle_unit,
                numeric_base=self.state.numeric_base,
            )

        logger.debug(f"{event} -> {new_state}")
        self.state = new_state
        return new_state

    def apply_all(self, events: Iterable[Event]) -> CalculatorState:
        for event in events:
            self.apply(event)
        return self.state

    # ------------------------------------------------------------------
    # Number <-> display text in the current base
    # ------------------------------------------------------------------
    def _current(self) -> float:
        base = self.state.numeric_base
        if base == NumericBase.DEC:
            return float(self.state.display)
        return float(parse_in_base(self.state.display, base))

    def _normalize(self, value: float, base: Optional[NumericBase] = None) -> float:
        """Reject non-finite values; truncate to an integer outside base 10."""
        base = self.state.numeric_base if base is None else base
        if not math.isfinite(value):
            raise DomainError(f"Result is not a finite number: {value}")
        if base != NumericBase.DEC:
            return float(math.trunc(value))
        return value

    def _format(self, value: float, base: Optional[NumericBase] = None) -> str:
        base = self.state.numeric_base if base is None else base
        value = self._normalize(value, base)
        if base == NumericBase.DEC:
            return format_number(value)
        return format_in_base(int(value), base)

    def _evaluate_pending(self, current: float) -> tuple[float, str]:
        left = self.state.pending_operand
        op = self.state.pending_operator
        result = self._normalize(binary_op(left, current, op))
        display = self._format(result)

        record = HistoryRecord(
            expression=f"{self._format(left)} {op.symbol} {self._format(current)}",
            result=display,
            mode=self.mode.value,
        )
        for sink in self._history_sinks:
            sink(record)
        logger.debug(f"History record emitted: {record}")
        return result, display

    def _capability_missing(self, event: Event, capability: str) -> bool:
        if getattr(self.capabilities, capability):
            return False
        logger.warning(f"Ignoring {event}: mode '{self.mode}' has no {capability} keys.")
        return True

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _on_digit(self, event: Digit) -> CalculatorState:
        state = self.state
        char = event.value.upper()
        if not is_valid_digit(char, state.numeric_base):
            logger.debug(f"Digit '{event.value}' rejected in base {int(state.numeric_base)}.")
            return state

        if state.awaiting_operand or state.display == "0":
            display = char
        else:
            display = state.display + char

        candidate = replace(state, display=display, awaiting_operand=False)
        if state.numeric_base == NumericBase.DEC and not math.isfinite(float(display)):
            # e.g. appending to "1.235e+9" until the exponent overflows
            return state
        return candidate

    def _on_decimal_point(self, event: DecimalPoint) -> CalculatorState:
        state = self.state
        if state.numeric_base != NumericBase.DEC:
            logger.debug("Decimal point rejected outside base 10.")
            return state
        if state.awaiting_operand:
            return replace(state, display="0.", awaiting_operand=False)
        if "." in state.display or "e" in state.display:
            return state
        return replace(state, display=state.display + ".")

    def _on_operator(self, event: OperatorPressed) -> CalculatorState:
        state = self.state
        op = Operator(event.op)
        current = self._current()

        if state.pending_operator is None:
            return replace(
                state, pending_operand=current, pending_operator=op, awaiting_operand=True
            )
        if not state.awaiting_operand:
            # chained evaluation: no precedence, strictly left to right
            result, display = self._evaluate_pending(current)
            return replace(
                state, display=display, pending_operand=result,
                pending_operator=op, awaiting_operand=True,
            )
        return replace(state, pending_operator=op)

    def _on_equals(self, event: Equals) -> CalculatorState:
        state = self.state
        if state.pending_operator is None or state.awaiting_operand:
            return state
        _, display = self._evaluate_pending(self._current())
        return replace(
            state, display=display, pending_operand=None,
            pending_operator=None, awaiting_operand=True,
        )

    def _on_clear(self, event: Clear) -> CalculatorState:
        return CalculatorState(
            angle_unit=self.state.angle_unit,
            numeric_base=self.state.numeric_base,
        )

    def _on_toggle_sign(self, event: ToggleSign) -> CalculatorState:
        return replace(self.state, display=self._format(-self._current()))

    def _on_percent(self, event: Percent) -> CalculatorState:
        return replace(self.state, display=self._format(self._current() / 100))

    def _on_scientific(self, event: ScientificFunction) -> CalculatorState:
        if self._capability_missing(event, "scientific"):
            return self.state
        result = scientific.apply(self._current(), event.op, self.state.angle_unit)
        return replace(self.state, display=self._format(result), awaiting_operand=True)

    def _on_toggle_angle_unit(self, event: ToggleAngleUnit) -> CalculatorState:
        if self._capability_missing(event, "scientific"):
            return self.state
        return replace(self.state, angle_unit=self.state.angle_unit.toggled())

    def _on_set_base(self, event: SetBase) -> CalculatorState:
        if self._capability_missing(event, "programmer"):
            return self.state
        state = self.state
        base = NumericBase(event.base)
        display = self._format(self._current(), base)

        pending_operand = state.pending_operand
        if pending_operand is not None:
            pending_operand = self._normalize(pending_operand, base)
        return replace(state, display=display, numeric_base=base, pending_operand=pending_operand)
