"""
Command-line interface.

Feeds a sequence of keypad labels through a CalculatorEngine and prints the
resulting display and history, e.g.

    $ python -m multicalc 2 + 3 + 4 =
    $ python -m multicalc --mode scientific 5 factorial
    $ python -m multicalc --mode programmer hex F F bin
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from multicalc.controller.engine import CalculatorEngine
from multicalc.logging_config import setup_logging
from multicalc.model.events import event_from_key
from multicalc.model.history import HistoryLog
from multicalc.model.state import CalculatorMode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="multicalc", description="Run keypad input through the calculator engine.")
    parser.add_argument("keys", nargs="+", help="Keypad labels, e.g. 7 + 3 = or sin, AC, hex")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in CalculatorMode],
        default=CalculatorMode.STANDARD.value,
    )
    parser.add_argument("--verbose", action="store_true", help="Log every state transition.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    history = HistoryLog()
    engine = CalculatorEngine(mode=CalculatorMode(args.mode), history_sink=history)

    try:
        events = [event_from_key(key) for key in args.keys]
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    state = engine.apply_all(events)

    for record in reversed(history.entries()):
        print(f"  {record}")
    print(state.display)
    return 0


if __name__ == "__main__":
    sys.exit(main())
