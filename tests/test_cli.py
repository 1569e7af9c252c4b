import logging

import pytest

from multicalc.__main__ import main


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("multicalc")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_prints_history_and_display(capsys):
    assert main(["2", "+", "3", "+", "4", "="]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["  2 + 3 = 5", "  5 + 4 = 9", "9"]


def test_scientific_mode(capsys):
    assert main(["--mode", "scientific", "5", "factorial"]) == 0
    assert capsys.readouterr().out.splitlines() == ["120"]


def test_programmer_mode(capsys):
    assert main(["--mode", "programmer", "hex", "F", "F", "bin"]) == 0
    assert capsys.readouterr().out.splitlines() == ["11111111"]


def test_division_by_zero_shows_error(capsys):
    assert main(["1", "/", "0", "="]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["Error"]
    assert "WARNING multicalc.controller.engine: DivisionByZero" in captured.err


def test_unknown_key(capsys):
    assert main(["2", "?", "3"]) == 2
    assert "Unknown key '?'" in capsys.readouterr().err
