import pytest

from multicalc.conversion.bases import (
    BitwiseOp, apply_bitwise, bit_and, bit_not, bit_or, bit_xor, convert_base, digit_alphabet,
    format_in_base, is_valid_digit, parse_in_base, shift_left, shift_right,
)
from multicalc.errors import DomainError, InvalidDigit
from multicalc.model.state import NumericBase


@pytest.mark.parametrize("text, base, expected", [
    ("1010", NumericBase.BIN, 10),
    ("777", NumericBase.OCT, 511),
    ("255", NumericBase.DEC, 255),
    ("FF", NumericBase.HEX, 255),
    ("ff", NumericBase.HEX, 255),
    ("0", NumericBase.HEX, 0),
])
def test_parse_in_base(text, base, expected):
    assert parse_in_base(text, base) == expected


@pytest.mark.parametrize("value, base, expected", [
    (10, NumericBase.BIN, "1010"),
    (511, NumericBase.OCT, "777"),
    (255, NumericBase.HEX, "FF"),
    (48879, 16, "BEEF"),
    (0, NumericBase.BIN, "0"),
])
def test_format_in_base(value, base, expected):
    assert format_in_base(value, base) == expected


def test_invalid_digit_reports_position():
    with pytest.raises(InvalidDigit) as excinfo:
        parse_in_base("1021", NumericBase.BIN)
    assert excinfo.value.position == 2
    assert excinfo.value.base == 2


def test_empty_text_is_invalid():
    with pytest.raises(InvalidDigit):
        parse_in_base("", NumericBase.DEC)


def test_negative_values_cannot_be_formatted():
    with pytest.raises(DomainError):
        format_in_base(-1, NumericBase.HEX)


def test_convert_base():
    assert convert_base("777", NumericBase.OCT, NumericBase.BIN) == "111111111"
    assert convert_base("11111111", NumericBase.BIN, NumericBase.HEX) == "FF"


def test_digit_alphabet():
    assert digit_alphabet(NumericBase.OCT) == "01234567"
    assert is_valid_digit("a", NumericBase.HEX)
    assert not is_valid_digit("8", NumericBase.OCT)
    assert not is_valid_digit("10", NumericBase.DEC)


def test_bitwise_helpers_stay_in_one_byte():
    assert bit_and(0x1F0, 0x0FF) == 0xF0
    assert bit_or(0x0F, 0x100) == 0x0F
    assert bit_xor(0xFF, 0x0F) == 0xF0
    assert bit_not(0) == 0xFF
    assert bit_not(0xFF) == 0
    assert shift_left(0x81) == 0x02
    assert shift_right(0x81) == 0x40
    assert shift_left(1, 3) == 8


@pytest.mark.parametrize("op, value, operand, expected", [
    (BitwiseOp.AND, 0x1234, None, 0x34),
    (BitwiseOp.OR, 0x01, None, 0xFF),
    (BitwiseOp.XOR, 0x5A, None, 0xA5),
    (BitwiseOp.AND, 0x5A, 0x0F, 0x0A),
    (BitwiseOp.NOT, 0x0F, 0x33, 0xF0),
    (BitwiseOp.LSHIFT, 0x01, None, 0x02),
    (BitwiseOp.RSHIFT, 0x80, 4, 0x08),
])
def test_apply_bitwise(op, value, operand, expected):
    assert apply_bitwise(op, value, operand) == expected


def test_negative_shift_count_is_domain_error():
    with pytest.raises(DomainError):
        shift_left(1, -1)
    with pytest.raises(DomainError):
        shift_right(1, -2)
    with pytest.raises(DomainError):
        apply_bitwise(BitwiseOp.LSHIFT, 1, -1)
