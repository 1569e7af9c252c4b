import pytest

from multicalc.conversion.units import (
    DEFAULT_CONVERSION_TABLE, OffsetUnit, UnitCategory, UnitConversionTable, UnitConverter,
    convert_unit,
)
from multicalc.errors import ConversionError, UnknownCategory, UnknownUnit


@pytest.mark.parametrize("value, from_unit, to_unit, category, expected", [
    (1, "m", "ft", UnitCategory.LENGTH, 3.28084),
    (1, "mi", "km", UnitCategory.LENGTH, 1.609344),
    (12, "in", "ft", UnitCategory.LENGTH, 1.0),
    (1, "kg", "lb", UnitCategory.WEIGHT, 2.20462),
    (16, "oz", "lb", UnitCategory.WEIGHT, 1.0),
    (1, "km²", "m²", UnitCategory.AREA, 1e6),
    (1, "gal", "qt", UnitCategory.VOLUME, 4.0),
    (1, "L", "mL", UnitCategory.VOLUME, 1000.0),
    (0, "C", "F", UnitCategory.TEMPERATURE, 32.0),
    (100, "C", "K", UnitCategory.TEMPERATURE, 373.15),
    (-40, "F", "C", UnitCategory.TEMPERATURE, -40.0),
    (0, "K", "F", UnitCategory.TEMPERATURE, -459.67),
])
def test_convert(value, from_unit, to_unit, category, expected):
    assert convert_unit(value, from_unit, to_unit, category) == pytest.approx(expected, rel=1e-5)


@pytest.mark.parametrize("category", list(UnitCategory))
def test_round_trip_every_unit_pair(category):
    converter = UnitConverter()
    units = converter.units(category)
    for a in units:
        for b in units:
            there = converter.convert(12.5, a, b, category)
            assert converter.convert(there, b, a, category) == pytest.approx(12.5)


def test_same_unit_is_identity():
    assert convert_unit(3.5, "ft", "ft", "length") == pytest.approx(3.5)


def test_unknown_unit():
    with pytest.raises(UnknownUnit):
        convert_unit(1, "m", "lb", UnitCategory.LENGTH)
    with pytest.raises(UnknownUnit):
        convert_unit(1, "furlong", "m", UnitCategory.LENGTH)


def test_unknown_category():
    with pytest.raises(UnknownCategory):
        convert_unit(1, "m", "ft", "speed")


def test_conversion_errors_share_base():
    with pytest.raises(ConversionError):
        convert_unit(1, "m", "ft", "speed")


def test_default_table_lists_all_categories():
    assert set(DEFAULT_CONVERSION_TABLE.categories()) == {c.value for c in UnitCategory}
    assert DEFAULT_CONVERSION_TABLE.units(UnitCategory.TEMPERATURE) == ["C", "F", "K"]


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CONVERSION_TABLE.linear[UnitCategory.LENGTH]["m"] = 2.0


def test_injected_table():
    table = UnitConversionTable.build(
        linear={"time": {"s": 1.0, "min": 60.0, "h": 3600.0}},
        offset={"scale": {"a": OffsetUnit(to_celsius=lambda v: v - 1, from_celsius=lambda v: v + 1)}},
    )
    converter = UnitConverter(table)
    assert converter.categories() == ["time", "scale"]
    assert converter.convert(2, "h", "min", "time") == pytest.approx(120)
    assert converter.convert(5, "a", "a", "scale") == pytest.approx(5)
    with pytest.raises(UnknownCategory):
        converter.convert(1, "m", "ft", "length")
