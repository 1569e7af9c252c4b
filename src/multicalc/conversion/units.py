"""
Unit Conversion
===============
Category-based conversion for the unit converter screen.

Two kinds of categories exist:
- Linear (length, weight, area, volume): every unit has a factor relative
  to the category's canonical unit (m, kg, m², m³).
- Offset (temperature): units are related by affine maps, so each unit
  defines a map to Celsius and back.

The default table is built once at import from scipy.constants and is
read-only afterwards; UnitConverter takes the table it should use.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
from types import MappingProxyType
from typing import Callable, Mapping, Union

from scipy import constants

from multicalc.errors import UnknownCategory, UnknownUnit
from multicalc.utils import (
    celsius_to_fahrenheit, celsius_to_kelvin, fahrenheit_to_celsius, kelvin_to_celsius
)

logger = logging.getLogger(__name__)


class UnitCategory(StrEnum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    AREA = "area"
    VOLUME = "volume"


@dataclass(frozen=True)
class OffsetUnit:
    """A unit related to Celsius by an affine map."""
    to_celsius: Callable[[float], float]
    from_celsius: Callable[[float], float]


def _identity(value: float) -> float:
    return value


@dataclass(frozen=True)
class UnitConversionTable:
    linear: Mapping[str, Mapping[str, float]] = field(default_factory=dict)
    offset: Mapping[str, Mapping[str, OffsetUnit]] = field(default_factory=dict)

    @staticmethod
    def build(
        linear: dict[str, dict[str, float]],
        offset: dict[str, dict[str, OffsetUnit]],
    ) -> UnitConversionTable:
        """Freeze plain dicts into a read-only table."""
        return UnitConversionTable(
            linear=MappingProxyType({c: MappingProxyType(dict(u)) for c, u in linear.items()}),
            offset=MappingProxyType({c: MappingProxyType(dict(u)) for c, u in offset.items()}),
        )

    def categories(self) -> list[str]:
        return [*self.linear.keys(), *self.offset.keys()]

    def units(self, category: str) -> list[str]:
        return list(self.category_units(category).keys())

    def category_units(self, category: str) -> Mapping[str, Union[float, OffsetUnit]]:
        if category in self.linear:
            return self.linear[category]
        if category in self.offset:
            return self.offset[category]
        raise UnknownCategory(f"Unknown unit category '{category}'.")


_GALLON = constants.gallon  # US liquid gallon

DEFAULT_CONVERSION_TABLE = UnitConversionTable.build(
    linear={
        UnitCategory.LENGTH: {
            "m": 1.0,
            "km": constants.kilo,
            "cm": constants.centi,
            "mm": constants.milli,
            "mi": constants.mile,
            "yd": constants.yard,
            "ft": constants.foot,
            "in": constants.inch,
        },
        UnitCategory.WEIGHT: {
            "kg": 1.0,
            "g": constants.gram,
            "mg": constants.milli * constants.gram,
            "lb": constants.pound,
            "oz": constants.ounce,
        },
        UnitCategory.AREA: {
            "m²": 1.0,
            "km²": constants.kilo ** 2,
            "cm²": constants.centi ** 2,
            "mm²": constants.milli ** 2,
            "mi²": constants.mile ** 2,
            "yd²": constants.yard ** 2,
            "ft²": constants.foot ** 2,
            "in²": constants.inch ** 2,
        },
        UnitCategory.VOLUME: {
            "m³": 1.0,
            "L": constants.liter,
            "mL": constants.milli * constants.liter,
            "gal": _GALLON,
            "qt": _GALLON / 4,
            "pt": _GALLON / 8,
        },
    },
    offset={
        UnitCategory.TEMPERATURE: {
            "C": OffsetUnit(to_celsius=_identity, from_celsius=_identity),
            "F": OffsetUnit(to_celsius=fahrenheit_to_celsius, from_celsius=celsius_to_fahrenheit),
            "K": OffsetUnit(to_celsius=kelvin_to_celsius, from_celsius=celsius_to_kelvin),
        },
    },
)


class UnitConverter:
    """
    Converts values between units of one category.

    Unknown categories and units are reported as errors instead of passing
    the input value through unchanged.
    """

    def __init__(self, table: UnitConversionTable = DEFAULT_CONVERSION_TABLE) -> None:
        self.table = table

    def categories(self) -> list[str]:
        return self.table.categories()

    def units(self, category: str) -> list[str]:
        return self.table.units(str(category))

    def convert(self, value: float, from_unit: str, to_unit: str, category: str) -> float:
        """
        Convert `value` from `from_unit` to `to_unit` within `category`.

        Raises:
            UnknownCategory: If the table has no such category.
            UnknownUnit: If either unit is not part of the category.
        """
        category = str(category)
        units = self.table.category_units(category)
        for unit in (from_unit, to_unit):
            if unit not in units:
                raise UnknownUnit(f"Unknown unit '{unit}' in category '{category}'.")

        if category in self.table.offset:
            celsius = units[from_unit].to_celsius(value)
            result = units[to_unit].from_celsius(celsius)
        else:
            result = value * units[from_unit] / units[to_unit]

        logger.debug(f"{value} {from_unit} -> {result} {to_unit} ({category})")
        return result


_default_converter = UnitConverter()


def convert_unit(value: float, from_unit: str, to_unit: str, category: str) -> float:
    """Convert with the default table."""
    return _default_converter.convert(value, from_unit, to_unit, category)
