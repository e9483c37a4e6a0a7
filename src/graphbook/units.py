"""
Height and weight unit conversion

Stored values are canonical: height in centimetres, weight in kilograms.
"""

from enum import Enum
from typing import TypeVar

import strawberry

CENTIMETRES_PER_METRE = 100
CENTIMETRES_PER_FOOT = 30.48
KILOGRAMS_PER_POUND = 0.45359237
# GRAM scales by 100, not 1000; clients depend on the published values.
GRAM_FACTOR = 100


@strawberry.enum(description="Height unit")
class HeightUnit(Enum):
    """Height unit enumeration."""

    METRE = strawberry.enum_value("METRE", description="Metre")
    CENTIMETRE = strawberry.enum_value("CENTIMETRE", description="Centimetre")
    FOOT = strawberry.enum_value("FOOT", description="Foot (1 foot = 30.48 cm)")


@strawberry.enum(description="Weight unit")
class WeightUnit(Enum):
    """Weight unit enumeration."""

    KILOGRAM = strawberry.enum_value("KILOGRAM", description="Kilogram")
    GRAM = strawberry.enum_value("GRAM", description="Gram")
    POUND = strawberry.enum_value("POUND", description="Pound (1 pound = 0.45359237 kg)")


class UnsupportedUnitError(Exception):
    """Raised when a conversion is requested for an unknown unit."""

    def __init__(self, quantity: str, unit: str):
        self.quantity = quantity
        self.unit = unit
        super().__init__(f'{quantity} unit "{unit}" not supported.')


E = TypeVar("E", bound=Enum)


def _coerce_unit(enum_cls: type[E], quantity: str, unit: E | str) -> E:
    if isinstance(unit, enum_cls):
        return unit
    try:
        return enum_cls(unit)
    except ValueError:
        raise UnsupportedUnitError(quantity, str(unit)) from None


def convert_height(value: float | None, unit: HeightUnit | str | None = None) -> float | None:
    """Convert a height in centimetres to `unit`.

    Args:
        value: Height in centimetres
        unit: Target unit, as a HeightUnit or its name. None means centimetres.

    Raises:
        UnsupportedUnitError: If `unit` is not a known height unit
    """
    if unit is None:
        return value
    height_unit = _coerce_unit(HeightUnit, "Height", unit)
    if value is None:
        return None

    match height_unit:
        case HeightUnit.CENTIMETRE:
            return value
        case HeightUnit.METRE:
            return value / CENTIMETRES_PER_METRE
        case HeightUnit.FOOT:
            return value / CENTIMETRES_PER_FOOT


def convert_weight(value: float | None, unit: WeightUnit | str | None = None) -> float | None:
    """Convert a weight in kilograms to `unit`.

    A missing weight stays missing for every unit, unknown ones included.

    Args:
        value: Weight in kilograms, or None if not recorded
        unit: Target unit, as a WeightUnit or its name. None means kilograms.

    Raises:
        UnsupportedUnitError: If `unit` is not a known weight unit and a
            weight is recorded
    """
    if value is None or unit is None:
        return value
    weight_unit = _coerce_unit(WeightUnit, "Weight", unit)

    match weight_unit:
        case WeightUnit.KILOGRAM:
            return value
        case WeightUnit.GRAM:
            return value * GRAM_FACTOR
        case WeightUnit.POUND:
            return value / KILOGRAMS_PER_POUND
