"""
Unit registry, unit tags and fixed conversion factors.

Uses pint for quantities handed back to callers. The conversion factors
below are fixed values rather than pint-derived ones so results round
identically to the calculator they were taken from.
"""

from enum import Enum

import pint

from tiresize.errors import InvalidUnitError

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# Conversion factors
INCH_PER_MM = 0.03937008
MM_PER_INCH = 25.4
CM_PER_INCH = 2.54
INCH_PER_CM = 0.3937008
INCH_PER_MILE = 63360
CM_PER_KM = 100000

# Decimal places kept on every computed value
PRECISION = 2


class LinearUnit(str, Enum):
    """Unit for diameters and circumferences."""
    INCH = "inch"
    CM = "cm"


class SidewallUnit(str, Enum):
    """Unit for sidewall heights."""
    INCH = "inch"
    MM = "mm"


class DistanceUnit(str, Enum):
    """Travelled distance that revolutions are counted over."""
    MILE = "mile"
    KM = "km"


def parse_linear_unit(unit) -> LinearUnit:
    """Coerce a unit tag to LinearUnit, raising InvalidUnitError otherwise."""
    try:
        return LinearUnit(unit)
    except ValueError:
        raise InvalidUnitError(unit=unit) from None


def parse_distance_unit(unit) -> DistanceUnit:
    """Coerce a unit tag to DistanceUnit, raising InvalidUnitError otherwise."""
    try:
        return DistanceUnit(unit)
    except ValueError:
        raise InvalidUnitError(unit=unit) from None


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude
