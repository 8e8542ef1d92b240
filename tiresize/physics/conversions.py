"""
Tire dimension conversions.

Provides:
- Sidewall height from width and aspect ratio (inch or mm)
- Overall tire height from a tire size
- Circumference from a diameter (inch or cm)
- Revolutions per mile or km from a circumference

CONVENTIONS:
- Tire width in mm, aspect ratio in percent, wheel diameter in inches
  (the usual 245/30R16 notation), so tire height mixes both systems
- Every result is rounded to PRECISION decimals, half up
- Inputs are not range-checked; negative or zero dimensions are computed
  mechanically
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

import pint

from tiresize.errors import InvalidUnitError
from tiresize.physics.units import (
    Q_,
    CM_PER_INCH,
    CM_PER_KM,
    INCH_PER_CM,
    INCH_PER_MILE,
    INCH_PER_MM,
    MM_PER_INCH,
    PRECISION,
    DistanceUnit,
    LinearUnit,
    SidewallUnit,
    parse_distance_unit,
    parse_linear_unit,
)

logger = logging.getLogger(__name__)

# Above this magnitude fixed-point rounding has no effect
_ROUNDING_LIMIT = 1e21


@dataclass(frozen=True)
class Circumference:
    """Rolling circumference of a tire."""
    value: float
    unit: LinearUnit

    def __post_init__(self):
        object.__setattr__(self, "unit", parse_linear_unit(self.unit))

    def as_quantity(self) -> pint.Quantity:
        """Circumference as a pint quantity."""
        return Q_(self.value, self.unit.value)


@dataclass(frozen=True)
class Revs:
    """Tire revolutions per mile or per km."""
    value: float
    unit: DistanceUnit

    def __post_init__(self):
        object.__setattr__(self, "unit", parse_distance_unit(self.unit))

    def as_quantity(self) -> pint.Quantity:
        """Revolutions per distance as a pint quantity (e.g. 1/mile)."""
        return Q_(self.value, f"1/{self.unit.value}")


# Circumference unit -> (distance unit, circumference units per distance unit)
REVS_CONVERSIONS: dict[LinearUnit, tuple[DistanceUnit, int]] = {
    LinearUnit.INCH: (DistanceUnit.MILE, INCH_PER_MILE),
    LinearUnit.CM: (DistanceUnit.KM, CM_PER_KM),
}


def round_to_precision(value: float, precision: int = PRECISION) -> float:
    """
    Round half up to a fixed number of decimals.

    Works on the exact binary value of the float, so 0.125 becomes 0.13
    where the built-in round() would give 0.12. Non-finite values and very
    large magnitudes are returned unchanged.
    """
    if not math.isfinite(value) or abs(value) >= _ROUNDING_LIMIT:
        return value
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_sidewall_height(
    aspect_ratio: float,
    width: float,
    unit: SidewallUnit | str = SidewallUnit.INCH,
) -> float:
    """
    Calculate sidewall height.

    Formula: sidewall = (aspect_ratio / 100) * width

    Args:
        aspect_ratio: Sidewall height as a percentage of width (e.g. 30)
        width: Tire section width in mm (e.g. 255)
        unit: "inch" converts the result from mm to inches; anything else
              returns the mm value

    Returns:
        Sidewall height rounded to 2 decimals

    Example:
        >>> calculate_sidewall_height(30, 255)
        3.01
        >>> calculate_sidewall_height(30, 255, "mm")
        76.5
    """
    sidewall_height = (aspect_ratio / 100) * width
    if unit == SidewallUnit.INCH:
        sidewall_height *= INCH_PER_MM
    return round_to_precision(sidewall_height)


def calculate_tire_height(
    width: float,
    aspect_ratio: float,
    wheel_diameter: float,
) -> float:
    """
    Calculate overall tire height (outside diameter) in inches.

    Formula: height = 2 * (width * aspect_ratio / 100) / 25.4 + wheel_diameter

    Args:
        width: Tire section width in mm
        aspect_ratio: Aspect ratio in percent
        wheel_diameter: Rim diameter in inches

    Returns:
        Tire height in inches, rounded to 2 decimals

    Example:
        >>> calculate_tire_height(245, 30, 16)
        21.79
    """
    sidewall_mm = (width * aspect_ratio) / 100
    return round_to_precision((sidewall_mm * 2) / MM_PER_INCH + wheel_diameter)


def calculate_circumference(
    diameter: float,
    diameter_unit: LinearUnit | str,
    circumference_unit: LinearUnit | str = LinearUnit.INCH,
) -> Circumference:
    """
    Calculate rolling circumference from a diameter.

    The diameter is converted to the requested unit first (2.54 cm per inch,
    0.3937008 inch per cm), then multiplied by pi.

    Args:
        diameter: Tire diameter
        diameter_unit: Unit of the diameter, "inch" or "cm"
        circumference_unit: Unit of the result, "inch" or "cm"

    Returns:
        Circumference in circumference_unit, rounded to 2 decimals

    Raises:
        InvalidUnitError: If circumference_unit is not inch or cm

    Notes:
        - An unrecognized diameter_unit is not rejected; the diameter is used
          as if it were already in circumference_unit
    """
    target = parse_linear_unit(circumference_unit)

    converted_diameter = diameter
    if diameter_unit != target:
        if diameter_unit == LinearUnit.INCH:
            converted_diameter = diameter * CM_PER_INCH
        elif diameter_unit == LinearUnit.CM:
            converted_diameter = diameter * INCH_PER_CM
        else:
            logger.warning(
                "Unrecognized diameter unit %r, using diameter unconverted", diameter_unit
            )

    return Circumference(
        value=round_to_precision(converted_diameter * math.pi),
        unit=target,
    )


def calculate_revs(value: float, unit: LinearUnit | str) -> Revs:
    """
    Calculate tire revolutions per distance from a circumference.

    An inch circumference gives revolutions per mile (63360 in/mile), a cm
    circumference gives revolutions per km (100000 cm/km).

    Args:
        value: Circumference
        unit: Circumference unit, "inch" or "cm"

    Returns:
        Revs rounded to 2 decimals, in the distance unit tied to unit.
        A zero circumference gives an infinite count.

    Raises:
        InvalidUnitError: If unit is not inch or cm ("Invalid unit")

    Example:
        >>> calculate_revs(201.88, "cm")
        Revs(value=495.34, unit=<DistanceUnit.KM: 'km'>)
    """
    try:
        distance_unit, factor = REVS_CONVERSIONS[LinearUnit(unit)]
    except ValueError:
        raise InvalidUnitError(unit=unit) from None

    if value == 0:
        revs = math.copysign(math.inf, value)
    else:
        revs = factor / value

    return Revs(value=round_to_precision(revs), unit=distance_unit)
