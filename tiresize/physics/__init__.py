"""
Tire dimension calculations.

This module provides:
- A pint unit registry and the closed sets of unit tags
- Sidewall height, tire height, circumference and revolutions per distance

All functions are pure and do no input validation beyond unit tags.
"""

from tiresize.physics.units import (
    ureg,
    Q_,
    LinearUnit,
    SidewallUnit,
    DistanceUnit,
    PRECISION,
)
from tiresize.physics.conversions import (
    calculate_sidewall_height,
    calculate_tire_height,
    calculate_circumference,
    calculate_revs,
    round_to_precision,
    Circumference,
    Revs,
    REVS_CONVERSIONS,
)

__all__ = [
    # Units
    "ureg",
    "Q_",
    "LinearUnit",
    "SidewallUnit",
    "DistanceUnit",
    "PRECISION",
    # Conversions
    "calculate_sidewall_height",
    "calculate_tire_height",
    "calculate_circumference",
    "calculate_revs",
    "round_to_precision",
    "Circumference",
    "Revs",
    "REVS_CONVERSIONS",
]
