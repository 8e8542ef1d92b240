"""
Tire Size Calculator (tiresize)

Unit conversions and tire-size listings for a tire-size calculator:
sidewall height, overall tire height, circumference, revolutions per
mile or km, and a width/aspect-ratio lister filtered by tire height.

Usage:
    python -m tiresize height --width 245 --aspect-ratio 30 --wheel-diameter 16
    python -m tiresize make-example
    python -m tiresize list-tires --input example_sweep.json --table
    python -m tiresize serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Tire Size Calculator Project"

from tiresize.errors import InvalidUnitError
from tiresize.models.inputs import TireDataForm, HeightLimits, TireSweep
from tiresize.models.outputs import Tire, TireListResult
from tiresize.physics.conversions import (
    calculate_sidewall_height,
    calculate_tire_height,
    calculate_circumference,
    calculate_revs,
    Circumference,
    Revs,
)
from tiresize.generator.sequences import stepped_range
from tiresize.generator.tires import list_tires_per_wheel_diameter, list_tires

__all__ = [
    "InvalidUnitError",
    "TireDataForm",
    "HeightLimits",
    "TireSweep",
    "Tire",
    "TireListResult",
    "calculate_sidewall_height",
    "calculate_tire_height",
    "calculate_circumference",
    "calculate_revs",
    "Circumference",
    "Revs",
    "stepped_range",
    "list_tires_per_wheel_diameter",
    "list_tires",
]
