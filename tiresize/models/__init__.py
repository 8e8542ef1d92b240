"""
Pydantic models for tire-size sweep inputs and outputs.
"""

from tiresize.models.inputs import TireDataForm, HeightLimits, TireSweep
from tiresize.models.outputs import Tire, TireListResult

__all__ = [
    "TireDataForm",
    "HeightLimits",
    "TireSweep",
    "Tire",
    "TireListResult",
]
