"""
Output models for tire-size listings.
"""

from pydantic import BaseModel, Field, computed_field

from tiresize.models.inputs import HeightLimits
from tiresize.physics.conversions import calculate_tire_height


class Tire(BaseModel):
    """
    A tire size mounted on a given wheel diameter.

    height is always derived from the other three fields and cannot be set.
    """
    width: float = Field(..., description="Tire section width in mm")
    aspect_ratio: float = Field(..., description="Aspect ratio in percent")
    wheel_diameter: float = Field(..., description="Rim diameter in inches")

    model_config = {"frozen": True}

    @computed_field
    @property
    def height(self) -> float:
        """Overall tire height in inches."""
        return calculate_tire_height(self.width, self.aspect_ratio, self.wheel_diameter)

    @property
    def size_label(self) -> str:
        """Size in the usual notation, e.g. 245/30R16."""
        return f"{self.width:g}/{self.aspect_ratio:g}R{self.wheel_diameter:g}"


class TireListResult(BaseModel):
    """Tire sizes found for one wheel diameter, shortest first."""
    wheel_diameter: float = Field(..., description="Rim diameter in inches")
    height_limits: HeightLimits = Field(..., description="Height window that was applied")
    tires: list[Tire] = Field(default_factory=list, description="Matching tires, sorted by height")

    @computed_field
    @property
    def count(self) -> int:
        """Number of matching tires."""
        return len(self.tires)
