"""
Input models for tire-size sweeps.

These models describe the endpoints and height window of a sweep over
tire widths and aspect ratios for one wheel diameter.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class TireDataForm(BaseModel):
    """
    One endpoint (min or max) of a tire-size sweep.

    Width in mm, aspect ratio in percent, height limit in inches.
    """
    width: float = Field(..., description="Tire section width in mm, e.g. 205")
    aspect_ratio: float = Field(..., description="Sidewall height as % of width, e.g. 45")
    height_limit: float = Field(..., description="Overall tire height bound in inches")


class HeightLimits(BaseModel):
    """Exclusive window on overall tire height, in inches."""
    min: float = Field(..., description="Tires must be taller than this")
    max: float = Field(..., description="Tires must be shorter than this")


class TireSweep(BaseModel):
    """
    Parameters for listing tire sizes that fit one wheel diameter.

    Widths run from min.width to max.width and aspect ratios from
    min.aspect_ratio to max.aspect_ratio, both in steps of 5.
    If height_limits is not given it is taken from the endpoints'
    height_limit values.
    """
    min: TireDataForm = Field(..., description="Lower sweep endpoint")
    max: TireDataForm = Field(..., description="Upper sweep endpoint")
    wheel_diameter: float = Field(..., description="Rim diameter in inches")
    height_limits: Optional[HeightLimits] = Field(
        default=None,
        description="Height window. If None, uses min.height_limit and max.height_limit"
    )

    @model_validator(mode="after")
    def set_defaults(self) -> "TireSweep":
        """Fill in the height window from the endpoints."""
        if self.height_limits is None:
            object.__setattr__(self, "height_limits", self.default_height_limits())
        return self

    def default_height_limits(self) -> HeightLimits:
        """Height window spanned by the endpoints' height limits."""
        return HeightLimits(min=self.min.height_limit, max=self.max.height_limit)

    model_config = {
        "json_schema_extra": {
            "example": {
                "min": {"width": 205, "aspect_ratio": 40, "height_limit": 24},
                "max": {"width": 225, "aspect_ratio": 50, "height_limit": 26},
                "wheel_diameter": 17,
            }
        }
    }


def example_sweep() -> TireSweep:
    """Example sweep: 205/40 to 225/50 on a 17 in wheel, 24-26 in tall."""
    return TireSweep(
        min=TireDataForm(width=205, aspect_ratio=40, height_limit=24.0),
        max=TireDataForm(width=225, aspect_ratio=50, height_limit=26.0),
        wheel_diameter=17,
    )
