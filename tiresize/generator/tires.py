"""
Tire-size lister.

Enumerates width/aspect-ratio combinations for one wheel diameter and keeps
the ones whose overall height falls inside a window.

CONVENTIONS:
- Widths and aspect ratios step by 5
- Widths that are a multiple of 10 (200, 210, ...) are not sold and are skipped
- The height window is exclusive at both ends
"""

import logging
from typing import Optional

from tiresize.models.inputs import HeightLimits, TireDataForm, TireSweep
from tiresize.models.outputs import Tire, TireListResult
from tiresize.physics.conversions import calculate_tire_height

logger = logging.getLogger(__name__)

TIRE_SWEEP_STEP = 5
WIDTH_DECADE = 10


def _sort_key(tire: Tire) -> tuple[float, float, float]:
    return (tire.height, tire.width, tire.aspect_ratio)


def list_tires_per_wheel_diameter(
    min: TireDataForm,
    max: TireDataForm,
    wheel_diameter: float,
    height_limits: Optional[HeightLimits] = None,
) -> list[Tire]:
    """
    List tire sizes that fit a wheel diameter within a height window.

    Args:
        min: Lower endpoint (smallest width and aspect ratio)
        max: Upper endpoint (largest width and aspect ratio)
        wheel_diameter: Rim diameter in inches
        height_limits: Exclusive height window in inches. Defaults to
                       min.height_limit .. max.height_limit

    Returns:
        Matching tires sorted by height, then width, then aspect ratio.
        Empty if min lies above max.
    """
    if height_limits is None:
        height_limits = HeightLimits(min=min.height_limit, max=max.height_limit)

    items: list[Tire] = []
    candidates = 0

    width = min.width
    while width <= max.width:
        if width % WIDTH_DECADE != 0:
            aspect_ratio = min.aspect_ratio
            while aspect_ratio <= max.aspect_ratio:
                candidates += 1
                height = calculate_tire_height(width, aspect_ratio, wheel_diameter)
                if height_limits.min < height < height_limits.max:
                    items.append(
                        Tire(
                            width=width,
                            aspect_ratio=aspect_ratio,
                            wheel_diameter=wheel_diameter,
                        )
                    )
                aspect_ratio += TIRE_SWEEP_STEP
        width += TIRE_SWEEP_STEP

    items.sort(key=_sort_key)

    logger.debug(
        "Checked %d candidates for %g in wheel, %d within %g-%g in",
        candidates, wheel_diameter, len(items), height_limits.min, height_limits.max,
    )
    return items


def list_tires(sweep: TireSweep) -> TireListResult:
    """Run the lister from a TireSweep and wrap the result."""
    height_limits = sweep.height_limits or sweep.default_height_limits()
    tires = list_tires_per_wheel_diameter(
        sweep.min,
        sweep.max,
        sweep.wheel_diameter,
        height_limits,
    )
    return TireListResult(
        wheel_diameter=sweep.wheel_diameter,
        height_limits=height_limits,
        tires=tires,
    )
