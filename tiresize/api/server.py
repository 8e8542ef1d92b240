"""
FastAPI server for the tire size calculator.

Provides REST API endpoints for every calculation.
"""

import logging

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from tiresize import __version__
from tiresize.errors import InvalidUnitError
from tiresize.generator.sequences import stepped_range
from tiresize.generator.tires import list_tires
from tiresize.models.inputs import TireSweep, example_sweep
from tiresize.models.outputs import TireListResult
from tiresize.physics.conversions import (
    calculate_circumference,
    calculate_revs,
    calculate_sidewall_height,
    calculate_tire_height,
)
from tiresize.physics.units import DistanceUnit, LinearUnit, SidewallUnit

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Tire Size Calculator API",
    description="""
    Sidewall height, tire height, circumference, revolutions per distance
    and tire-size listings for a wheel diameter.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class SidewallRequest(BaseModel):
    """Request body for /sidewall-height."""
    aspect_ratio: float = Field(..., description="Aspect ratio in percent")
    width: float = Field(..., description="Tire section width in mm")
    unit: SidewallUnit = Field(default=SidewallUnit.INCH, description="Result unit")


class TireHeightRequest(BaseModel):
    """Request body for /tire-height."""
    width: float = Field(..., description="Tire section width in mm")
    aspect_ratio: float = Field(..., description="Aspect ratio in percent")
    wheel_diameter: float = Field(..., description="Rim diameter in inches")


class CircumferenceRequest(BaseModel):
    """Request body for /circumference."""
    diameter: float = Field(..., description="Tire diameter")
    diameter_unit: str = Field(default=LinearUnit.INCH.value, description="inch or cm")
    circumference_unit: str = Field(default=LinearUnit.INCH.value, description="inch or cm")


class RevsRequest(BaseModel):
    """Request body for /revs."""
    value: float = Field(..., description="Circumference")
    unit: str = Field(..., description="Circumference unit, inch or cm")


class ValueResponse(BaseModel):
    """A single computed value."""
    value: float
    unit: str


class CircumferenceResponse(BaseModel):
    """Computed circumference."""
    value: float
    unit: LinearUnit


class RevsResponse(BaseModel):
    """Computed revolutions per distance."""
    value: float
    unit: DistanceUnit


class RangeResponse(BaseModel):
    """Stepped integer range."""
    values: list[int]


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/units", tags=["Reference"])
async def list_units():
    """Get the supported unit tags."""
    return {
        "sidewall_units": [u.value for u in SidewallUnit],
        "linear_units": [u.value for u in LinearUnit],
        "distance_units": [u.value for u in DistanceUnit],
        "revs_mapping": {"inch": "mile", "cm": "km"},
    }


@app.get("/example", response_model=TireSweep, tags=["Reference"])
async def get_example():
    """Get an example tire sweep."""
    return example_sweep()


@app.post("/sidewall-height", response_model=ValueResponse, tags=["Calculations"])
async def sidewall_height(request: SidewallRequest):
    """Calculate sidewall height in inches or mm."""
    value = calculate_sidewall_height(request.aspect_ratio, request.width, request.unit)
    return ValueResponse(value=value, unit=request.unit.value)


@app.post("/tire-height", response_model=ValueResponse, tags=["Calculations"])
async def tire_height(request: TireHeightRequest):
    """Calculate overall tire height in inches."""
    value = calculate_tire_height(request.width, request.aspect_ratio, request.wheel_diameter)
    return ValueResponse(value=value, unit="inch")


@app.post("/circumference", response_model=CircumferenceResponse, tags=["Calculations"])
async def circumference(request: CircumferenceRequest):
    """Calculate circumference from a diameter."""
    try:
        result = calculate_circumference(
            request.diameter, request.diameter_unit, request.circumference_unit
        )
    except InvalidUnitError as e:
        logger.warning("Rejected circumference unit %r", e.unit)
        raise HTTPException(status_code=400, detail=str(e))
    return CircumferenceResponse(value=result.value, unit=result.unit)


@app.post("/revs", response_model=RevsResponse, tags=["Calculations"])
async def revs(request: RevsRequest):
    """
    Calculate revolutions per distance.

    An inch circumference gives revolutions per mile, a cm circumference
    revolutions per km. Any other unit is rejected with "Invalid unit".
    """
    try:
        result = calculate_revs(request.value, request.unit)
    except InvalidUnitError as e:
        logger.warning("Rejected revs unit %r", e.unit)
        raise HTTPException(status_code=400, detail=str(e))
    return RevsResponse(value=result.value, unit=result.unit)


@app.get("/range", response_model=RangeResponse, tags=["Calculations"])
async def integer_range(
    start: int = Query(..., description="First value"),
    stop: int = Query(..., description="Excluded end value"),
    step: float = Query(default=1, description="Keep every step-th value"),
):
    """Generate a stepped integer range, counting down if start > stop."""
    return RangeResponse(values=stepped_range(start, stop, step))


@app.post("/tires", response_model=TireListResult, tags=["Tires"])
async def tires(sweep: TireSweep):
    """
    List tire sizes that fit a wheel diameter.

    Widths and aspect ratios are swept in steps of 5, widths that are a
    multiple of 10 are skipped, and only tires strictly inside the height
    window are returned, shortest first.
    """
    result = list_tires(sweep)
    logger.info("Listed %d tires for %g in wheel", result.count, sweep.wheel_diameter)
    return result
