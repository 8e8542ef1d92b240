"""
Pytest configuration and shared fixtures.
"""

import pytest
from tiresize.models.inputs import TireDataForm, HeightLimits, TireSweep


@pytest.fixture
def min_form() -> TireDataForm:
    """Lower sweep endpoint: 205/40, taller than 24 in."""
    return TireDataForm(width=205, aspect_ratio=40, height_limit=24.0)


@pytest.fixture
def max_form() -> TireDataForm:
    """Upper sweep endpoint: 225/50, shorter than 26 in."""
    return TireDataForm(width=225, aspect_ratio=50, height_limit=26.0)


@pytest.fixture
def basic_sweep(min_form, max_form) -> TireSweep:
    """Sweep on a 17 in wheel using the endpoints' height limits."""
    return TireSweep(min=min_form, max=max_form, wheel_diameter=17)


@pytest.fixture
def wide_limits() -> HeightLimits:
    """Height window that lets every candidate through."""
    return HeightLimits(min=0.0, max=100.0)
