"""
Tests for Pydantic models.
"""

import pytest
from pydantic import ValidationError

from tiresize.models.inputs import TireDataForm, HeightLimits, TireSweep, example_sweep
from tiresize.models.outputs import Tire, TireListResult


class TestTireDataForm:
    """Tests for TireDataForm model."""

    def test_valid_form(self):
        """Test that a complete form is accepted."""
        form = TireDataForm(width=205, aspect_ratio=45, height_limit=24.5)
        assert form.width == 205
        assert form.aspect_ratio == 45

    def test_missing_field_rejected(self):
        """Test that all fields are required."""
        with pytest.raises(ValidationError):
            TireDataForm(width=205, aspect_ratio=45)

    def test_non_numeric_rejected(self):
        """Test that widths must be numbers."""
        with pytest.raises(ValidationError):
            TireDataForm(width="wide", aspect_ratio=45, height_limit=24)


class TestTireSweep:
    """Tests for TireSweep model."""

    def test_default_height_limits(self, basic_sweep):
        """Test that height limits default to the endpoints' limits."""
        assert basic_sweep.height_limits == HeightLimits(min=24.0, max=26.0)

    def test_explicit_height_limits_kept(self, min_form, max_form):
        """Test that provided limits are not overwritten."""
        sweep = TireSweep(
            min=min_form,
            max=max_form,
            wheel_diameter=17,
            height_limits=HeightLimits(min=20, max=30),
        )
        assert sweep.height_limits == HeightLimits(min=20, max=30)

    def test_from_json(self):
        """Test parsing a sweep from JSON data."""
        sweep = TireSweep.model_validate({
            "min": {"width": 205, "aspect_ratio": 40, "height_limit": 24},
            "max": {"width": 225, "aspect_ratio": 50, "height_limit": 26},
            "wheel_diameter": 17,
        })
        assert sweep.height_limits.max == 26

    def test_example_sweep(self):
        """Test that the example sweep is complete."""
        sweep = example_sweep()
        assert sweep.wheel_diameter == 17
        assert sweep.height_limits is not None


class TestTire:
    """Tests for Tire model."""

    def test_height_is_derived(self):
        """Test that height comes from the size."""
        tire = Tire(width=245, aspect_ratio=30, wheel_diameter=16)
        assert tire.height == pytest.approx(21.79)

    def test_supplied_height_is_ignored(self):
        """Test that height cannot be set independently."""
        tire = Tire(width=245, aspect_ratio=30, wheel_diameter=16, height=99.0)
        assert tire.height == pytest.approx(21.79)

    def test_tire_is_frozen(self):
        """Test that a tire cannot be modified after creation."""
        tire = Tire(width=245, aspect_ratio=30, wheel_diameter=16)
        with pytest.raises(ValidationError):
            tire.width = 255

    def test_height_serialized(self):
        """Test that height appears in dumped data."""
        data = Tire(width=245, aspect_ratio=30, wheel_diameter=16).model_dump()
        assert data["height"] == pytest.approx(21.79)

    def test_round_trip_recomputes_height(self):
        """Test that reloading dumped data gives the same tire."""
        tire = Tire(width=225, aspect_ratio=45, wheel_diameter=17)
        assert Tire.model_validate(tire.model_dump()) == tire

    def test_size_label(self):
        """Test the usual size notation."""
        assert Tire(width=245, aspect_ratio=30, wheel_diameter=16).size_label == "245/30R16"
        assert Tire(width=245, aspect_ratio=30, wheel_diameter=16.5).size_label == "245/30R16.5"


class TestTireListResult:
    """Tests for TireListResult model."""

    def test_count(self):
        """Test that count follows the tire list."""
        result = TireListResult(
            wheel_diameter=16,
            height_limits=HeightLimits(min=0, max=100),
            tires=[
                Tire(width=205, aspect_ratio=55, wheel_diameter=16),
                Tire(width=215, aspect_ratio=55, wheel_diameter=16),
            ],
        )
        assert result.count == 2
        assert result.model_dump()["count"] == 2

    def test_empty_result(self):
        """Test a result without tires."""
        result = TireListResult(wheel_diameter=16, height_limits=HeightLimits(min=0, max=1))
        assert result.tires == []
        assert result.count == 0
