"""
Tests for the range generator and tire lister.
"""

import math

import pytest

from tiresize.generator.sequences import stepped_range
from tiresize.generator.tires import list_tires_per_wheel_diameter, list_tires
from tiresize.models.inputs import TireDataForm, HeightLimits, TireSweep
from tiresize.models.outputs import Tire


class TestSteppedRange:
    """Tests for stepped_range."""

    def test_default_step(self):
        """Test a range with the default step."""
        assert stepped_range(1, 6) == [1, 2, 3, 4, 5]

    def test_custom_step(self):
        """Test a range with step 2."""
        assert stepped_range(0, 10, 2) == [0, 2, 4, 6, 8]

    def test_zero_step_is_empty(self):
        """Test that step 0 gives nothing."""
        assert stepped_range(1, 6, 0) == []

    def test_negative_step_is_empty(self):
        """Test that a negative step gives nothing."""
        assert stepped_range(1, 6, -1) == []

    def test_fractional_step_below_one_is_empty(self):
        """Test that any step under 1 gives nothing."""
        assert stepped_range(1, 6, 0.9) == []

    def test_reverse_order(self):
        """Test counting down when start > stop."""
        assert stepped_range(5, 1) == [5, 4, 3, 2]

    def test_single_element(self):
        """Test a one-element range."""
        assert stepped_range(2, 3) == [2]

    def test_equal_bounds_is_empty(self):
        """Test that start == stop gives nothing."""
        assert stepped_range(2, 2) == []
        assert stepped_range(7, 7, 3) == []

    def test_reverse_with_step(self):
        """Test counting down with a step."""
        assert stepped_range(10, 0, 3) == [10, 7, 4, 1]

    def test_step_rounds_half_up(self):
        """Test that a step of 1.5 behaves as 2 and 2.4 as 2."""
        assert stepped_range(0, 6, 1.5) == [0, 2, 4]
        assert stepped_range(0, 6, 2.4) == [0, 2, 4]
        assert stepped_range(0, 6, 2.5) == [0, 3]

    def test_infinite_step_keeps_start(self):
        """Test that an infinite step keeps only the first value."""
        assert stepped_range(0, 5, math.inf) == [0]
        assert stepped_range(5, 0, math.inf) == [5]

    def test_nan_step_is_empty(self):
        """Test that a NaN step keeps nothing."""
        assert stepped_range(0, 5, math.nan) == []

    def test_negative_bounds(self):
        """Test ranges crossing zero."""
        assert stepped_range(-2, 2) == [-2, -1, 0, 1]

    def test_ascending_property(self):
        """Test that ascending ranges stop one short of stop."""
        for start, stop in [(0, 1), (3, 9), (-5, 5)]:
            assert stepped_range(start, stop) == list(range(start, stop))

    def test_descending_property(self):
        """Test that descending ranges stop one short of stop."""
        for start, stop in [(1, 0), (9, 3), (5, -5)]:
            assert stepped_range(start, stop) == list(range(start, stop, -1))


class TestListTires:
    """Tests for list_tires_per_wheel_diameter."""

    def test_expected_sizes(self, min_form, max_form):
        """Test the sizes found for 205/40 to 225/50 on a 17 in wheel."""
        tires = list_tires_per_wheel_diameter(min_form, max_form, 17)

        sizes = [(t.width, t.aspect_ratio) for t in tires]
        assert sizes == [
            (225, 40),
            (205, 45),
            (215, 45),
            (225, 45),
            (205, 50),
            (215, 50),
            (225, 50),
        ]
        assert [t.height for t in tires] == [24.09, 24.26, 24.62, 24.97, 25.07, 25.46, 25.86]

    def test_sorted_by_height(self, min_form, max_form, wide_limits):
        """Test that output is non-decreasing in height."""
        tires = list_tires_per_wheel_diameter(min_form, max_form, 17, wide_limits)
        heights = [t.height for t in tires]
        assert heights == sorted(heights)

    def test_heights_inside_window(self, min_form, max_form):
        """Test that every tire is strictly inside the height window."""
        limits = HeightLimits(min=24.5, max=25.5)
        tires = list_tires_per_wheel_diameter(min_form, max_form, 17, limits)

        assert tires
        for tire in tires:
            assert limits.min < tire.height < limits.max

    def test_window_is_exclusive(self, min_form, max_form):
        """Test that heights equal to a limit are dropped."""
        limits = HeightLimits(min=24.09, max=25.86)
        tires = list_tires_per_wheel_diameter(min_form, max_form, 17, limits)

        heights = [t.height for t in tires]
        assert 24.09 not in heights
        assert 25.86 not in heights
        assert len(tires) == 5

    def test_no_width_divisible_by_ten(self, wide_limits):
        """Test that 200, 210, ... widths are skipped."""
        tires = list_tires_per_wheel_diameter(
            TireDataForm(width=195, aspect_ratio=35, height_limit=0),
            TireDataForm(width=285, aspect_ratio=60, height_limit=0),
            18,
            wide_limits,
        )
        assert tires
        assert all(t.width % 10 != 0 for t in tires)

    def test_even_start_width_is_skipped(self, wide_limits):
        """Test that a sweep starting on a decade still steps by 5."""
        tires = list_tires_per_wheel_diameter(
            TireDataForm(width=200, aspect_ratio=40, height_limit=0),
            TireDataForm(width=220, aspect_ratio=40, height_limit=0),
            16,
            wide_limits,
        )
        assert sorted(t.width for t in tires) == [205, 215]

    def test_ranges_are_inclusive(self, wide_limits):
        """Test that max width and max aspect ratio are included."""
        tires = list_tires_per_wheel_diameter(
            TireDataForm(width=235, aspect_ratio=35, height_limit=0),
            TireDataForm(width=245, aspect_ratio=45, height_limit=0),
            19,
            wide_limits,
        )
        sizes = {(t.width, t.aspect_ratio) for t in tires}
        assert (245, 45) in sizes
        assert len(sizes) == 6

    def test_ties_broken_by_width(self, wide_limits):
        """Test that equal heights are ordered by width, then aspect ratio."""
        # 175 * 45 == 225 * 35, so both sizes are the same height
        tires = list_tires_per_wheel_diameter(
            TireDataForm(width=175, aspect_ratio=35, height_limit=0),
            TireDataForm(width=225, aspect_ratio=45, height_limit=0),
            15,
            wide_limits,
        )
        tied_height = Tire(width=175, aspect_ratio=45, wheel_diameter=15).height
        tied = [t for t in tires if t.height == tied_height]
        assert [(t.width, t.aspect_ratio) for t in tied] == [(175, 45), (225, 35)]

    def test_inverted_range_is_empty(self, min_form, max_form):
        """Test that min above max gives no tires."""
        assert list_tires_per_wheel_diameter(max_form, min_form, 17) == []

    def test_wheel_diameter_recorded(self, min_form, max_form):
        """Test that tires carry the wheel diameter they were sized for."""
        tires = list_tires_per_wheel_diameter(min_form, max_form, 17)
        assert all(t.wheel_diameter == 17 for t in tires)

    def test_default_limits_from_forms(self, min_form, max_form):
        """Test that omitted limits match the forms' height limits."""
        explicit = list_tires_per_wheel_diameter(
            min_form, max_form, 17, HeightLimits(min=24.0, max=26.0)
        )
        assert list_tires_per_wheel_diameter(min_form, max_form, 17) == explicit


class TestListTiresFromSweep:
    """Tests for list_tires."""

    def test_result_wraps_tires(self, basic_sweep):
        """Test that the result carries tires, limits and count."""
        result = list_tires(basic_sweep)

        assert result.count == 7
        assert result.wheel_diameter == 17
        assert result.height_limits == HeightLimits(min=24.0, max=26.0)
        assert result.tires[0].size_label == "225/40R17"

    def test_explicit_limits_override(self, min_form, max_form):
        """Test that the sweep's own window is applied."""
        sweep = TireSweep(
            min=min_form,
            max=max_form,
            wheel_diameter=17,
            height_limits=HeightLimits(min=25.0, max=26.0),
        )
        result = list_tires(sweep)
        assert result.count == 3
        assert all(t.height > 25.0 for t in result.tires)
