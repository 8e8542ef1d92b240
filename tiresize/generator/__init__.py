"""
Generators for stepped integer ranges and tire-size listings.
"""

from tiresize.generator.sequences import stepped_range
from tiresize.generator.tires import list_tires_per_wheel_diameter, list_tires

__all__ = ["stepped_range", "list_tires_per_wheel_diameter", "list_tires"]
