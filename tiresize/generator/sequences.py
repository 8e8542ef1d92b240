"""
Stepped integer sequences.
"""

import math


def _round_half_up(value: float) -> float:
    """
    Round to the nearest integer, halves going up (2.5 -> 3).

    Infinite and NaN values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def stepped_range(start: int, stop: int, step: float = 1) -> list[int]:
    """
    Generate integers from start towards stop, excluding stop.

    Counts down when start > stop. Only every round(step)-th value is kept,
    counted from start. A step below 1 gives an empty list, an infinite
    step keeps only start and a NaN step keeps nothing.

    Examples:
        >>> stepped_range(1, 6)
        [1, 2, 3, 4, 5]
        >>> stepped_range(0, 10, 2)
        [0, 2, 4, 6, 8]
        >>> stepped_range(5, 1)
        [5, 4, 3, 2]
    """
    if step < 1:
        return []

    length = int(abs(stop - start))
    direction = 1 if start < stop else -1
    stride = _round_half_up(step)

    return [start + i * direction for i in range(length) if i % stride == 0]
