"""
Helpers to turn tire listings into a compact, human-readable console table.
"""

from __future__ import annotations

from typing import Any

from tiresize.models.outputs import TireListResult


def _fmt_float(value: Any, unit: str = "", zero_default: str = "n/a") -> str:
    """Safely format a float with optional unit suffix."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return zero_default
    suffix = f" {unit}" if unit else ""
    return f"{fval:.2f}{suffix}"


def format_tire_table(result: TireListResult, max_rows: int | None = None) -> list[str]:
    """Render a tire listing as table lines, shortest tire first."""
    lines = [
        f"Wheel diameter: {result.wheel_diameter:g} in | "
        f"height window: {_fmt_float(result.height_limits.min)}-"
        f"{_fmt_float(result.height_limits.max)} in",
    ]
    if not result.tires:
        lines.append("No tire sizes fall inside the height window.")
        return lines

    shown = result.tires if max_rows is None else result.tires[:max_rows]
    lines.append(f"{'Size':<14}{'Width':>8}{'Aspect':>8}{'Height':>12}")
    for tire in shown:
        lines.append(
            f"{tire.size_label:<14}{tire.width:>8g}{tire.aspect_ratio:>8g}"
            f"{_fmt_float(tire.height, 'in'):>12}"
        )
    if len(shown) < result.count:
        lines.append(f"... showing {len(shown)} of {result.count}")
    return lines


def print_tire_table(result: TireListResult, max_rows: int | None = None) -> None:
    """Print a tire listing as a table."""
    for line in format_tire_table(result, max_rows=max_rows):
        print(line)
