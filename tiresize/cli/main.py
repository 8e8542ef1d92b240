"""
Command-line interface for the tire size calculator.

Usage:
    python -m tiresize sidewall --aspect-ratio 30 --width 255 [--unit mm]
    python -m tiresize height --width 245 --aspect-ratio 30 --wheel-diameter 16
    python -m tiresize circumference --diameter 64.26 --diameter-unit cm [--unit cm]
    python -m tiresize revs --value 201.88 --unit cm
    python -m tiresize range 0 10 [--step 2]
    python -m tiresize make-example [--output example_sweep.json]
    python -m tiresize list-tires --input example_sweep.json [--table] [--output tires.json]
    python -m tiresize serve [--port 8000]
"""

import argparse
import json
import sys
from pathlib import Path

from tiresize import __version__
from tiresize.generator.sequences import stepped_range
from tiresize.generator.tires import list_tires
from tiresize.log import setup_logging
from tiresize.models.inputs import HeightLimits, TireDataForm, TireSweep, example_sweep
from tiresize.physics.conversions import (
    calculate_circumference,
    calculate_revs,
    calculate_sidewall_height,
    calculate_tire_height,
)
from tiresize.physics.units import LinearUnit, SidewallUnit
from tiresize.cli.readable_output import print_tire_table


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tiresize",
        description="Tire Size Calculator - sidewall height, tire height, circumference, "
                    "revolutions per distance and tire-size listings.",
    )
    parser.add_argument("--version", action="version", version=f"tiresize {__version__}")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Enable diagnostics on stderr at this level, e.g. DEBUG",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # sidewall command
    sidewall_parser = subparsers.add_parser(
        "sidewall",
        help="Calculate sidewall height",
    )
    sidewall_parser.add_argument("--aspect-ratio", type=float, required=True,
                                 help="Aspect ratio in percent, e.g. 30")
    sidewall_parser.add_argument("--width", type=float, required=True,
                                 help="Tire section width in mm, e.g. 255")
    sidewall_parser.add_argument(
        "--unit",
        choices=[u.value for u in SidewallUnit],
        default=SidewallUnit.INCH.value,
        help="Result unit (default: inch)",
    )

    # height command
    height_parser = subparsers.add_parser(
        "height",
        help="Calculate overall tire height in inches",
    )
    height_parser.add_argument("--width", type=float, required=True,
                               help="Tire section width in mm")
    height_parser.add_argument("--aspect-ratio", type=float, required=True,
                               help="Aspect ratio in percent")
    height_parser.add_argument("--wheel-diameter", type=float, required=True,
                               help="Rim diameter in inches")

    # circumference command
    circumference_parser = subparsers.add_parser(
        "circumference",
        help="Calculate circumference from a diameter",
    )
    circumference_parser.add_argument("--diameter", type=float, required=True,
                                      help="Tire diameter")
    circumference_parser.add_argument(
        "--diameter-unit",
        default=LinearUnit.INCH.value,
        help="Unit of the diameter, inch or cm (default: inch)",
    )
    circumference_parser.add_argument(
        "--unit",
        default=LinearUnit.INCH.value,
        help="Unit of the result, inch or cm (default: inch)",
    )

    # revs command
    revs_parser = subparsers.add_parser(
        "revs",
        help="Calculate revolutions per mile (inch) or per km (cm)",
    )
    revs_parser.add_argument("--value", type=float, required=True,
                             help="Circumference")
    revs_parser.add_argument("--unit", required=True,
                             help="Circumference unit, inch or cm")

    # range command
    range_parser = subparsers.add_parser(
        "range",
        help="Print a stepped integer range as JSON",
    )
    range_parser.add_argument("start", type=int, help="First value")
    range_parser.add_argument("stop", type=int, help="Excluded end value")
    range_parser.add_argument("--step", type=float, default=1,
                              help="Keep every step-th value (default: 1)")

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example tire sweep JSON file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_sweep.json"),
        help="Output path for example file (default: example_sweep.json)",
    )

    # list-tires command
    list_parser = subparsers.add_parser(
        "list-tires",
        help="List tire sizes that fit a wheel diameter within a height window",
    )
    list_parser.add_argument(
        "--input", "-i",
        type=Path,
        default=None,
        help="Path to JSON sweep file (overrides the inline flags)",
    )
    list_parser.add_argument("--min-width", type=float, help="Smallest width in mm")
    list_parser.add_argument("--max-width", type=float, help="Largest width in mm")
    list_parser.add_argument("--min-aspect-ratio", type=float, help="Smallest aspect ratio")
    list_parser.add_argument("--max-aspect-ratio", type=float, help="Largest aspect ratio")
    list_parser.add_argument("--min-height", type=float, help="Tires must be taller (in)")
    list_parser.add_argument("--max-height", type=float, help="Tires must be shorter (in)")
    list_parser.add_argument("--wheel-diameter", type=float, help="Rim diameter in inches")
    list_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )
    list_parser.add_argument(
        "--table",
        action="store_true",
        help="Print a readable table instead of JSON",
    )
    list_parser.add_argument(
        "--max-rows",
        type=int,
        default=None,
        help="Max table rows to show",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def cmd_sidewall(args: argparse.Namespace) -> int:
    """Calculate sidewall height."""
    height = calculate_sidewall_height(args.aspect_ratio, args.width, args.unit)
    print(f"{height} {args.unit}")
    return 0


def cmd_height(args: argparse.Namespace) -> int:
    """Calculate overall tire height."""
    height = calculate_tire_height(args.width, args.aspect_ratio, args.wheel_diameter)
    print(f"{height} inch")
    return 0


def cmd_circumference(args: argparse.Namespace) -> int:
    """Calculate circumference."""
    try:
        result = calculate_circumference(args.diameter, args.diameter_unit, args.unit)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"{result.value} {result.unit.value}")
    return 0


def cmd_revs(args: argparse.Namespace) -> int:
    """Calculate revolutions per distance."""
    try:
        result = calculate_revs(args.value, args.unit)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"{result.value} per {result.unit.value}")
    return 0


def cmd_range(args: argparse.Namespace) -> int:
    """Print a stepped range."""
    print(json.dumps(stepped_range(args.start, args.stop, args.step)))
    return 0


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example sweep JSON file."""
    output_json = example_sweep().model_dump_json(indent=2, exclude_none=True)

    try:
        with open(args.output, "w") as f:
            f.write(output_json)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Created example sweep file: {args.output}")
    print("\nList tires with:")
    print(f"  python -m tiresize list-tires --input {args.output} --table")

    return 0


def _sweep_from_flags(args: argparse.Namespace) -> TireSweep:
    """Build a sweep from the inline list-tires flags."""
    required = {
        "--min-width": args.min_width,
        "--max-width": args.max_width,
        "--min-aspect-ratio": args.min_aspect_ratio,
        "--max-aspect-ratio": args.max_aspect_ratio,
        "--min-height": args.min_height,
        "--max-height": args.max_height,
        "--wheel-diameter": args.wheel_diameter,
    }
    missing = [flag for flag, value in required.items() if value is None]
    if missing:
        raise ValueError(f"Missing arguments: {', '.join(missing)} (or use --input)")

    return TireSweep(
        min=TireDataForm(
            width=args.min_width,
            aspect_ratio=args.min_aspect_ratio,
            height_limit=args.min_height,
        ),
        max=TireDataForm(
            width=args.max_width,
            aspect_ratio=args.max_aspect_ratio,
            height_limit=args.max_height,
        ),
        wheel_diameter=args.wheel_diameter,
        height_limits=HeightLimits(min=args.min_height, max=args.max_height),
    )


def cmd_list_tires(args: argparse.Namespace) -> int:
    """List tire sizes for a wheel diameter."""
    try:
        if args.input is not None:
            with open(args.input) as f:
                input_data = json.load(f)
            sweep = TireSweep(**input_data)
        else:
            sweep = _sweep_from_flags(args)

        result = list_tires(sweep)

        if args.table:
            print_tire_table(result, max_rows=args.max_rows)
            return 0

        output_json = result.model_dump_json(indent=2)

        if args.output:
            with open(args.output, "w") as f:
                f.write(output_json)
            print(f"\nResults saved to {args.output}", file=sys.stderr)
        else:
            print(output_json)

        print(f"\nSummary: {result.count} tire sizes", file=sys.stderr)
        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    import uvicorn

    print("\nStarting Tire Size Calculator API", file=sys.stderr)
    print(f"API: http://{args.host}:{args.port}/", file=sys.stderr)
    print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
    print("\nPress Ctrl+C to stop\n", file=sys.stderr)

    uvicorn.run(
        "tiresize.api.server:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


def cli(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        setup_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "sidewall": cmd_sidewall,
        "height": cmd_height,
        "circumference": cmd_circumference,
        "revs": cmd_revs,
        "range": cmd_range,
        "make-example": cmd_make_example,
        "list-tires": cmd_list_tires,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
