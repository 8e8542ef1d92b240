"""
Entry point for running tiresize as a module.

Usage:
    python -m tiresize height --width 245 --aspect-ratio 30 --wheel-diameter 16
    python -m tiresize list-tires --input example_sweep.json
    python -m tiresize serve --port 8000
"""

import sys

from tiresize.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
