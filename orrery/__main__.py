"""
Command-line interface for inspecting orrery body catalogs.

Usage:
    # Summarize the bundled solar system catalog
    python -m orrery

    # Summarize a single body from another catalog
    python -m orrery --catalog my_bodies.csv --name Ceres
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from orrery.bodies import load_bodies_data
from orrery.errors import ParameterFormatError


HEADER = (
    f"{'Name':<12s} {'Class':<24s} {'a (AU)':>10s} {'e':>8s} {'inc (deg)':>10s} "
    f"{'T (cent)':>10s} {'q (AU)':>10s} {'Q (AU)':>10s} {'R (km)':>10s} {'M (kg)':>11s}"
)


def format_body(body) -> str:
    """Format one body as a row of the summary table"""
    return (
        f"{body.name:<12s} {body.body_class.name:<24s} {body.semi_major_axis:10.4f} "
        f"{body.eccentricity:8.5f} {np.rad2deg(body.inclination):10.4f} "
        f"{body.orbital_period_centuries:10.5f} {body.periapsis_distance:10.4f} "
        f"{body.apoapsis_distance:10.4f} {body.radius_km:10.1f} {body.mass_kg:11.4e}"
    )


def main(argv=None):
    """Main entry point for the orrery CLI."""
    parser = argparse.ArgumentParser(
        description="Orrery - summarize derived orbit quantities of a body catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--catalog',
        type=Path,
        default=None,
        help='CSV catalog of body parameter records (default: bundled solar system)'
    )
    parser.add_argument(
        '--name',
        type=str,
        default=None,
        help='Only show the body with this name'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        bodies = load_bodies_data(args.catalog)
    except ParameterFormatError as e:
        print(f"Error: invalid catalog entry: {e}", file=sys.stderr)
        return 2

    if args.name is not None:
        if args.name not in bodies:
            print(f"Error: no body named '{args.name}'", file=sys.stderr)
            return 1
        bodies = {args.name: bodies[args.name]}

    print(HEADER)
    for body in bodies.values():
        print(format_body(body))
    return 0


if __name__ == '__main__':
    sys.exit(main())
