"""
golquery CLI Entry Points

Provides command-line interface for:
- query: Run a GOQL query inside a bounding box
- info: Show information about a GOL file
"""

import argparse
import logging
import sys

from golquery.config import get_settings
from golquery.core.exceptions import GolQueryError


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point"""
    try:
        settings = get_settings()
    except GolQueryError as e:
        print(f"Error: {e}")
        return 1

    parser = argparse.ArgumentParser(
        prog="golquery",
        description="golquery - Query GeoDESK GOL feature stores",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  golquery query planet.gol "na[amenity=restaurant]" --bbox -73.9781 45.4042 -73.4766 45.7042
  golquery query planet.gol "w[highway]" --center 12.55 55.67 --radius 0.05 --format json
  golquery query planet.gol "a[leisure=park]" --bbox 12.45 55.61 12.65 55.73 -o parks.parquet
  golquery info planet.gol
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Query command
    query_parser = subparsers.add_parser("query", help="Run a GOQL query in a bounding box")
    query_parser.add_argument(
        "gol",
        nargs="?",
        default=settings.gol_path,
        help="GOL file (default: $GOLQUERY_GOL_PATH)",
    )
    query_parser.add_argument("filter", help='GOQL filter, e.g. "na[amenity=cafe]"')
    area = query_parser.add_mutually_exclusive_group(required=True)
    area.add_argument(
        "--bbox",
        nargs=4,
        type=float,
        metavar=("WEST", "SOUTH", "EAST", "NORTH"),
        help="Bounding box in degrees",
    )
    area.add_argument(
        "--center", nargs=2, type=float, metavar=("LON", "LAT"), help="Center point in degrees"
    )
    query_parser.add_argument(
        "--radius",
        type=float,
        default=settings.default_radius_deg,
        help=f"Radius in degrees around --center (default: {settings.default_radius_deg})",
    )
    query_parser.add_argument(
        "--limit", type=int, default=10, help="Features to print, 0 for all (default: 10)"
    )
    query_parser.add_argument(
        "--format", choices=["table", "json"], default="table", help="Output format"
    )
    query_parser.add_argument("--output", "-o", help="Also write results to a GeoParquet file")

    # Info command
    info_parser = subparsers.add_parser("info", help="Show GOL file information")
    info_parser.add_argument("gol", help="GOL file")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level, format="%(message)s" if not args.verbose else "%(levelname)s: %(message)s"
    )

    if args.command == "query":
        from golquery.cli.query import run_query_command

        return run_query_command(args)
    elif args.command == "info":
        from golquery.cli.info import run_info

        return run_info(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
