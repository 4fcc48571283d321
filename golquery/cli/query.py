"""
Query CLI command

Runs one GOQL query and prints the matches as a table or JSON.
"""

import argparse
import json

from golquery.core.exceptions import GolQueryError
from golquery.core.feature import FeatureRecord
from golquery.core.result import ResultSet
from golquery.query.spatial import BoundingBox
from golquery.store.handle import open_store


def run_query_command(args: argparse.Namespace) -> int:
    """Run the query command"""
    if args.gol is None:
        print("Error: No GOL file given and GOLQUERY_GOL_PATH is not set")
        return 1

    if args.bbox is not None:
        bbox = BoundingBox.new(*args.bbox)
    else:
        lon, lat = args.center
        bbox = BoundingBox.from_center(lon, lat, args.radius)

    try:
        with open_store(args.gol) as store:
            result = store.query(args.filter, bbox)
    except GolQueryError as e:
        print(f"Error: {e}")
        return 1

    shown = result.to_vector() if args.limit <= 0 else result.to_vector()[: args.limit]

    if args.format == "json":
        print(json.dumps([r.to_dict() for r in shown], indent=2, ensure_ascii=False))
    else:
        _print_table(result, shown)

    if args.output:
        from golquery.io.geoparquet import write_geoparquet

        write_geoparquet(result, args.output)
        print(f"Wrote {result.count()} features to {args.output}")

    return 0


def _print_table(result: ResultSet, shown: list[FeatureRecord]) -> None:
    print(f"Found {result.count()} features")
    for i, record in enumerate(shown, start=1):
        print()
        print(f"{i}. {record.name or '(unnamed)'}")
        print(f"   ID: {record.id} ({record.kind})")
        print(f"   Location: {record.lon:.4f}°, {record.lat:.4f}°")
        if record.is_way:
            print(f"   Nodes: {len(record.nodes)}")
        for key, value in record.tags:
            if key != "name":
                print(f"   {key}: {value}")

    if len(shown) < result.count():
        print()
        print(f"... and {result.count() - len(shown)} more")
