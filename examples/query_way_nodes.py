"""
golquery Way Geometry Demo

Queries roads in Copenhagen and shows the vertices that come back with
each way, plus an approximate length from the GeoDataFrame view.

Usage:
    python examples/query_way_nodes.py --gol ./planet.gol
"""

import argparse

import golquery as gq

COPENHAGEN = gq.BoundingBox(12.45, 55.61, 12.65, 55.73)


def main():
    parser = argparse.ArgumentParser(description="golquery way geometry demo")
    parser.add_argument("--gol", required=True, help="GOL file")
    parser.add_argument("--sample", type=int, default=5, help="Roads to print")
    args = parser.parse_args()

    with gq.open_store(args.gol) as store:
        roads = store.query("w[highway]", COPENHAGEN)

    print(f"Found {roads.count()} roads")

    for i, road in enumerate(roads.to_vector()[: args.sample], start=1):
        print(f"\n--- Road {i} ---")
        print(f"ID: {road.id}")
        print(f"Highway type: {road.tag('highway')}")
        if road.name:
            print(f"Name: {road.name}")
        print(f"Number of nodes: {len(road.nodes)}")
        if road.nodes:
            first, last = road.nodes[0], road.nodes[-1]
            print(f"  First: {first.id} ({first.lon:.6f}, {first.lat:.6f})")
            print(f"  Last:  {last.id} ({last.lon:.6f}, {last.lat:.6f})")

    # Project to a metric CRS for lengths (ETRS89 / UTM zone 33N)
    gdf = roads.to_geodataframe().to_crs(epsg=25833)
    print(f"\nTotal road length: {gdf.length.sum() / 1000:,.1f} km")


if __name__ == "__main__":
    main()
