"""
golquery Restaurants Demo

Queries restaurants in Montreal and prints the first few with their tags.

Usage:
    python examples/query_restaurants.py --gol ./planet.gol
"""

import argparse

import golquery as gq

# West, south, east, north of Montreal, Quebec
MONTREAL = gq.BoundingBox(-73.9781, 45.4042, -73.4766, 45.7042)


def parse_args():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description="golquery restaurants demo")
    parser.add_argument("--gol", required=True, help="GOL file")
    parser.add_argument("--limit", type=int, default=10, help="Restaurants to print")
    return parser.parse_args()


def main():
    args = parse_args()

    with gq.GolClient(args.gol) as client:
        print("Querying restaurants in Montreal...")
        restaurants = client.query_restaurants(MONTREAL)

    print(f"Found {restaurants.count()} restaurants")

    for i, restaurant in enumerate(restaurants.to_vector()[: args.limit], start=1):
        print(f"\n{i}. {restaurant.name}")
        print(f"   ID: {restaurant.id}")
        print(f"   Type: {restaurant.kind}")
        print(f"   Location: {restaurant.lon:.4f}°, {restaurant.lat:.4f}°")
        for key in ("cuisine", "phone", "website"):
            value = restaurant.tag(key)
            if value is not None:
                print(f"   {key.capitalize()}: {value}")


if __name__ == "__main__":
    main()
