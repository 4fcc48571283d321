"""
golquery Public API

Client-side convenience layer over FeatureStore and QueryExecutor.
"""

import logging
from pathlib import Path

from golquery._internal.engine import NativeEngine
from golquery.config import get_settings
from golquery.core.exceptions import ValidationError
from golquery.core.result import ResultSet
from golquery.query.executor import run_query
from golquery.query.spatial import BoundingBox
from golquery.store.handle import FeatureStore, open_store

logger = logging.getLogger(__name__)


class GolClient:
    """
    Session over one GOL file with shortcuts for common queries

    Args:
        path: GOL file; defaults to GOLQUERY_GOL_PATH
        engine: Engine to open it with (default: geodesk)

    Examples:
        >>> import golquery as gq
        >>>
        >>> montreal = gq.BoundingBox(-73.9781, 45.4042, -73.4766, 45.7042)
        >>> with gq.GolClient("planet.gol") as client:
        ...     restaurants = client.query_restaurants(montreal)
        ...     parks = client.query("a[leisure=park]", montreal)
        >>> print(f"Found {restaurants.count()} restaurants")
    """

    def __init__(self, path: str | Path | None = None, engine: NativeEngine | None = None):
        if path is None:
            path = get_settings().gol_path
        if path is None:
            raise ValidationError("No GOL file given and GOLQUERY_GOL_PATH is not set")
        self.store: FeatureStore = open_store(path, engine=engine)

    def query(self, goql_query: str, bbox: BoundingBox) -> ResultSet:
        """
        Query features using GOQL

        Args:
            goql_query: GOQL string (e.g. "na[amenity=restaurant]", "w[highway]")
            bbox: Bounding box to search within
        """
        return run_query(self.store, goql_query, bbox)

    def query_amenities(self, amenity_type: str, bbox: BoundingBox) -> ResultSet:
        """
        Query amenities of one type (e.g. "restaurant", "cafe", "bar")

        Node and area features are both included.
        """
        return self.query(f"na[amenity={amenity_type}]", bbox)

    def query_all_amenities(self, bbox: BoundingBox) -> ResultSet:
        """Query all amenities of any type"""
        return self.query("na[amenity]", bbox)

    def query_restaurants(self, bbox: BoundingBox) -> ResultSet:
        return self.query_amenities("restaurant", bbox)

    def query_cafes(self, bbox: BoundingBox) -> ResultSet:
        return self.query_amenities("cafe", bbox)

    def query_bars(self, bbox: BoundingBox) -> ResultSet:
        """Query bars and pubs"""
        return self.query("na[amenity=bar,pub]", bbox)

    def query_bus_stops(self, bbox: BoundingBox) -> ResultSet:
        return self.query("na[highway=bus_stop]", bbox)

    def query_roads(self, bbox: BoundingBox) -> ResultSet:
        """Query roads (ways with a highway tag), vertices included"""
        return self.query("w[highway]", bbox)

    def close(self) -> None:
        self.store.close()

    def __enter__(self) -> "GolClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        """String representation"""
        return f"<GolClient: {self.store!r}>"
