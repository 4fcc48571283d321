"""
golquery - Typed queries over GeoDESK GOL feature stores

Runs GOQL filters inside a bounding box and returns owned, immutable
feature records (way geometry included) that outlive the store.

Quick Start:
    >>> import golquery as gq
    >>>
    >>> montreal = gq.BoundingBox(-73.9781, 45.4042, -73.4766, 45.7042)
    >>> with gq.open_store("planet.gol") as store:
    ...     restaurants = gq.run_query(store, "na[amenity=restaurant]", montreal)
    >>>
    >>> for r in restaurants:
    ...     print(r.name, r.tag("cuisine"))
    >>>
    >>> # Tabular / spatial outputs
    >>> gdf = restaurants.to_geodataframe()
"""

from golquery.core import (
    # Records
    FeatureKind,
    FeatureRecord,
    # Exceptions
    GolQueryError,
    NodeRecord,
    OpenError,
    QueryError,
    ResultIndexError,
    ResultSet,
    StoreClosedError,
    ValidationError,
)
from golquery.query import BoundingBox, QueryExecutor, geometry_to_bbox, run_query
from golquery.store import FeatureStore, open_store

__version__ = "0.1.0"

__all__ = [
    "BoundingBox",
    "FeatureKind",
    "FeatureRecord",
    "FeatureStore",
    "GolClient",
    "GolQueryError",
    "NodeRecord",
    "OpenError",
    "QueryError",
    "QueryExecutor",
    "ResultIndexError",
    "ResultSet",
    "StoreClosedError",
    "ValidationError",
    "__version__",
    "geometry_to_bbox",
    "open_store",
    "read_geoparquet",
    "run_query",
    "write_geoparquet",
]


# Lazy imports (GeoPandas is slow to import)
def __getattr__(name):
    if name == "GolClient":
        from golquery.core.api import GolClient

        return GolClient
    elif name == "write_geoparquet":
        from golquery.io.geoparquet import write_geoparquet

        return write_geoparquet
    elif name == "read_geoparquet":
        from golquery.io.geoparquet import read_geoparquet

        return read_geoparquet
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
