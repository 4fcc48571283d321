"""
Query Result Set

Container for query results with multiple output formats.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any

import numpy as np
import pyarrow as pa
from numpy.typing import NDArray

from golquery.core.exceptions import ResultIndexError
from golquery.core.feature import FeatureRecord

# Columnar layout used by to_arrow(); tags keep engine order and duplicates
ARROW_SCHEMA = pa.schema(
    [
        ("id", pa.uint64()),
        ("kind", pa.string()),
        ("lon", pa.float64()),
        ("lat", pa.float64()),
        ("name", pa.string()),
        ("tags", pa.list_(pa.struct([("key", pa.string()), ("value", pa.string())]))),
        (
            "nodes",
            pa.list_(pa.struct([("id", pa.uint64()), ("lon", pa.float64()), ("lat", pa.float64())])),
        ),
    ]
)


class ResultSet:
    """
    Ordered, immutable collection of FeatureRecord produced by one query

    Order is the engine's iteration order for the filtered view, which is
    neither spatial nor by ID.

    Provides multiple output formats for different use cases:
    - Plain list: to_vector()
    - Pandas / GeoPandas: tabular analysis, plotting, GeoParquet export
    - PyArrow: columnar hand-off to other processes
    - NumPy: representative coordinates as an (n, 2) array

    Examples:
        >>> result = store.query("na[amenity=restaurant]", bbox)
        >>> result.count()
        1
        >>> result.get(0).name
        'Le Bistro'
        >>> gdf = result.to_geodataframe()
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[FeatureRecord] = ()):
        self._records: tuple[FeatureRecord, ...] = tuple(records)

    def count(self) -> int:
        """Number of records"""
        return len(self._records)

    def is_empty(self) -> bool:
        return self.count() == 0

    def get(self, index: int) -> FeatureRecord:
        """
        Get the record at a position

        Args:
            index: Zero-based position, 0 <= index < count()

        Raises:
            ResultIndexError: If index is out of range (negative indices
                are rejected too)
        """
        if index < 0 or index >= len(self._records):
            raise ResultIndexError(
                f"Feature index {index} out of range for {len(self._records)} results"
            )
        return self._records[index]

    def to_vector(self) -> list[FeatureRecord]:
        """Return a new list of all records in original order"""
        return list(self._records)

    def filter(self, predicate: Callable[[FeatureRecord], bool]) -> "ResultSet":
        """Return a new ResultSet with the records matching a predicate"""
        return ResultSet(r for r in self._records if predicate(r))

    def coordinates(self) -> NDArray[np.float64]:
        """Representative points as an (n, 2) array of (lon, lat)"""
        if not self._records:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([(r.lon, r.lat) for r in self._records], dtype=np.float64)

    def to_pandas(self) -> Any:  # pd.DataFrame
        """
        Convert to Pandas DataFrame

        Returns:
            DataFrame with columns id, kind, lon, lat, name, tags (dict,
            first value wins on duplicate keys), node_count
        """
        import pandas as pd

        return pd.DataFrame(
            [_flat_row(r) for r in self._records],
            columns=["id", "kind", "lon", "lat", "name", "tags", "node_count"],
        )

    def to_geodataframe(self) -> Any:  # gpd.GeoDataFrame
        """
        Convert to GeoPandas GeoDataFrame in EPSG:4326

        Ways carry their LineString geometry, other features their
        representative Point.
        """
        import geopandas as gpd

        df = self.to_pandas()
        geometry = [r.to_geometry() for r in self._records]
        return gpd.GeoDataFrame(df, geometry=geometry, crs="EPSG:4326")

    def to_arrow(self) -> Any:  # pa.Table
        """
        Convert to a PyArrow table

        Tags become a list<struct<key, value>> column so order and
        duplicates survive; way geometry becomes list<struct<id, lon, lat>>.
        """
        return pa.Table.from_pylist(
            [
                {
                    "id": r.id,
                    "kind": r.kind.value,
                    "lon": r.lon,
                    "lat": r.lat,
                    "name": r.name,
                    "tags": [{"key": k, "value": v} for k, v in r.tags],
                    "nodes": [{"id": n.id, "lon": n.lon, "lat": n.lat} for n in r.nodes],
                }
                for r in self._records
            ],
            schema=ARROW_SCHEMA,
        )

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __iter__(self) -> Iterator[FeatureRecord]:
        return iter(self._records)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ResultSet(self._records[index])
        return self._records[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self._records == other._records

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        """String representation"""
        kinds: dict[str, int] = {}
        for r in self._records:
            kinds[r.kind.value] = kinds.get(r.kind.value, 0) + 1
        summary = ", ".join(f"{k}={v}" for k, v in sorted(kinds.items()))
        return f"<ResultSet: {len(self._records)} features ({summary})>"


def _flat_row(record: FeatureRecord) -> dict[str, Any]:
    tags: dict[str, str] = {}
    for k, v in record.tags:
        tags.setdefault(k, v)
    return {
        "id": record.id,
        "kind": record.kind.value,
        "lon": record.lon,
        "lat": record.lat,
        "name": record.name,
        "tags": tags,
        "node_count": len(record.nodes),
    }

