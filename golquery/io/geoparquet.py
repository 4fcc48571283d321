"""
GeoParquet export of query results

Writes a ResultSet to GeoParquet so it can be opened by GeoPandas, DuckDB
or QGIS, and reads such files back into a ResultSet.

Schema:
    - id: int64
    - kind: string ("node", "way", "relation")
    - lon, lat: float64 representative point
    - name: string
    - tags: string (JSON list of [key, value] pairs, engine order)
    - nodes: string (JSON list of {id, lon, lat}, ways only)
    - geometry: Point, or LineString for ways with two or more vertices
"""

import json
import logging
from pathlib import Path

import geopandas as gpd

from golquery.core.feature import FeatureKind, FeatureRecord, NodeRecord
from golquery.core.result import ResultSet

logger = logging.getLogger(__name__)

COLUMNS = ["id", "kind", "lon", "lat", "name", "tags", "nodes"]


def write_geoparquet(result: ResultSet, path: str | Path) -> None:
    """
    Write a ResultSet to a GeoParquet file (zstd compressed, EPSG:4326)

    Args:
        result: Records to write
        path: Output file path; parent directories are created

    Examples:
        >>> roads = store.query("w[highway]", bbox)
        >>> write_geoparquet(roads, "out/roads.parquet")
    """
    rows = []
    for record in result:
        rows.append(
            {
                "id": record.id,
                "kind": record.kind.value,
                "lon": record.lon,
                "lat": record.lat,
                "name": record.name,
                "tags": json.dumps([[k, v] for k, v in record.tags]),
                "nodes": json.dumps([{"id": n.id, "lon": n.lon, "lat": n.lat} for n in record.nodes]),
                "geometry": record.to_geometry(),
            }
        )

    gdf = gpd.GeoDataFrame(rows, columns=COLUMNS + ["geometry"], geometry="geometry", crs="EPSG:4326")

    Path(path).parent.mkdir(parents=True, exist_ok=True)
    gdf.to_parquet(path, compression="zstd", index=False)
    logger.info("Wrote %d features to %s", len(rows), path)


def read_geoparquet(path: str | Path) -> ResultSet:
    """
    Read a file written by write_geoparquet()

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    if not Path(path).exists():
        raise FileNotFoundError(f"GeoParquet file not found: {path}")

    gdf = gpd.read_parquet(path)

    records = []
    for _, row in gdf.iterrows():
        records.append(
            FeatureRecord(
                id=int(row["id"]),
                kind=FeatureKind.parse(row["kind"]),
                lon=float(row["lon"]),
                lat=float(row["lat"]),
                name=row["name"],
                tags=tuple((k, v) for k, v in json.loads(row["tags"])),
                nodes=tuple(
                    NodeRecord(id=int(n["id"]), lon=float(n["lon"]), lat=float(n["lat"]))
                    for n in json.loads(row["nodes"])
                ),
            )
        )

    return ResultSet(records)
