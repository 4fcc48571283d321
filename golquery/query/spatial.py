"""
Bounding box and spatial helpers

Supports:
- WSEN bounding boxes in WGS84 degrees
- Center + radius construction (raw degrees)
- Conversion to and from Shapely geometries / GeoJSON
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from shapely.geometry import box, shape
from shapely.geometry.base import BaseGeometry


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned geographic rectangle in WGS84 degrees

    Ranges are not validated: an inverted box (west > east or
    south > north) is handed to the engine unchanged. Use ``is_inverted``
    to detect one.

    Attributes:
        west: Minimum longitude
        south: Minimum latitude
        east: Maximum longitude
        north: Maximum latitude

    Examples:
        >>> montreal = BoundingBox(-73.9781, 45.4042, -73.4766, 45.7042)
        >>> montreal.contains(-73.58, 45.50)
        True
        >>>
        >>> BoundingBox.from_center(0.0, 0.0, 1.0).as_tuple()
        (-1.0, -1.0, 1.0, 1.0)
    """

    west: float
    south: float
    east: float
    north: float

    @classmethod
    def new(cls, west: float, south: float, east: float, north: float) -> "BoundingBox":
        """Create a bounding box from its four edges"""
        return cls(float(west), float(south), float(east), float(north))

    @classmethod
    def from_center(cls, lon: float, lat: float, radius_deg: float) -> "BoundingBox":
        """
        Create a bounding box from a center point and radius

        The radius is in raw degrees on both axes, not a ground distance,
        so the box gets narrower in meters towards the poles.

        Args:
            lon: Center longitude in decimal degrees
            lat: Center latitude in decimal degrees
            radius_deg: Half-width of the box in degrees

        Returns:
            BoundingBox spanning lon ± radius_deg, lat ± radius_deg
        """
        return cls(
            west=lon - radius_deg,
            south=lat - radius_deg,
            east=lon + radius_deg,
            north=lat + radius_deg,
        )

    @property
    def is_inverted(self) -> bool:
        return self.west > self.east or self.south > self.north

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return (west, south, east, north)"""
        return (self.west, self.south, self.east, self.north)

    def contains(self, lon: float, lat: float) -> bool:
        """Check whether a point lies inside the box (edges included)"""
        return self.west <= lon <= self.east and self.south <= lat <= self.north

    def to_geometry(self) -> BaseGeometry:
        """Convert to a Shapely polygon"""
        return box(self.west, self.south, self.east, self.north)

    def __str__(self) -> str:
        return f"[{self.west}, {self.south}, {self.east}, {self.north}]"


def geometry_to_bbox(geometry: Union[dict, BaseGeometry, str, Path]) -> BoundingBox:
    """
    Get the bounding box of a geometry

    Args:
        geometry: GeoJSON dict, Shapely geometry, or path to GeoJSON file

    Returns:
        BoundingBox enclosing the geometry

    Examples:
        >>> bbox = geometry_to_bbox({"type": "Point", "coordinates": [12.5, 55.6]})
        >>> bbox.as_tuple()
        (12.5, 55.6, 12.5, 55.6)
    """
    geom = _parse_geometry(geometry)
    minx, miny, maxx, maxy = geom.bounds
    return BoundingBox(minx, miny, maxx, maxy)


def _parse_geometry(geometry: Union[dict, BaseGeometry, str, Path]) -> BaseGeometry:
    """
    Parse geometry from various input formats

    Args:
        geometry: GeoJSON dict, Shapely geometry, or path to GeoJSON file

    Returns:
        Shapely geometry object
    """
    if isinstance(geometry, BaseGeometry):
        return geometry

    if isinstance(geometry, (str, Path)):
        path = Path(geometry)
        if not path.exists():
            raise FileNotFoundError(f"GeoJSON file not found: {geometry}")
        with open(path) as f:
            geojson = json.load(f)
        return _geojson_to_geometry(geojson)

    if isinstance(geometry, dict):
        return _geojson_to_geometry(geometry)

    raise TypeError(f"Unsupported geometry type: {type(geometry)}")


def _geojson_to_geometry(geojson: dict) -> BaseGeometry:
    """
    Convert GeoJSON dict to Shapely geometry

    Handles FeatureCollection, Feature and raw geometry types.
    """
    if geojson.get("type") == "FeatureCollection":
        features = geojson.get("features", [])
        if not features:
            raise ValueError("Empty FeatureCollection")
        if len(features) == 1:
            return shape(features[0]["geometry"])

        from shapely.ops import unary_union

        return unary_union([shape(f["geometry"]) for f in features])

    if geojson.get("type") == "Feature":
        return shape(geojson["geometry"])

    return shape(geojson)
