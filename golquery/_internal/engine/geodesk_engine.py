"""
GeoDesk engine adapter

Adapts the ``geodesk`` package (GeoDesk for Python) to the engine
protocols. This is the only module that imports geodesk.
"""

import logging
from collections.abc import Iterator

import geodesk

from golquery.query.spatial import BoundingBox

logger = logging.getLogger(__name__)


class GeodeskNode:
    """Vertex view over a geodesk node"""

    __slots__ = ("id", "lon", "lat")

    def __init__(self, node):
        self.id = int(node.id)
        self.lon = float(node.lon)
        self.lat = float(node.lat)


class GeodeskFeature:
    """
    Feature view over a geodesk Feature

    Attribute reads go straight to the wrapped feature, which belongs to
    the open Features collection.
    """

    __slots__ = ("_feature",)

    def __init__(self, feature):
        self._feature = feature

    @property
    def id(self) -> int:
        return int(self._feature.id)

    @property
    def type_name(self) -> str:
        return self._feature.type

    @property
    def lon(self) -> float:
        return float(self._feature.lon)

    @property
    def lat(self) -> float:
        return float(self._feature.lat)

    @property
    def is_way(self) -> bool:
        return bool(self._feature.is_way)

    def tag(self, key: str) -> str | None:
        value = self._feature[key]
        # geodesk returns None for missing keys and may return numbers
        if value is None:
            return None
        return str(value)

    def tags(self) -> Iterator[tuple[str, str]]:
        for key, value in self._feature.tags:
            yield str(key), str(value)

    def nodes(self) -> Iterator[GeodeskNode]:
        for node in self._feature.nodes:
            yield GeodeskNode(node)


class GeodeskStore:
    """An open GOL file backed by geodesk.Features"""

    def __init__(self, path: str):
        self.path = path
        self._features = geodesk.Features(path)

    def select(self, filter_expression: str, bbox: BoundingBox) -> Iterator[GeodeskFeature]:
        box = geodesk.Box(west=bbox.west, south=bbox.south, east=bbox.east, north=bbox.north)
        view = self._features(filter_expression)(box)
        for feature in view:
            yield GeodeskFeature(feature)

    def close(self) -> None:
        # geodesk releases the file mapping once the last reference is gone
        self._features = None


class GeodeskEngine:
    """Engine factory opening GOL files with geodesk"""

    name = "geodesk"

    def open(self, path: str) -> GeodeskStore:
        logger.debug("Opening %s with geodesk", path)
        return GeodeskStore(path)
