"""
Feature records

Owned, immutable snapshots of GOL features. Records hold plain Python
values only, so they stay valid after the store they came from is closed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from shapely.geometry import LineString, Point
from shapely.geometry.base import BaseGeometry


class FeatureKind(str, Enum):
    """OSM element type of a feature"""

    NODE = "node"
    WAY = "way"
    RELATION = "relation"

    @classmethod
    def parse(cls, name: str) -> "FeatureKind":
        """
        Convert an engine type label into a FeatureKind

        Raises:
            ValueError: If the label is not node, way or relation
        """
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown feature type: {name!r}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NodeRecord:
    """One vertex of a way, in path order"""

    id: int
    lon: float
    lat: float


@dataclass(frozen=True)
class FeatureRecord:
    """
    Flattened representation of one matched feature

    Attributes:
        id: OSM identifier, unique within its kind only
        kind: FeatureKind (node, way or relation)
        lon: Longitude of the representative point
        lat: Latitude of the representative point
        name: Value of the ``name`` tag, or "" if the feature has none
        tags: (key, value) pairs in engine order, duplicates preserved
        nodes: Way geometry in path order; empty for nodes and relations

    Examples:
        >>> record = FeatureRecord(
        ...     id=42, kind=FeatureKind.NODE, lon=-73.58, lat=45.50,
        ...     name="Le Bistro",
        ...     tags=(("amenity", "restaurant"), ("cuisine", "french")),
        ... )
        >>> record.tag("cuisine")
        'french'
        >>> record.kind == "node"
        True
    """

    id: int
    kind: FeatureKind
    lon: float
    lat: float
    name: str = ""
    tags: tuple[tuple[str, str], ...] = ()
    nodes: tuple[NodeRecord, ...] = ()

    def __post_init__(self):
        # Accept any sequence but store tuples, so records stay hashable
        object.__setattr__(self, "kind", FeatureKind.parse(str(self.kind)))
        object.__setattr__(self, "tags", tuple((str(k), str(v)) for k, v in self.tags))
        object.__setattr__(self, "nodes", tuple(self.nodes))
        if self.nodes and self.kind is not FeatureKind.WAY:
            raise ValueError(f"Only ways carry nodes, got {len(self.nodes)} on a {self.kind}")

    @property
    def is_node(self) -> bool:
        return self.kind is FeatureKind.NODE

    @property
    def is_way(self) -> bool:
        return self.kind is FeatureKind.WAY

    @property
    def is_relation(self) -> bool:
        return self.kind is FeatureKind.RELATION

    def tag(self, key: str) -> str | None:
        """Get the first value of a tag, or None if the key is absent"""
        for k, v in self.tags:
            if k == key:
                return v
        return None

    def has_tag(self, key: str) -> bool:
        """Check if a tag exists"""
        return any(k == key for k, _ in self.tags)

    def to_geometry(self) -> BaseGeometry:
        """
        Convert to a Shapely geometry

        Ways with at least two vertices become a LineString; everything
        else is the representative Point.
        """
        if len(self.nodes) >= 2:
            return LineString([(n.lon, n.lat) for n in self.nodes])
        return Point(self.lon, self.lat)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict"""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "lon": self.lon,
            "lat": self.lat,
            "name": self.name,
            "tags": [[k, v] for k, v in self.tags],
            "nodes": [{"id": n.id, "lon": n.lon, "lat": n.lat} for n in self.nodes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FeatureRecord":
        """Inverse of to_dict()"""
        return cls(
            id=int(data["id"]),
            kind=FeatureKind.parse(data["kind"]),
            lon=float(data["lon"]),
            lat=float(data["lat"]),
            name=data.get("name", ""),
            tags=tuple((k, v) for k, v in data.get("tags", [])),
            nodes=tuple(
                NodeRecord(id=int(n["id"]), lon=float(n["lon"]), lat=float(n["lat"]))
                for n in data.get("nodes", [])
            ),
        )
