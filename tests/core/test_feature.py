"""
Tests for FeatureKind, NodeRecord and FeatureRecord
"""

import dataclasses

import pytest
from shapely.geometry import LineString, Point

from golquery.core.feature import FeatureKind, FeatureRecord, NodeRecord


def make_way(node_count=3):
    return FeatureRecord(
        id=200,
        kind=FeatureKind.WAY,
        lon=-73.575,
        lat=45.505,
        name="Rue Saint-Denis",
        tags=(("highway", "residential"), ("name", "Rue Saint-Denis")),
        nodes=tuple(NodeRecord(1000 + i, -73.57 - i * 0.005, 45.50 + i * 0.005) for i in range(node_count)),
    )


class TestFeatureKind:
    """Test FeatureKind enum"""

    def test_parse_labels(self):
        assert FeatureKind.parse("node") is FeatureKind.NODE
        assert FeatureKind.parse("way") is FeatureKind.WAY
        assert FeatureKind.parse("relation") is FeatureKind.RELATION

    def test_parse_unknown_label(self):
        with pytest.raises(ValueError, match="Unknown feature type"):
            FeatureKind.parse("area")

    def test_compares_to_string(self):
        """Kinds compare equal to their engine labels"""
        assert FeatureKind.WAY == "way"
        assert FeatureKind.NODE != "way"
        assert str(FeatureKind.RELATION) == "relation"


class TestFeatureRecord:
    """Test FeatureRecord"""

    def test_node_record(self):
        record = FeatureRecord(
            id=100,
            kind=FeatureKind.NODE,
            lon=-73.58,
            lat=45.50,
            name="Le Bistro",
            tags=(("amenity", "restaurant"), ("cuisine", "french")),
        )

        assert record.is_node
        assert not record.is_way
        assert record.nodes == ()
        assert record.tag("cuisine") == "french"
        assert record.tag("phone") is None
        assert record.has_tag("amenity")
        assert not record.has_tag("website")

    def test_kind_accepts_label(self):
        """A string label is normalized to FeatureKind"""
        record = FeatureRecord(id=1, kind="relation", lon=0.0, lat=0.0)
        assert record.kind is FeatureKind.RELATION
        assert record.is_relation

    def test_defaults(self):
        record = FeatureRecord(id=1, kind=FeatureKind.NODE, lon=0.0, lat=0.0)
        assert record.name == ""
        assert record.tags == ()
        assert record.nodes == ()

    def test_tags_keep_order_and_duplicates(self):
        record = FeatureRecord(
            id=1,
            kind=FeatureKind.NODE,
            lon=0.0,
            lat=0.0,
            tags=[("source", "survey"), ("amenity", "cafe"), ("source", "bing")],
        )
        assert record.tags == (("source", "survey"), ("amenity", "cafe"), ("source", "bing"))
        assert record.tag("source") == "survey"

    def test_nodes_only_on_ways(self):
        with pytest.raises(ValueError, match="Only ways carry nodes"):
            FeatureRecord(
                id=1, kind=FeatureKind.NODE, lon=0.0, lat=0.0, nodes=(NodeRecord(2, 0.0, 0.0),)
            )

    def test_record_is_immutable(self):
        record = make_way()
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.name = "Other"

    def test_record_is_hashable(self):
        assert hash(make_way()) == hash(make_way())

    def test_way_geometry(self):
        geom = make_way().to_geometry()
        assert isinstance(geom, LineString)
        assert len(geom.coords) == 3

    def test_single_vertex_way_geometry(self):
        """A way with fewer than two vertices falls back to its point"""
        geom = make_way(node_count=1).to_geometry()
        assert isinstance(geom, Point)
        assert (geom.x, geom.y) == (-73.575, 45.505)

    def test_node_geometry(self):
        record = FeatureRecord(id=1, kind=FeatureKind.NODE, lon=12.5, lat=55.6)
        assert record.to_geometry().equals(Point(12.5, 55.6))

    def test_dict_conversion(self):
        record = make_way()
        data = record.to_dict()

        assert data["kind"] == "way"
        assert data["tags"][0] == ["highway", "residential"]
        assert data["nodes"][0] == {"id": 1000, "lon": -73.57, "lat": 45.50}
        assert FeatureRecord.from_dict(data) == record
