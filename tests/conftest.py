"""
golquery Test Configuration

Shared pytest fixtures for all tests.
"""

import pytest
from fakes import GOL_MAGIC, FakeEngine, FakeFeature, residential_way

from golquery.config import reset_settings
from golquery.store.handle import FeatureStore


@pytest.fixture
def montreal_bbox():
    from golquery.query.spatial import BoundingBox

    return BoundingBox(-73.9781, 45.4042, -73.4766, 45.7042)


@pytest.fixture
def features():
    """A small Montreal dataset"""
    return [
        FakeFeature(
            100,
            "node",
            -73.58,
            45.50,
            tags=[("amenity", "restaurant"), ("cuisine", "french"), ("name", "Le Bistro")],
        ),
        FakeFeature(101, "node", -73.60, 45.52, tags=[("amenity", "cafe"), ("name", "Cafe Luna")]),
        FakeFeature(102, "node", -73.61, 45.53, tags=[("amenity", "bench")]),
        residential_way(),
        FakeFeature(
            300,
            "relation",
            -73.59,
            45.51,
            tags=[("type", "multipolygon"), ("leisure", "park"), ("name", "Parc La Fontaine")],
        ),
        # Outside the Montreal box
        FakeFeature(
            400, "node", 12.57, 55.68, tags=[("amenity", "restaurant"), ("name", "Noma")]
        ),
    ]


@pytest.fixture
def engine(features):
    return FakeEngine(features)


@pytest.fixture
def gol_file(tmp_path):
    """A file FakeEngine accepts as a GOL"""
    path = tmp_path / "montreal.gol"
    path.write_bytes(GOL_MAGIC + b"\x00" * 16)
    return path


@pytest.fixture
def store(gol_file, engine):
    store = FeatureStore.open(gol_file, engine=engine)
    yield store
    store.close()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from GOLQUERY_* variables in the environment"""
    for name in ("GOLQUERY_GOL_PATH", "GOLQUERY_LOG_LEVEL", "GOLQUERY_DEFAULT_RADIUS"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
