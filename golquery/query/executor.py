"""
Query executor - runs GOQL + bounding box queries against an open store
"""

import logging
import time
from typing import TYPE_CHECKING

from golquery._internal.engine.base import NativeFeature
from golquery.core.exceptions import QueryError, StoreClosedError
from golquery.core.feature import FeatureKind, FeatureRecord, NodeRecord
from golquery.core.result import ResultSet
from golquery.query.spatial import BoundingBox

if TYPE_CHECKING:
    from golquery.store.handle import FeatureStore

logger = logging.getLogger(__name__)


class QueryExecutor:
    """
    Executes queries against an open FeatureStore

    Each call selects a filtered view from the engine, walks it once in
    engine order and copies every match into a FeatureRecord. Ways get
    their vertices copied in the same pass. The ResultSet is returned only
    after the whole view has been read; on any failure nothing is returned.

    The executor adds no locking. Do not close the store from another
    thread while a query is running.

    Attributes:
        store: FeatureStore the queries borrow from

    Examples:
        >>> from golquery import open_store, BoundingBox
        >>> from golquery.query import QueryExecutor
        >>>
        >>> with open_store("montreal.gol") as store:
        ...     executor = QueryExecutor(store)
        ...     result = executor.execute(
        ...         "na[amenity=restaurant]",
        ...         BoundingBox(-73.9781, 45.4042, -73.4766, 45.7042),
        ...     )
        >>> result.count()
        1
    """

    def __init__(self, store: "FeatureStore"):
        """
        Initialize QueryExecutor

        Args:
            store: Open FeatureStore
        """
        self.store = store

    def execute(self, filter_expression: str, bbox: BoundingBox) -> ResultSet:
        """
        Run a GOQL query inside a bounding box

        Args:
            filter_expression: GOQL string (e.g. "na[amenity=restaurant]",
                "w[highway]"); passed to the engine unparsed
            bbox: Region to search

        Returns:
            ResultSet in engine iteration order

        Raises:
            StoreClosedError: If the store was closed
            QueryError: If the engine rejects the filter or fails while
                reading; no partial result is returned
        """
        if self.store.closed:
            raise StoreClosedError(f"Store is closed: {self.store.path}")

        if bbox.is_inverted:
            logger.warning("Inverted bounding box %s passed to engine unchanged", bbox)

        start = time.perf_counter()
        records: list[FeatureRecord] = []
        try:
            view = self.store.native.select(filter_expression, bbox)
            for feature in view:
                records.append(_to_record(feature))
        except Exception as e:
            raise QueryError(f"Query failed: {e}") from e

        result = ResultSet(records)
        logger.debug(
            "Query %r in %s matched %d features in %.3fs",
            filter_expression,
            bbox,
            result.count(),
            time.perf_counter() - start,
        )
        return result

    def count(self, filter_expression: str, bbox: BoundingBox) -> int:
        """Number of features a query matches"""
        return self.execute(filter_expression, bbox).count()

    def __repr__(self) -> str:
        """String representation"""
        return f"<QueryExecutor>\nStore: {self.store.path}"


def run_query(store: "FeatureStore", filter_expression: str, bbox: BoundingBox) -> ResultSet:
    """
    Run a GOQL query against an open store

    Shorthand for ``QueryExecutor(store).execute(filter_expression, bbox)``.
    """
    return QueryExecutor(store).execute(filter_expression, bbox)


def _to_record(feature: NativeFeature) -> FeatureRecord:
    """Copy one engine feature (and a way's vertices) into an owned record"""
    kind = FeatureKind.parse(feature.type_name)

    nodes: tuple[NodeRecord, ...] = ()
    if feature.is_way:
        nodes = tuple(NodeRecord(id=n.id, lon=n.lon, lat=n.lat) for n in feature.nodes())

    name = feature.tag("name")
    return FeatureRecord(
        id=feature.id,
        kind=kind,
        lon=feature.lon,
        lat=feature.lat,
        name=name if name is not None else "",
        tags=tuple(feature.tags()),
        nodes=nodes,
    )
