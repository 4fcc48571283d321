"""
golquery Query Module

Query execution and bounding boxes.
"""

from golquery.query.executor import QueryExecutor, run_query
from golquery.query.spatial import BoundingBox, geometry_to_bbox

__all__ = [
    "BoundingBox",
    "QueryExecutor",
    "geometry_to_bbox",
    "run_query",
]
