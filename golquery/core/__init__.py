"""
golquery Core Module

Feature records, result sets and exceptions.
"""

from golquery.core.exceptions import (
    GolQueryError,
    OpenError,
    QueryError,
    ResultIndexError,
    StoreClosedError,
    ValidationError,
)
from golquery.core.feature import FeatureKind, FeatureRecord, NodeRecord
from golquery.core.result import ResultSet

__all__ = [
    # Records
    "FeatureKind",
    "FeatureRecord",
    "NodeRecord",
    "ResultSet",
    # Exceptions
    "GolQueryError",
    "OpenError",
    "QueryError",
    "ResultIndexError",
    "StoreClosedError",
    "ValidationError",
]
