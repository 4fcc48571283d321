"""
Store handle

Owns one open GOL file for the duration of a client session.
"""

import logging
from pathlib import Path

from golquery._internal.engine import NativeEngine, NativeStore, default_engine
from golquery.core.exceptions import GolQueryError, OpenError, StoreClosedError
from golquery.core.result import ResultSet
from golquery.query.spatial import BoundingBox

logger = logging.getLogger(__name__)


class FeatureStore:
    """
    Handle to an open GOL feature store

    Queries borrow the native store from this handle and must finish
    before it is closed. Records in a returned ResultSet are independent
    copies and stay usable after close().

    Attributes:
        path: Path of the GOL file
        engine_name: Name of the engine that opened it

    Examples:
        >>> from golquery import FeatureStore, BoundingBox
        >>>
        >>> with FeatureStore.open("copenhagen.gol") as store:
        ...     roads = store.query("w[highway]", BoundingBox(12.45, 55.61, 12.65, 55.73))
        >>> store.closed
        True
    """

    def __init__(self, path: str, native: NativeStore, engine_name: str = "unknown"):
        """
        Wrap an already opened native store. Use FeatureStore.open() instead.

        Args:
            path: Path of the GOL file
            native: Store returned by the engine
            engine_name: Engine identifier for logging and repr
        """
        self.path = path
        self.engine_name = engine_name
        self._native: NativeStore | None = native

    @classmethod
    def open(cls, path: str | Path, engine: NativeEngine | None = None) -> "FeatureStore":
        """
        Open a GOL file

        Args:
            path: Path to the GOL file
            engine: Engine to open it with (default: geodesk)

        Returns:
            Open FeatureStore

        Raises:
            OpenError: If the file does not exist, is not a regular file, or
                the engine cannot read it (bad format, incompatible version)
        """
        gol_path = Path(path)
        if not gol_path.exists():
            raise OpenError(f"GOL file not found: {gol_path}")
        if not gol_path.is_file():
            raise OpenError(f"Not a file: {gol_path}")

        if engine is None:
            engine = default_engine()

        try:
            native = engine.open(str(gol_path))
        except Exception as e:
            raise OpenError(f"Failed to open {gol_path}: {e}") from e

        logger.info("Opened GOL store %s (%s)", gol_path, engine.name)
        return cls(str(gol_path), native, engine_name=engine.name)

    @property
    def closed(self) -> bool:
        return self._native is None

    @property
    def native(self) -> NativeStore:
        """Engine store; only for use by the query executor"""
        if self._native is None:
            raise StoreClosedError(f"Store is closed: {self.path}")
        return self._native

    def query(self, filter_expression: str, bbox: BoundingBox) -> ResultSet:
        """
        Run a GOQL query inside a bounding box

        See QueryExecutor.execute() for details.
        """
        from golquery.query.executor import QueryExecutor

        return QueryExecutor(self).execute(filter_expression, bbox)

    def close(self) -> None:
        """Release the native store. Safe to call more than once."""
        if self._native is None:
            return
        native, self._native = self._native, None
        try:
            native.close()
        except Exception as e:
            raise GolQueryError(f"Failed to close {self.path}: {e}") from e
        logger.info("Closed GOL store %s", self.path)

    def __enter__(self) -> "FeatureStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        """String representation"""
        state = "closed" if self.closed else "open"
        return f"<FeatureStore: {self.path} ({self.engine_name}, {state})>"


def open_store(path: str | Path, engine: NativeEngine | None = None) -> FeatureStore:
    """
    Open a GOL file

    Shorthand for FeatureStore.open().
    """
    return FeatureStore.open(path, engine=engine)
