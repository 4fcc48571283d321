"""
GOL Engine Protocols

The narrow contract between golquery and the engine that owns GOL files.
The engine is responsible for the spatial index, tile storage and the GOQL
parser; golquery only opens stores, selects views and reads features.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from golquery.query.spatial import BoundingBox


class NativeNode(Protocol):
    """A vertex of a way as exposed by the engine"""

    id: int
    lon: float
    lat: float


class NativeFeature(Protocol):
    """
    A feature as exposed by the engine

    Only valid while the store it came from is open and the view it was
    yielded by is being iterated.
    """

    id: int
    type_name: str
    lon: float
    lat: float
    is_way: bool

    def tag(self, key: str) -> str | None:
        """Value of a tag looked up by exact key, or None if absent"""
        ...

    def tags(self) -> Iterable[tuple[str, str]]:
        """All (key, value) pairs in the engine's internal order"""
        ...

    def nodes(self) -> Iterable[NativeNode]:
        """Vertices of a way in path order"""
        ...


class NativeStore(Protocol):
    """An opened GOL file"""

    def select(self, filter_expression: str, bbox: "BoundingBox") -> Iterable[NativeFeature]:
        """
        Features matching a GOQL expression inside a bounding box

        The filter is passed through unparsed; grammar errors surface as
        exceptions raised here or during iteration.
        """
        ...

    def close(self) -> None:
        """Release the engine's resources for this store"""
        ...


class NativeEngine(Protocol):
    """Factory for NativeStore instances"""

    name: str

    def open(self, path: str) -> NativeStore:
        """
        Open a GOL file

        Raises:
            Any exception when the file is unreadable, not a GOL, or of an
            incompatible version. Callers convert it to OpenError.
        """
        ...
