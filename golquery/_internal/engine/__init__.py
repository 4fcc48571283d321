"""
GOL engine adapters
"""

from golquery._internal.engine.base import NativeEngine, NativeFeature, NativeNode, NativeStore


def default_engine() -> NativeEngine:
    """Engine used when none is passed explicitly (the geodesk package)"""
    from golquery._internal.engine.geodesk_engine import GeodeskEngine

    return GeodeskEngine()


__all__ = [
    "NativeEngine",
    "NativeFeature",
    "NativeNode",
    "NativeStore",
    "default_engine",
]
