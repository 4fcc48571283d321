"""
golquery Store Module

Lifetime management of open GOL files.
"""

from golquery.store.handle import FeatureStore, open_store

__all__ = ["FeatureStore", "open_store"]
