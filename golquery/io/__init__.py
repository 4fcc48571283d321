"""
golquery I/O Module

Export of query results to files.
"""

from golquery.io.geoparquet import read_geoparquet, write_geoparquet

__all__ = ["read_geoparquet", "write_geoparquet"]
