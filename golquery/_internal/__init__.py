"""
Internal implementation details (not part of the public API)
"""
