"""
golquery Exceptions

Exception hierarchy for error handling.

Every failure raised by the GOL engine is converted into one of these types
before it leaves the store handle or the query executor.
"""


class GolQueryError(Exception):
    """Base exception for golquery"""

    pass


class OpenError(GolQueryError):
    """Store file missing, unreadable, or not a compatible GOL"""

    pass


class QueryError(GolQueryError):
    """Query execution failed"""

    pass


class StoreClosedError(QueryError):
    """Query issued against a store handle that was already closed"""

    pass


class ResultIndexError(GolQueryError, IndexError):
    """Out-of-range access into a ResultSet"""

    pass


class ValidationError(GolQueryError):
    """Invalid arguments passed to golquery"""

    pass
