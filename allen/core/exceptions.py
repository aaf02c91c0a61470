from typing import Optional


class IntervalError(Exception):
    """Base exception for invalid input to the relation classifier"""
    pass


class EmptyIntervalError(IntervalError):
    """Raised when an interval is empty, for which Allen's relations are undefined"""

    def __init__(self, message: str, position: Optional[str] = None):
        super().__init__(message)
        self.position = position


class AmbiguousOrderError(IntervalError):
    """Raised when two endpoint values have no definite order"""
    pass


class InvalidBoundsError(IntervalError, ValueError):
    """Raised when a value cannot be turned into interval bounds"""
    pass


class DomainMismatchError(IntervalError, ValueError):
    """Raised when discrete and continuous interval conventions are mixed"""
    pass


class RelationInvariantError(RuntimeError):
    """Raised when the endpoint orderings match no relation; this is a bug, not bad input"""
    pass


class ErrorMessages:
    """Centralized error message definitions for consistent error handling"""
    EMPTY_INTERVAL = "Interval {} is empty in the {} domain: start {!r} is not before end {!r}"
    AMBIGUOUS_ORDER = "Cannot order {} {!r} against {} {!r}"
    AMBIGUOUS_INTERVAL = "Cannot order start {!r} against end {!r} of interval {}"
    UNMATCHED_RELATION = "No relation matches atomic orderings bb={}, be={}, eb={}, ee={}"
    DOMAIN_MISMATCH = "Cannot relate a {} interval to a {} interval"
    NATIVE_DOMAIN_MISMATCH = "{} describes a {} interval, not a {} one"
    UNSUPPORTED_STEP = "Only unit-step ranges describe intervals, got step {}"
    UNSUPPORTED_CLOSED = "pandas.Interval closed={!r} has no interval convention; use 'left' or 'both'"
    UNSUPPORTED_VALUE = "Cannot convert {} to an interval"
    BOUNDED_WITHOUT_VALUE = "None is not a bounded value; use Bound.unbounded()"
    UNBOUNDED_WITH_VALUE = "An unbounded endpoint carries no value, got {!r}; use Bound.bounded()"
    INVALID_STRATEGY = "strategy must be a Strategy, got {!r}"
    INVALID_DOMAIN = "domain must be a Domain, got {!r}"
    INVALID_ERRORS = "errors must be 'raise' or 'coerce', got {!r}"
    MISSING_COLUMNS = "Columns not found in frame: {}"
    UNKNOWN_RELATION = "Unknown relation name: {!r}"
    INVERTED_EQUALS = "EQUALS is its own converse and cannot be inverted"
