from math import isinf
from typing import Any, Optional, Tuple

from numpy import floating
from pandas import Interval as PandasInterval

from allen.core.exceptions import (
    DomainMismatchError,
    ErrorMessages,
    InvalidBoundsError,
)
from allen.core.interval import Interval
from allen.core.types import Domain

# pandas.Interval closed= value for each domain's convention
_PANDAS_CLOSED = {
    "left": Domain.DISCRETE,
    "both": Domain.CONTINUOUS,
}


def _check_domain(value: Any, native: Domain, requested: Optional[Domain]) -> Domain:
    if requested is not None and requested is not native:
        raise DomainMismatchError(
            ErrorMessages.NATIVE_DOMAIN_MISMATCH.format(
                type(value).__name__, native.name.lower(), requested.name.lower()
            )
        )
    return native


def _infinite_as_unbounded(value: Any) -> Any:
    """pandas.Interval spells a missing bound as +/-inf"""
    if isinstance(value, (float, floating)) and isinf(value):
        return None
    return value


def from_range(value: range, domain: Optional[Domain] = None) -> Interval:
    """``range(a, b)`` is the discrete interval ``[a, b)``"""
    if value.step != 1:
        raise InvalidBoundsError(ErrorMessages.UNSUPPORTED_STEP.format(value.step))
    domain = _check_domain(value, Domain.DISCRETE, domain)
    return Interval(value.start, value.stop, domain)


def from_slice(value: slice, domain: Optional[Domain] = None) -> Interval:
    """``slice(a, b)`` is the discrete interval ``[a, b)``; a None side is unbounded"""
    if value.step is not None and value.step != 1:
        raise InvalidBoundsError(ErrorMessages.UNSUPPORTED_STEP.format(value.step))
    domain = _check_domain(value, Domain.DISCRETE, domain)
    return Interval(value.start, value.stop, domain)


def from_pandas(value: PandasInterval, domain: Optional[Domain] = None) -> Interval:
    """
    Converts a pandas.Interval. ``closed="left"`` intervals are discrete and
    ``closed="both"`` intervals are continuous; infinite endpoints are unbounded.
    """
    native = _PANDAS_CLOSED.get(value.closed)
    if native is None:
        raise InvalidBoundsError(ErrorMessages.UNSUPPORTED_CLOSED.format(value.closed))
    domain = _check_domain(value, native, domain)
    return Interval(
        _infinite_as_unbounded(value.left),
        _infinite_as_unbounded(value.right),
        domain,
    )


def from_tuple(value: Tuple[Any, Any], domain: Optional[Domain] = None) -> Interval:
    """``(start, end)``, with None for an unbounded side. Tuples carry no convention of their own."""
    if len(value) != 2:
        raise InvalidBoundsError(ErrorMessages.UNSUPPORTED_VALUE.format(value))
    start, end = value
    return Interval(start, end, domain or Domain.DISCRETE)


def native_domain(value: Any) -> Optional[Domain]:
    """The domain implied by a value's own convention, or None for plain tuples"""
    if isinstance(value, Interval):
        return value.domain
    if isinstance(value, (range, slice)):
        return Domain.DISCRETE
    if isinstance(value, PandasInterval):
        return _PANDAS_CLOSED.get(value.closed)
    return None


def to_interval(value: Any, domain: Optional[Domain] = None) -> Interval:
    """
    Converts a native range-like value into an Interval.

    Accepted values are Interval, range, slice, pandas.Interval and 2-tuples.
    ``domain`` must agree with the convention of the value when it has one:
    ranges and slices are discrete, pandas intervals are discrete when closed on
    the left and continuous when closed on both sides.
    """
    if isinstance(value, Interval):
        return _check_domain_of_interval(value, domain)
    if isinstance(value, range):
        return from_range(value, domain)
    if isinstance(value, slice):
        return from_slice(value, domain)
    if isinstance(value, PandasInterval):
        return from_pandas(value, domain)
    if isinstance(value, tuple):
        return from_tuple(value, domain)
    raise InvalidBoundsError(ErrorMessages.UNSUPPORTED_VALUE.format(type(value).__name__))


def _check_domain_of_interval(value: Interval, domain: Optional[Domain]) -> Interval:
    _check_domain(value, value.domain, domain)
    return value
