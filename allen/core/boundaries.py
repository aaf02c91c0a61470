from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Protocol, Type, Union

from numpy import bool_, datetime64, floating, integer
from pandas import Timestamp

from allen.core.exceptions import ErrorMessages, InvalidBoundsError
from allen.core.types import BoundaryScalar


# Define a protocol for the normalizing functions
class NormalizeProtocol(Protocol):
    def __call__(self, value: Any) -> Any: ...


def _identity(value: Any) -> Any:
    return value


def _to_timestamp(value: Any) -> Timestamp:
    return Timestamp(value)


def _to_int(value: Any) -> int:
    return int(value)


def _to_float(value: Any) -> float:
    return float(value)


def _to_bool(value: Any) -> bool:
    return bool(value)


@dataclass(frozen=True)
class BoundaryConverter:
    """
    Normalizes user-provided boundary values into values with a native Python order.

    numpy scalars become their Python counterparts and datetimes become
    pandas Timestamps, so that values from different sources compare consistently.
    Anything else is passed through untouched, without copying.
    """

    normalize: NormalizeProtocol
    original_type: Type[Any]

    @classmethod
    def for_type(cls, sample_value: BoundaryScalar) -> "BoundaryConverter":
        """Factory method to create appropriate converter based on input type"""
        if sample_value is None:
            raise InvalidBoundsError(ErrorMessages.BOUNDED_WITHOUT_VALUE)
        # Handle Timestamp first because pandas.Timestamp is a subclass of datetime
        if isinstance(sample_value, Timestamp):
            return cls(normalize=_identity, original_type=Timestamp)
        elif isinstance(sample_value, (datetime, datetime64)):
            return cls(normalize=_to_timestamp, original_type=type(sample_value))
        elif isinstance(sample_value, bool_):
            return cls(normalize=_to_bool, original_type=bool)
        elif isinstance(sample_value, integer):
            return cls(normalize=_to_int, original_type=int)
        elif isinstance(sample_value, floating):
            return cls(normalize=_to_float, original_type=float)
        return cls(normalize=_identity, original_type=type(sample_value))


@dataclass(frozen=True)
class Bound:
    """
    One endpoint of an interval: either a finite value or unbounded.

    Whether an unbounded endpoint stands for -inf or +inf depends on the side of
    the interval it sits on, so a Bound itself carries no sign.
    """

    value: Any = None
    is_bounded: bool = False

    def __post_init__(self) -> None:
        if self.is_bounded and self.value is None:
            raise InvalidBoundsError(ErrorMessages.BOUNDED_WITHOUT_VALUE)
        if not self.is_bounded and self.value is not None:
            raise InvalidBoundsError(ErrorMessages.UNBOUNDED_WITH_VALUE.format(self.value))

    @classmethod
    def bounded(cls, value: BoundaryScalar) -> "Bound":
        converter = BoundaryConverter.for_type(value)
        return cls(value=converter.normalize(value), is_bounded=True)

    @classmethod
    def unbounded(cls) -> "Bound":
        return UNBOUNDED

    @classmethod
    def of(cls, value: Union["Bound", BoundaryScalar, None]) -> "Bound":
        """Coerce a Bound, a raw value or None (unbounded) into a Bound"""
        if isinstance(value, Bound):
            return value
        if value is None:
            return UNBOUNDED
        return cls.bounded(value)

    @property
    def is_unbounded(self) -> bool:
        return not self.is_bounded

    def __repr__(self) -> str:
        if self.is_bounded:
            return f"Bound.bounded({self.value!r})"
        return "Bound.unbounded()"


UNBOUNDED = Bound()


@dataclass(frozen=True)
class IntervalBoundaries:
    start: Bound
    end: Bound

    @classmethod
    def create(
            cls,
            start: Union[Bound, BoundaryScalar, None],
            end: Union[Bound, BoundaryScalar, None],
    ) -> "IntervalBoundaries":
        # Convert only if not already a Bound
        return cls(start=Bound.of(start), end=Bound.of(end))

    @property
    def start_value(self) -> Optional[Any]:
        """Start value, or None when unbounded"""
        return self.start.value if self.start.is_bounded else None

    @property
    def end_value(self) -> Optional[Any]:
        """End value, or None when unbounded"""
        return self.end.value if self.end.is_bounded else None
