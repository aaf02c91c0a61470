from datetime import datetime
from enum import Enum, auto
from typing import Any, Optional, Union

from pandas import Timestamp

BoundaryScalar = Union[int, float, str, Timestamp, datetime, Any]


class Ordering(Enum):
    """
    Result of comparing two endpoints.

    The values mirror the sign convention of a three-way comparison, so
    ``Ordering.LESS.value == -1``.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def compare(cls, a: Any, b: Any) -> Optional["Ordering"]:
        """
        Three-way comparison of two scalars using their native order.

        Returns None when the values have no definite order, e.g. when either is
        NaN or NaT, when the comparison raises a TypeError, when its result has no
        single truth value (numpy arrays), or when the values are only partially
        ordered and incomparable.
        """
        try:
            if bool(a < b):
                return cls.LESS
            if bool(a == b):
                return cls.EQUAL
            if bool(a > b):
                return cls.GREATER
        except (TypeError, ValueError):
            return None
        return None

    def reverse(self) -> "Ordering":
        """The ordering seen from the other operand"""
        return Ordering(-self.value)

    def __repr__(self) -> str:
        return f"Ordering.{self.name}"


class Domain(Enum):
    """
    Discreteness of the domain an interval lives in.

    DISCRETE intervals are half-open ``[start, end)``, CONTINUOUS intervals are
    closed ``[start, end]``. Either way an interval needs ``start < end``: Allen's
    relations are only defined for intervals of positive width, so a single
    point is rejected as empty in both domains.
    """

    DISCRETE = auto()
    CONTINUOUS = auto()

    def is_empty(self, start_vs_end: Ordering) -> bool:
        """Whether an interval whose start compares to its end as given is empty"""
        return start_vs_end is not Ordering.LESS


class Strategy(Enum):
    """How the classifier evaluates the four endpoint comparisons"""

    LAZY = auto()  # compute comparisons on demand, in decision-table order
    EAGER = auto()  # compute all four comparisons up front
