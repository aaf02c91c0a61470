from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from allen.core.boundaries import IntervalBoundaries
from allen.core.exceptions import (
    AmbiguousOrderError,
    DomainMismatchError,
    EmptyIntervalError,
    ErrorMessages,
)
from allen.core.types import Domain, Ordering

if TYPE_CHECKING:
    from allen.core.interval import Interval


@dataclass
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None


class IntervalValidator:
    """Validates intervals with respect to Allen's interval algebra"""

    @staticmethod
    def validate_boundaries(
            boundaries: IntervalBoundaries,
            domain: Domain,
            position: str = "s",
    ) -> ValidationResult:
        """
        Checks that the boundaries describe a non-empty interval in the given domain.

        An unbounded side never makes an interval empty. Otherwise the start must be
        strictly before the end, in either domain.
        """
        start, end = boundaries.start, boundaries.end
        if start.is_unbounded or end.is_unbounded:
            return ValidationResult(is_valid=True)

        order = Ordering.compare(start.value, end.value)
        if order is None:
            raise AmbiguousOrderError(
                ErrorMessages.AMBIGUOUS_INTERVAL.format(start.value, end.value, position)
            )
        if domain.is_empty(order):
            raise EmptyIntervalError(
                ErrorMessages.EMPTY_INTERVAL.format(
                    position, domain.name.lower(), start.value, end.value
                ),
                position=position,
            )
        return ValidationResult(is_valid=True)

    @staticmethod
    def validate_interval(interval: "Interval", position: str = "s") -> ValidationResult:
        return IntervalValidator.validate_boundaries(
            interval.boundaries, interval.domain, position
        )

    @staticmethod
    def validate_pair(s: "Interval", t: "Interval") -> ValidationResult:
        """Validates both intervals of a pair and that they share a domain"""
        if s.domain is not t.domain:
            raise DomainMismatchError(
                ErrorMessages.DOMAIN_MISMATCH.format(
                    s.domain.name.lower(), t.domain.name.lower()
                )
            )
        IntervalValidator.validate_interval(s, "s")
        IntervalValidator.validate_interval(t, "t")
        return ValidationResult(is_valid=True)
