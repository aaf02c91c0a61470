from typing import TYPE_CHECKING, Any, Optional, Tuple, Union

from allen.core.boundaries import Bound, IntervalBoundaries
from allen.core.types import BoundaryScalar, Domain
from allen.core.validation import IntervalValidator

if TYPE_CHECKING:
    from allen.relations.types import Relation

BoundLike = Union[Bound, BoundaryScalar, None]


class Interval:
    """
    An interval over an ordered domain, possibly unbounded on either side.

    An Interval is an immutable pair of start and end bounds together with the
    Domain that fixes its convention:

    - DISCRETE intervals are half-open, ``[start, end)``, like ``range``
    - CONTINUOUS intervals are closed, ``[start, end]``

    Intervals are validated on construction, so an Interval built through
    ``Interval(...)`` or one of the factory methods is never empty.

    Examples:
    --------
    >>> Interval(2, 5).precedes(Interval(6, 8))
    True
    >>> Interval(2.0, 5.0, Domain.CONTINUOUS).relation_to(Interval(5.0, 8.0, Domain.CONTINUOUS))
    Relation.MEETS
    """

    __slots__ = ("_boundaries", "_domain")

    def __init__(
            self,
            start: BoundLike = None,
            end: BoundLike = None,
            domain: Domain = Domain.DISCRETE,
    ) -> None:
        self._init_fields(IntervalBoundaries.create(start, end), domain)
        IntervalValidator.validate_interval(self)

    def _init_fields(self, boundaries: IntervalBoundaries, domain: Domain) -> None:
        object.__setattr__(self, "_boundaries", boundaries)
        object.__setattr__(self, "_domain", domain)

    @classmethod
    def unchecked(
            cls,
            start: BoundLike = None,
            end: BoundLike = None,
            domain: Domain = Domain.DISCRETE,
    ) -> "Interval":
        """Creates an interval without validating it; the classifier validates before use"""
        interval = cls.__new__(cls)
        interval._init_fields(IntervalBoundaries.create(start, end), domain)
        return interval

    @classmethod
    def starting_at(cls, start: BoundaryScalar, domain: Domain = Domain.DISCRETE) -> "Interval":
        """``start..``"""
        return cls(start, None, domain)

    @classmethod
    def ending_at(cls, end: BoundaryScalar, domain: Domain = Domain.DISCRETE) -> "Interval":
        """``..end`` (discrete) or ``..=end`` (continuous)"""
        return cls(None, end, domain)

    @classmethod
    def full(cls, domain: Domain = Domain.DISCRETE) -> "Interval":
        """``..``, the interval covering the whole domain"""
        return cls(None, None, domain)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Boundary Access
    # ---------------

    @property
    def boundaries(self) -> IntervalBoundaries:
        return self._boundaries

    @property
    def domain(self) -> Domain:
        return self._domain

    @property
    def start(self) -> Optional[Any]:
        """Start value, or None when unbounded"""
        return self._boundaries.start_value

    @property
    def end(self) -> Optional[Any]:
        """End value, or None when unbounded"""
        return self._boundaries.end_value

    @property
    def start_bound(self) -> Bound:
        return self._boundaries.start

    @property
    def end_bound(self) -> Bound:
        return self._boundaries.end

    @property
    def bounds(self) -> Tuple[Bound, Bound]:
        return self._boundaries.start, self._boundaries.end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._domain is other._domain and self._boundaries == other._boundaries

    def __hash__(self) -> int:
        return hash((self._boundaries, self._domain))

    def __repr__(self) -> str:
        return f"Interval({self.start!r}, {self.end!r}, {self._domain})"

    def __str__(self) -> str:
        start = "" if self.start is None else repr(self.start)
        end = "" if self.end is None else repr(self.end)
        separator = ".." if self._domain is Domain.DISCRETE else "..="
        if self.end is None:
            separator = ".."
        return f"{start}{separator}{end}"

    # Interval Relationships
    # ---------------------

    def relation_to(self, other: "Interval") -> "Relation":
        """Returns the Allen relation that holds between this interval and ``other``"""
        from allen.relations.classifier import classify_intervals

        return classify_intervals(self, other)

    def precedes(self, other: "Interval") -> bool:
        from allen.relations.types import PRECEDES

        return self.relation_to(other) == PRECEDES

    def is_preceded_by(self, other: "Interval") -> bool:
        from allen.relations.types import IS_PRECEDED_BY

        return self.relation_to(other) == IS_PRECEDED_BY

    def meets(self, other: "Interval") -> bool:
        from allen.relations.types import MEETS

        return self.relation_to(other) == MEETS

    def is_met_by(self, other: "Interval") -> bool:
        from allen.relations.types import IS_MET_BY

        return self.relation_to(other) == IS_MET_BY

    def overlaps(self, other: "Interval") -> bool:
        from allen.relations.types import OVERLAPS

        return self.relation_to(other) == OVERLAPS

    def is_overlapped_by(self, other: "Interval") -> bool:
        from allen.relations.types import IS_OVERLAPPED_BY

        return self.relation_to(other) == IS_OVERLAPPED_BY

    def starts(self, other: "Interval") -> bool:
        from allen.relations.types import STARTS

        return self.relation_to(other) == STARTS

    def is_started_by(self, other: "Interval") -> bool:
        from allen.relations.types import IS_STARTED_BY

        return self.relation_to(other) == IS_STARTED_BY

    def contains(self, other: "Interval") -> bool:
        from allen.relations.types import CONTAINS

        return self.relation_to(other) == CONTAINS

    def is_contained_by(self, other: "Interval") -> bool:
        from allen.relations.types import IS_CONTAINED_BY

        return self.relation_to(other) == IS_CONTAINED_BY

    def finishes(self, other: "Interval") -> bool:
        from allen.relations.types import FINISHES

        return self.relation_to(other) == FINISHES

    def is_finished_by(self, other: "Interval") -> bool:
        from allen.relations.types import IS_FINISHED_BY

        return self.relation_to(other) == IS_FINISHED_BY

    def equals(self, other: "Interval") -> bool:
        from allen.relations.types import EQUALS

        return self.relation_to(other) == EQUALS
