"""
Atomic relations between two intervals ``s`` and ``t``.

Each interval is described by its begin point b(.) and end point e(.). The four
atomic relations are the orderings

- ``bb``: b(s) against b(t)
- ``be``: b(s) against e(t)
- ``eb``: e(s) against b(t)
- ``ee``: e(s) against e(t)

and together they determine the Allen relation between ``s`` and ``t``. See

    Georgala, K., Sherif, M. A., & Ngonga Ngomo, A. C. (2016).
    An efficient approach for the generation of Allen relations.
    In ECAI 2016 (pp. 948-956). IOS Press.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, List, Protocol, Tuple

from allen.atomic.comparators import BB, BE, EB, EE
from allen.core.boundaries import IntervalBoundaries
from allen.core.types import Ordering
from allen.core.validation import IntervalValidator

if TYPE_CHECKING:
    from allen.core.interval import Interval


class AtomicOrderings(Protocol):
    """Anything exposing the four atomic orderings"""

    @property
    def bb(self) -> Ordering: ...

    @property
    def be(self) -> Ordering: ...

    @property
    def eb(self) -> Ordering: ...

    @property
    def ee(self) -> Ordering: ...


@dataclass(frozen=True)
class AtomicRelations:
    """The four atomic orderings, all computed up front"""

    bb: Ordering
    be: Ordering
    eb: Ordering
    ee: Ordering

    @classmethod
    def from_boundaries(
            cls, s: IntervalBoundaries, t: IntervalBoundaries
    ) -> "AtomicRelations":
        """
        Computes all four orderings. The boundaries are assumed to be validated.

        Raises AmbiguousOrderError on the first comparison without a definite order.
        """
        return cls(
            bb=BB.compare(s.start, t.start),
            be=BE.compare(s.start, t.end),
            eb=EB.compare(s.end, t.start),
            ee=EE.compare(s.end, t.end),
        )

    @classmethod
    def from_intervals(cls, s: "Interval", t: "Interval") -> "AtomicRelations":
        """Validates both intervals, then computes all four orderings"""
        IntervalValidator.validate_pair(s, t)
        return cls.from_boundaries(s.boundaries, t.boundaries)

    def as_tuple(self) -> Tuple[Ordering, Ordering, Ordering, Ordering]:
        return self.bb, self.be, self.eb, self.ee

    def swapped(self) -> "AtomicRelations":
        """The atomic relations of the pair ``(t, s)``"""
        return AtomicRelations(
            bb=self.bb.reverse(),
            be=self.eb.reverse(),
            eb=self.be.reverse(),
            ee=self.ee.reverse(),
        )


class LazyAtomicRelations:
    """
    The four atomic orderings, each computed on first access and then cached.

    The relation classifier only asks for the orderings its decision rules need,
    so feeding it this object skips comparisons that cannot change the outcome.
    ``evaluated`` lists the orderings computed so far, in the order they were
    first requested.
    """

    def __init__(self, s: IntervalBoundaries, t: IntervalBoundaries) -> None:
        self._s = s
        self._t = t
        self._evaluated: List[str] = []

    @classmethod
    def from_intervals(cls, s: "Interval", t: "Interval") -> "LazyAtomicRelations":
        IntervalValidator.validate_pair(s, t)
        return cls(s.boundaries, t.boundaries)

    @cached_property
    def bb(self) -> Ordering:
        result = BB.compare(self._s.start, self._t.start)
        self._evaluated.append("bb")
        return result

    @cached_property
    def be(self) -> Ordering:
        result = BE.compare(self._s.start, self._t.end)
        self._evaluated.append("be")
        return result

    @cached_property
    def eb(self) -> Ordering:
        result = EB.compare(self._s.end, self._t.start)
        self._evaluated.append("eb")
        return result

    @cached_property
    def ee(self) -> Ordering:
        result = EE.compare(self._s.end, self._t.end)
        self._evaluated.append("ee")
        return result

    @property
    def evaluated(self) -> Tuple[str, ...]:
        return tuple(self._evaluated)

    def to_atomic_relations(self) -> AtomicRelations:
        """Forces the remaining comparisons"""
        return AtomicRelations(bb=self.bb, be=self.be, eb=self.eb, ee=self.ee)

    def __repr__(self) -> str:
        computed = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._evaluated)
        return f"LazyAtomicRelations({computed})"
