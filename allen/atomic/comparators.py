from abc import ABC, abstractmethod
from typing import Optional

from allen.core.boundaries import Bound
from allen.core.exceptions import AmbiguousOrderError, ErrorMessages
from allen.core.types import Ordering


class EndpointComparator(ABC):
    """
    Orders an endpoint of interval ``s`` against an endpoint of interval ``t``.

    Two bounded endpoints compare by the native order of their values. Whenever
    an unbounded endpoint is involved the answer follows from the endpoint's role
    alone: an unbounded start behaves as -inf, an unbounded end as +inf. No
    sentinel value is ever built for the infinities, so any ordered type works,
    including ones without a representable minimum or maximum.
    """

    s_role: str
    t_role: str

    def partial_compare(self, s: Bound, t: Bound) -> Optional[Ordering]:
        """Returns the ordering of ``s`` relative to ``t``, or None if it is undefined"""
        if s.is_bounded and t.is_bounded:
            return Ordering.compare(s.value, t.value)
        return self._compare_unbounded(s, t)

    def compare(self, s: Bound, t: Bound) -> Ordering:
        """
        Returns the ordering of ``s`` relative to ``t``.

        Raises AmbiguousOrderError if the two values have no definite order; this
        never happens for totally ordered values such as integers.
        """
        result = self.partial_compare(s, t)
        if result is None:
            raise AmbiguousOrderError(
                ErrorMessages.AMBIGUOUS_ORDER.format(
                    f"{self.s_role} of s", s.value, f"{self.t_role} of t", t.value
                )
            )
        return result

    @abstractmethod
    def _compare_unbounded(self, s: Bound, t: Bound) -> Ordering:
        """Ordering when at least one of the endpoints is unbounded"""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class StartStartComparator(EndpointComparator):
    """BB: start of s against start of t"""

    s_role = "start"
    t_role = "start"

    def _compare_unbounded(self, s: Bound, t: Bound) -> Ordering:
        if s.is_unbounded and t.is_unbounded:
            return Ordering.EQUAL
        if s.is_unbounded:
            return Ordering.LESS
        return Ordering.GREATER


class StartEndComparator(EndpointComparator):
    """BE: start of s against end of t"""

    s_role = "start"
    t_role = "end"

    def _compare_unbounded(self, s: Bound, t: Bound) -> Ordering:
        # -inf on the left or +inf on the right
        return Ordering.LESS


class EndStartComparator(EndpointComparator):
    """EB: end of s against start of t"""

    s_role = "end"
    t_role = "start"

    def _compare_unbounded(self, s: Bound, t: Bound) -> Ordering:
        # +inf on the left or -inf on the right
        return Ordering.GREATER


class EndEndComparator(EndpointComparator):
    """EE: end of s against end of t"""

    s_role = "end"
    t_role = "end"

    def _compare_unbounded(self, s: Bound, t: Bound) -> Ordering:
        if s.is_unbounded and t.is_unbounded:
            return Ordering.EQUAL
        if s.is_unbounded:
            return Ordering.GREATER
        return Ordering.LESS


BB = StartStartComparator()
BE = StartEndComparator()
EB = EndStartComparator()
EE = EndEndComparator()
