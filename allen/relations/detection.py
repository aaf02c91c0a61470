from abc import ABC, abstractmethod

from allen.atomic.relations import AtomicOrderings
from allen.core.types import Ordering
from allen.relations.types import (
    CONTAINS,
    EQUALS,
    FINISHES,
    IS_CONTAINED_BY,
    IS_FINISHED_BY,
    IS_MET_BY,
    IS_OVERLAPPED_BY,
    IS_PRECEDED_BY,
    IS_STARTED_BY,
    MEETS,
    OVERLAPS,
    PRECEDES,
    STARTS,
    Relation,
)

LESS = Ordering.LESS
EQUAL = Ordering.EQUAL
GREATER = Ordering.GREATER


class RelationChecker(ABC):
    """
    Abstract base class for the rules of the relation decision table.

    A checker reads the atomic orderings it needs, in the order it needs them, so
    when it is handed a lazily evaluated set of orderings only those comparisons
    are ever performed. Each condition is written to be tested after every rule
    that precedes it in the table has failed; on its own it is not a full
    characterisation of its relation.
    """

    relation: Relation

    def check(self, atomics: AtomicOrderings) -> bool:
        return self._check_impl(atomics)

    @abstractmethod
    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        """Implementation of the specific rule"""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class PrecedesChecker(RelationChecker):
    """s ends before t starts"""

    relation = PRECEDES

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.eb is LESS


class IsPrecededByChecker(RelationChecker):
    """s starts after t ends"""

    relation = IS_PRECEDED_BY

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.be is GREATER


class MeetsChecker(RelationChecker):
    """s ends exactly where t starts"""

    relation = MEETS

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.eb is EQUAL


class IsMetByChecker(RelationChecker):
    """s starts exactly where t ends"""

    relation = IS_MET_BY

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.be is EQUAL


class FinishesChecker(RelationChecker):
    """Both end together and s starts later"""

    relation = FINISHES

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.ee is EQUAL and atomics.bb is GREATER


class IsFinishedByChecker(RelationChecker):
    """Both end together and s starts earlier"""

    relation = IS_FINISHED_BY

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.ee is EQUAL and atomics.bb is LESS


class StartsChecker(RelationChecker):
    """Both start together and s ends earlier"""

    relation = STARTS

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.bb is EQUAL and atomics.ee is LESS


class IsStartedByChecker(RelationChecker):
    """Both start together and s ends later"""

    relation = IS_STARTED_BY

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.bb is EQUAL and atomics.ee is GREATER


class ContainsChecker(RelationChecker):
    """s starts earlier and ends later"""

    relation = CONTAINS

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.bb is LESS and atomics.ee is GREATER


class IsContainedByChecker(RelationChecker):
    """s starts later and ends earlier"""

    relation = IS_CONTAINED_BY

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.bb is GREATER and atomics.ee is LESS


class EqualsChecker(RelationChecker):
    """Same start and same end"""

    relation = EQUALS

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.bb is EQUAL and atomics.ee is EQUAL


class OverlapsChecker(RelationChecker):
    """s starts first and ends inside t"""

    relation = OVERLAPS

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.bb is LESS and atomics.eb is GREATER and atomics.ee is LESS


class IsOverlappedByChecker(RelationChecker):
    """t starts first and ends inside s"""

    relation = IS_OVERLAPPED_BY

    def _check_impl(self, atomics: AtomicOrderings) -> bool:
        return atomics.bb is GREATER and atomics.be is LESS and atomics.ee is GREATER
