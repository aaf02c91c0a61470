import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional, Union

from allen.atomic.relations import AtomicOrderings, AtomicRelations, LazyAtomicRelations
from allen.core.boundaries import Bound
from allen.core.exceptions import ErrorMessages, IntervalError, RelationInvariantError
from allen.core.interval import Interval
from allen.core.types import BoundaryScalar, Domain, Strategy
from allen.relations.detection import (
    ContainsChecker,
    EqualsChecker,
    FinishesChecker,
    IsContainedByChecker,
    IsFinishedByChecker,
    IsMetByChecker,
    IsOverlappedByChecker,
    IsPrecededByChecker,
    IsStartedByChecker,
    MeetsChecker,
    OverlapsChecker,
    PrecedesChecker,
    RelationChecker,
    StartsChecker,
)
from allen.relations.types import Relation

logger = logging.getLogger(__name__)

BoundLike = Union[Bound, BoundaryScalar, None]

# The order of the rules matters: each one is only consulted after every rule
# above it has failed. Relations decided by a single ordering come first.
DECISION_TABLE = OrderedDict(
    (checker.relation, checker)
    for checker in (
        # 1. Disjoint: decided by one ordering
        PrecedesChecker(),  # eb < 0
        IsPrecededByChecker(),  # be > 0
        # 2. Touching: decided by one ordering
        MeetsChecker(),  # eb == 0
        IsMetByChecker(),  # be == 0
        # 3. Shared end
        FinishesChecker(),  # ee == 0, bb > 0
        IsFinishedByChecker(),  # ee == 0, bb < 0
        # 4. Shared start
        StartsChecker(),  # bb == 0, ee < 0
        IsStartedByChecker(),  # bb == 0, ee > 0
        # 5. Containment
        ContainsChecker(),  # bb < 0, ee > 0
        IsContainedByChecker(),  # bb > 0, ee < 0
        # 6. Identity
        EqualsChecker(),  # bb == 0, ee == 0
        # 7. Partial overlap
        OverlapsChecker(),  # bb < 0, eb > 0, ee < 0
        IsOverlappedByChecker(),  # bb > 0, be < 0, ee > 0
    )
)


class ClassifierConfig:
    """Configuration for relation classification"""

    def __init__(
            self,
            domain: Optional[Domain] = None,
            strategy: Optional[Strategy] = None,
    ):
        self.domain = domain or Domain.DISCRETE
        self.strategy = strategy or Strategy.LAZY
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.domain, Domain):
            raise ValueError(ErrorMessages.INVALID_DOMAIN.format(self.domain))
        if not isinstance(self.strategy, Strategy):
            raise ValueError(ErrorMessages.INVALID_STRATEGY.format(self.strategy))

    def set_domain(self, domain: Domain) -> None:
        if not isinstance(domain, Domain):
            raise ValueError(ErrorMessages.INVALID_DOMAIN.format(domain))
        self.domain = domain

    def set_strategy(self, strategy: Strategy) -> None:
        if not isinstance(strategy, Strategy):
            raise ValueError(ErrorMessages.INVALID_STRATEGY.format(strategy))
        self.strategy = strategy

    def __repr__(self) -> str:
        return f"ClassifierConfig(domain={self.domain}, strategy={self.strategy})"


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of a classification that reports bad input instead of raising"""

    relation: Optional[Relation] = None
    error: Optional[IntervalError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


class RelationClassifier:
    """
    Determines which of Allen's thirteen relations holds between two intervals.

    The relation is read off the four atomic orderings between the intervals'
    endpoints by walking DECISION_TABLE from top to bottom. With Strategy.LAZY an
    ordering is only computed when a rule asks for it, so e.g. an interval that
    ends before the other starts is classified after a single comparison. With
    Strategy.EAGER all four orderings are computed first. Both strategies give
    the same relation for any pair whose endpoints are all mutually ordered.
    """

    def __init__(self, config: Optional[ClassifierConfig] = None) -> None:
        self.config = config or ClassifierConfig()

    @staticmethod
    def classify_atomics(atomics: AtomicOrderings) -> Relation:
        """Maps atomic orderings to the relation they imply"""
        checker: RelationChecker
        for relation, checker in DECISION_TABLE.items():
            if checker.check(atomics):
                logger.debug("Matched %s via %r", relation, checker)
                return relation

        message = ErrorMessages.UNMATCHED_RELATION.format(
            atomics.bb, atomics.be, atomics.eb, atomics.ee
        )
        logger.error(message)
        raise RelationInvariantError(message)

    def atomics_for(self, s: Interval, t: Interval) -> AtomicOrderings:
        """Validates the pair and prepares its atomic orderings for the configured strategy"""
        if self.config.strategy is Strategy.EAGER:
            return AtomicRelations.from_intervals(s, t)
        return LazyAtomicRelations.from_intervals(s, t)

    def classify_intervals(self, s: Interval, t: Interval) -> Relation:
        """
        Returns the relation between ``s`` and ``t``.

        Raises:
            EmptyIntervalError: if either interval is empty
            AmbiguousOrderError: if a needed comparison has no definite order
            DomainMismatchError: if the intervals belong to different domains
        """
        return self.classify_atomics(self.atomics_for(s, t))

    def classify(
            self,
            s_start: BoundLike,
            s_end: BoundLike,
            t_start: BoundLike,
            t_end: BoundLike,
    ) -> Relation:
        """
        Returns the relation between ``s = (s_start, s_end)`` and ``t = (t_start, t_end)``
        in the configured domain. Bounds may be Bound objects, plain values, or None
        for an unbounded side.
        """
        domain = self.config.domain
        s = Interval.unchecked(s_start, s_end, domain)
        t = Interval.unchecked(t_start, t_end, domain)
        return self.classify_intervals(s, t)

    def try_classify(
            self,
            s_start: BoundLike,
            s_end: BoundLike,
            t_start: BoundLike,
            t_end: BoundLike,
    ) -> ClassificationResult:
        """Like classify, but reports invalid input through the result instead of raising"""
        try:
            return ClassificationResult(relation=self.classify(s_start, s_end, t_start, t_end))
        except IntervalError as e:
            logger.debug("Classification failed: %s", e)
            return ClassificationResult(error=e)

    def try_classify_intervals(self, s: Interval, t: Interval) -> ClassificationResult:
        try:
            return ClassificationResult(relation=self.classify_intervals(s, t))
        except IntervalError as e:
            logger.debug("Classification failed: %s", e)
            return ClassificationResult(error=e)


def classify(
        s_start: BoundLike,
        s_end: BoundLike,
        t_start: BoundLike,
        t_end: BoundLike,
        domain: Domain = Domain.DISCRETE,
        strategy: Strategy = Strategy.LAZY,
) -> Relation:
    """
    Returns the Allen relation between ``s = (s_start, s_end)`` and ``t = (t_start, t_end)``.

    >>> classify(2, 5, 5, 8)
    Relation.MEETS
    >>> classify(None, 5.0, 5.0, None, domain=Domain.CONTINUOUS)
    Relation.MEETS
    """
    return RelationClassifier(ClassifierConfig(domain, strategy)).classify(
        s_start, s_end, t_start, t_end
    )


def try_classify(
        s_start: BoundLike,
        s_end: BoundLike,
        t_start: BoundLike,
        t_end: BoundLike,
        domain: Domain = Domain.DISCRETE,
        strategy: Strategy = Strategy.LAZY,
) -> ClassificationResult:
    return RelationClassifier(ClassifierConfig(domain, strategy)).try_classify(
        s_start, s_end, t_start, t_end
    )


def classify_intervals(
        s: Interval,
        t: Interval,
        strategy: Strategy = Strategy.LAZY,
) -> Relation:
    """Returns the Allen relation between two intervals of the same domain"""
    return RelationClassifier(ClassifierConfig(s.domain, strategy)).classify_intervals(s, t)
