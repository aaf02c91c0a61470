"""
Exhaustive checks of the classifier's algebraic properties over small domains.

Every interval whose bounds come from a handful of values, or are unbounded, is
related to every other one, under both domain conventions.
"""

import itertools

import pytest

from allen.atomic.relations import AtomicRelations
from allen.core.exceptions import EmptyIntervalError
from allen.core.interval import Interval
from allen.core.types import Domain, Strategy
from allen.relations.classifier import DECISION_TABLE, classify_intervals
from allen.relations.types import EQUALS, Relation

DISCRETE_VALUES = [None, 0, 1, 2, 3]
CONTINUOUS_VALUES = [None, 0.0, 0.5, 1.0, 2.5]


def build_intervals(values, domain):
    intervals = []
    for start, end in itertools.product(values, repeat=2):
        if start is not None and end is not None and start >= end:
            continue
        intervals.append(Interval(start, end, domain))
    return intervals


@pytest.fixture(
    params=[
        (DISCRETE_VALUES, Domain.DISCRETE),
        (CONTINUOUS_VALUES, Domain.CONTINUOUS),
    ],
    ids=["discrete", "continuous"],
)
def interval_pairs(request):
    """All pairs of valid intervals"""
    values, domain = request.param
    intervals = build_intervals(values, domain)
    return list(itertools.product(intervals, repeat=2))


class TestClassificationProperties:
    def test_exactly_one_condition_holds(self, interval_pairs):
        for s, t in interval_pairs:
            atomics = AtomicRelations.from_intervals(s, t)
            matches = [
                relation
                for relation, checker in DECISION_TABLE.items()
                if checker.check(atomics)
            ]
            assert len(matches) == 1, (s, t, matches)
            assert classify_intervals(s, t) == matches[0]

    def test_swap_consistency(self, interval_pairs):
        for s, t in interval_pairs:
            assert classify_intervals(t, s) == classify_intervals(s, t).as_converse(), (s, t)

    def test_lazy_and_eager_agree(self, interval_pairs):
        for s, t in interval_pairs:
            lazy = classify_intervals(s, t, Strategy.LAZY)
            eager = classify_intervals(s, t, Strategy.EAGER)
            assert lazy == eager, (s, t)

    def test_every_relation_occurs(self, interval_pairs):
        seen = {classify_intervals(s, t) for s, t in interval_pairs}

        assert seen == set(Relation.all())

    def test_identical_intervals_are_equal(self, interval_pairs):
        for s, _ in interval_pairs:
            assert classify_intervals(s, s) == EQUALS


class TestConverseProperties:
    @pytest.mark.parametrize("relation", Relation.all(), ids=str)
    def test_involution(self, relation):
        assert relation.as_converse().as_converse() == relation

    @pytest.mark.parametrize("relation", Relation.all(), ids=str)
    def test_only_equals_is_its_own_converse(self, relation):
        if relation == EQUALS:
            assert relation.as_converse() == relation
        else:
            assert relation.as_converse() != relation

    @pytest.mark.parametrize(
        "values, domain",
        [(DISCRETE_VALUES, Domain.DISCRETE), (CONTINUOUS_VALUES, Domain.CONTINUOUS)],
        ids=["discrete", "continuous"],
    )
    def test_zero_width_intervals_are_rejected(self, values, domain):
        for value in values[1:]:
            with pytest.raises(EmptyIntervalError):
                Interval(value, value, domain)
