import math

import numpy as np
import pandas as pd
import pytest

from allen.core.types import Domain, Ordering, Strategy


class TestOrderingCompare:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (1, 2, Ordering.LESS),
            (2, 2, Ordering.EQUAL),
            (3, 2, Ordering.GREATER),
            (1.5, 1.5, Ordering.EQUAL),
            ("a", "b", Ordering.LESS),
            (pd.Timestamp("2023-01-02"), pd.Timestamp("2023-01-01"), Ordering.GREATER),
            (10 ** 100, 10 ** 100 + 1, Ordering.LESS),
        ],
    )
    def test_native_order(self, a, b, expected):
        assert Ordering.compare(a, b) is expected

    def test_nan_has_no_order(self):
        assert Ordering.compare(math.nan, 1.0) is None
        assert Ordering.compare(1.0, math.nan) is None
        assert Ordering.compare(math.nan, math.nan) is None

    def test_nat_has_no_order(self):
        assert Ordering.compare(pd.NaT, pd.Timestamp("2023-01-01")) is None

    def test_incomparable_types_have_no_order(self):
        assert Ordering.compare(1, "a") is None

    def test_comparison_without_single_truth_value(self):
        # numpy arrays compare elementwise, so the result has no single truth value
        assert Ordering.compare(np.array([1, 2]), np.array([2, 1])) is None
        assert Ordering.compare(np.array([1, 2]), np.array([1, 2])) is None

    def test_partial_order_incomparable_values(self):
        # neither set is a subset of the other
        assert Ordering.compare({1}, {2}) is None
        assert Ordering.compare({1}, {1, 2}) is Ordering.LESS


class TestOrderingReverse:
    def test_reverse(self):
        assert Ordering.LESS.reverse() is Ordering.GREATER
        assert Ordering.GREATER.reverse() is Ordering.LESS
        assert Ordering.EQUAL.reverse() is Ordering.EQUAL

    def test_values_follow_sign_convention(self):
        assert [o.value for o in Ordering] == [-1, 0, 1]


class TestDomain:
    def test_discrete_requires_start_before_end(self):
        assert not Domain.DISCRETE.is_empty(Ordering.LESS)
        assert Domain.DISCRETE.is_empty(Ordering.EQUAL)
        assert Domain.DISCRETE.is_empty(Ordering.GREATER)

    def test_continuous_requires_start_before_end(self):
        assert not Domain.CONTINUOUS.is_empty(Ordering.LESS)
        assert Domain.CONTINUOUS.is_empty(Ordering.EQUAL)
        assert Domain.CONTINUOUS.is_empty(Ordering.GREATER)

    def test_strategies(self):
        assert {s.name for s in Strategy} == {"LAZY", "EAGER"}
