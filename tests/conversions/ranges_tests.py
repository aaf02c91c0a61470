import math

import numpy as np
import pandas as pd
import pytest

from allen.conversions.ranges import (
    from_pandas,
    from_range,
    from_slice,
    from_tuple,
    native_domain,
    to_interval,
)
from allen.core.exceptions import DomainMismatchError, EmptyIntervalError, InvalidBoundsError
from allen.core.interval import Interval
from allen.core.types import Domain
from allen.relations.classifier import classify_intervals
from allen.relations.types import MEETS, PRECEDES


class TestFromRange:
    def test_unit_step(self):
        assert from_range(range(2, 5)) == Interval(2, 5)

    def test_other_steps_rejected(self):
        with pytest.raises(InvalidBoundsError, match="step 2"):
            from_range(range(0, 10, 2))

    def test_continuous_rejected(self):
        with pytest.raises(DomainMismatchError):
            from_range(range(2, 5), Domain.CONTINUOUS)

    def test_empty_range(self):
        with pytest.raises(EmptyIntervalError):
            from_range(range(5, 2))


class TestFromSlice:
    def test_bounded(self):
        assert from_slice(slice(2, 5)) == Interval(2, 5)

    def test_unbounded_sides(self):
        assert from_slice(slice(None, 5)) == Interval(None, 5)
        assert from_slice(slice(2, None)) == Interval(2, None)
        assert from_slice(slice(None)) == Interval.full()

    def test_unit_step_allowed(self):
        assert from_slice(slice(2, 5, 1)) == Interval(2, 5)

    def test_other_steps_rejected(self):
        with pytest.raises(InvalidBoundsError):
            from_slice(slice(2, 5, -1))


class TestFromPandas:
    def test_left_closed_is_discrete(self):
        interval = from_pandas(pd.Interval(2, 5, closed="left"))

        assert interval == Interval(2, 5, Domain.DISCRETE)

    def test_closed_both_is_continuous(self):
        interval = from_pandas(pd.Interval(2.0, 5.0, closed="both"))

        assert interval == Interval(2.0, 5.0, Domain.CONTINUOUS)

    def test_infinite_endpoints_are_unbounded(self):
        interval = from_pandas(pd.Interval(-np.inf, 4.0, closed="both"))

        assert interval.start is None
        assert interval.end == 4.0

    def test_timestamps(self):
        interval = from_pandas(
            pd.Interval(pd.Timestamp("2024-01-01"), pd.Timestamp("2024-02-01"), closed="left")
        )

        assert interval.domain is Domain.DISCRETE
        assert interval.end == pd.Timestamp("2024-02-01")

    @pytest.mark.parametrize("closed", ["right", "neither"])
    def test_unsupported_closed(self, closed):
        with pytest.raises(InvalidBoundsError, match=closed):
            from_pandas(pd.Interval(2, 5, closed=closed))

    def test_inclusive_as_discrete_rejected(self):
        with pytest.raises(DomainMismatchError):
            from_pandas(pd.Interval(-math.inf, 4.0, closed="both"), Domain.DISCRETE)


class TestFromTuple:
    def test_default_domain(self):
        assert from_tuple((1, 2)) == Interval(1, 2)

    def test_explicit_domain(self):
        assert from_tuple((1.0, 2.0), Domain.CONTINUOUS) == Interval(1.0, 2.0, Domain.CONTINUOUS)

    def test_point_rejected(self):
        with pytest.raises(EmptyIntervalError):
            from_tuple((1.0, 1.0), Domain.CONTINUOUS)

    def test_unbounded(self):
        assert from_tuple((None, None)) == Interval.full()

    def test_wrong_length(self):
        with pytest.raises(InvalidBoundsError):
            from_tuple((1, 2, 3))


class TestToInterval:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (range(1, 3), Interval(1, 3)),
            (slice(1, 3), Interval(1, 3)),
            ((1, 3), Interval(1, 3)),
            (pd.Interval(1, 3, closed="left"), Interval(1, 3)),
            (Interval(1, 3), Interval(1, 3)),
        ],
    )
    def test_dispatch(self, value, expected):
        assert to_interval(value) == expected

    def test_interval_domain_checked(self):
        with pytest.raises(DomainMismatchError):
            to_interval(Interval(1, 3), Domain.CONTINUOUS)

    def test_unsupported(self):
        with pytest.raises(InvalidBoundsError, match="list"):
            to_interval([1, 3])

    def test_native_domain(self):
        assert native_domain(range(1, 2)) is Domain.DISCRETE
        assert native_domain(slice(1, 2)) is Domain.DISCRETE
        assert native_domain(pd.Interval(1.0, 2.0, closed="both")) is Domain.CONTINUOUS
        assert native_domain(Interval(1.0, 2.0, Domain.CONTINUOUS)) is Domain.CONTINUOUS
        assert native_domain((1, 2)) is None
        assert native_domain(pd.Interval(1, 2, closed="right")) is None


class TestDomainsAreNotInterchangeable:
    def test_discrete_half_open_meets(self):
        s = to_interval(slice(None, 5))
        t = to_interval(slice(5, None))

        assert classify_intervals(s, t) == MEETS

    def test_continuous_closed_meets(self):
        s = to_interval(pd.Interval(-np.inf, 5.0, closed="both"))
        t = to_interval(pd.Interval(5.0, np.inf, closed="both"))

        assert classify_intervals(s, t) == MEETS

    def test_continuous_gap_precedes(self):
        s = to_interval(pd.Interval(-np.inf, 4.0, closed="both"))
        t = to_interval(pd.Interval(5.0, np.inf, closed="both"))

        assert classify_intervals(s, t) == PRECEDES

    def test_inclusive_bound_in_discrete_domain(self):
        with pytest.raises(DomainMismatchError):
            to_interval(pd.Interval(-np.inf, 4.0, closed="both"), Domain.DISCRETE)
