"""
Predicate shortcuts over anything ``allen.conversions.ranges.to_interval`` accepts.

>>> precedes(range(2, 4), range(5, 8))
True
>>> meets(slice(None, 5), slice(5, None))
True
"""

from typing import Any, Optional

from allen.conversions.ranges import native_domain, to_interval
from allen.core.types import Domain, Strategy
from allen.relations.classifier import classify_intervals
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


def relate(
        s: Any,
        t: Any,
        domain: Optional[Domain] = None,
        strategy: Strategy = Strategy.LAZY,
) -> Relation:
    """
    Converts both values to intervals and returns the relation between them.

    Without an explicit ``domain`` the convention of whichever value carries one
    is used, so a plain tuple can be related to a closed pandas.Interval.
    """
    domain = domain or native_domain(s) or native_domain(t)
    return classify_intervals(to_interval(s, domain), to_interval(t, domain), strategy)


def precedes(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == PRECEDES


def is_preceded_by(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == IS_PRECEDED_BY


def meets(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == MEETS


def is_met_by(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == IS_MET_BY


def overlaps(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == OVERLAPS


def is_overlapped_by(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == IS_OVERLAPPED_BY


def starts(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == STARTS


def is_started_by(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == IS_STARTED_BY


def contains(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == CONTAINS


def is_contained_by(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == IS_CONTAINED_BY


def finishes(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == FINISHES


def is_finished_by(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == IS_FINISHED_BY


def equals(s: Any, t: Any, domain: Optional[Domain] = None) -> bool:
    return relate(s, t, domain) == EQUALS
