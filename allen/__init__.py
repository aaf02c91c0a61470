from allen.core.boundaries import Bound
from allen.core.exceptions import (
    AmbiguousOrderError,
    DomainMismatchError,
    EmptyIntervalError,
    IntervalError,
    InvalidBoundsError,
    RelationInvariantError,
)
from allen.core.interval import Interval
from allen.core.types import Domain, Ordering, Strategy
from allen.relations.classifier import (
    ClassificationResult,
    ClassifierConfig,
    RelationClassifier,
    classify,
    classify_intervals,
    try_classify,
)
from allen.relations.predicates import relate
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
    RelationFamily,
)

__version__ = "0.1.0"
