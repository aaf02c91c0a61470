import logging
from typing import Any, Optional

from pandas import DataFrame, Series, isna

from allen.core.exceptions import ErrorMessages, IntervalError, InvalidBoundsError
from allen.core.types import Domain, Strategy
from allen.relations.classifier import ClassifierConfig, RelationClassifier

logger = logging.getLogger(__name__)

_ERROR_MODES = ("raise", "coerce")


def _missing_as_unbounded(value: Any) -> Optional[Any]:
    # isna() on a scalar; NaN, None and NaT all mark an unbounded side
    if isna(value):
        return None
    return value


def classify_frame(
        df: DataFrame,
        s_start: str,
        s_end: str,
        t_start: str,
        t_end: str,
        domain: Domain = Domain.DISCRETE,
        strategy: Strategy = Strategy.LAZY,
        errors: str = "raise",
) -> Series:
    """
    Classifies the interval pair held in each row of a DataFrame.

    Args:
        df: frame with one interval pair per row
        s_start, s_end: columns holding the bounds of interval ``s``
        t_start, t_end: columns holding the bounds of interval ``t``
        domain: domain of all the intervals
        strategy: how the endpoint comparisons are evaluated
        errors: ``"raise"`` to propagate the first invalid row, ``"coerce"`` to
            record None for invalid rows instead

    Returns:
        Series of relation names (e.g. ``"Meets"``), indexed like ``df``.

    Missing values in the bound columns stand for an unbounded side.
    """
    if errors not in _ERROR_MODES:
        raise ValueError(ErrorMessages.INVALID_ERRORS.format(errors))

    columns = [s_start, s_end, t_start, t_end]
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise InvalidBoundsError(ErrorMessages.MISSING_COLUMNS.format(missing))

    if df.empty:
        return Series([], index=df.index, dtype=object, name="relation")

    classifier = RelationClassifier(ClassifierConfig(domain, strategy))

    # Convert to numpy once for faster row access
    values = df[columns].to_numpy(dtype=object)
    relations = []
    failures = 0
    for row in values:
        bounds = [_missing_as_unbounded(value) for value in row]
        if errors == "raise":
            relations.append(classifier.classify(*bounds).name)
            continue
        try:
            relations.append(classifier.classify(*bounds).name)
        except IntervalError as e:
            logger.debug("Row %s could not be classified: %s", bounds, e)
            relations.append(None)
            failures += 1

    if failures:
        logger.warning(
            "%d of %d rows could not be classified and were set to None",
            failures,
            len(values),
        )

    return Series(relations, index=df.index, dtype=object, name="relation")
