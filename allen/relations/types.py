from dataclasses import dataclass
from enum import Enum, auto
from functools import total_ordering
from typing import Dict, Tuple

from allen.core.exceptions import ErrorMessages


class RelationFamily(Enum):
    """
    The seven families of Allen's interval relations.

    Every family but EQUALS has two orientations, related as converses.
    """

    PRECEDES = auto()  # s ends before t starts
    MEETS = auto()  # s ends where t starts
    OVERLAPS = auto()  # s starts first and ends inside t
    FINISHES = auto()  # s starts inside t and both end together
    CONTAINS = auto()  # t lies strictly inside s
    STARTS = auto()  # both start together and s ends first
    EQUALS = auto()  # same start, same end


_Key = Tuple[RelationFamily, bool]

# Ranked by how far s begins before t, then by how far s ends before t
_RANKING: Tuple[_Key, ...] = (
    (RelationFamily.PRECEDES, False),
    (RelationFamily.MEETS, False),
    (RelationFamily.OVERLAPS, False),
    (RelationFamily.FINISHES, True),
    (RelationFamily.CONTAINS, False),
    (RelationFamily.STARTS, False),
    (RelationFamily.EQUALS, False),
    (RelationFamily.STARTS, True),
    (RelationFamily.CONTAINS, True),
    (RelationFamily.FINISHES, False),
    (RelationFamily.OVERLAPS, True),
    (RelationFamily.MEETS, True),
    (RelationFamily.PRECEDES, True),
)
_RANKS: Dict[_Key, int] = {key: rank for rank, key in enumerate(_RANKING)}

_NAMES: Dict[_Key, str] = {
    (RelationFamily.PRECEDES, False): "Precedes",
    (RelationFamily.PRECEDES, True): "IsPrecededBy",
    (RelationFamily.MEETS, False): "Meets",
    (RelationFamily.MEETS, True): "IsMetBy",
    (RelationFamily.OVERLAPS, False): "Overlaps",
    (RelationFamily.OVERLAPS, True): "IsOverlappedBy",
    (RelationFamily.FINISHES, False): "Finishes",
    (RelationFamily.FINISHES, True): "IsFinishedBy",
    (RelationFamily.CONTAINS, False): "Contains",
    (RelationFamily.CONTAINS, True): "IsContainedBy",
    (RelationFamily.STARTS, False): "Starts",
    (RelationFamily.STARTS, True): "IsStartedBy",
    (RelationFamily.EQUALS, False): "Equals",
}

_SYMBOLS: Dict[_Key, str] = {
    (RelationFamily.PRECEDES, False): "p",
    (RelationFamily.PRECEDES, True): "P",
    (RelationFamily.MEETS, False): "m",
    (RelationFamily.MEETS, True): "M",
    (RelationFamily.OVERLAPS, False): "o",
    (RelationFamily.OVERLAPS, True): "O",
    (RelationFamily.FINISHES, False): "f",
    (RelationFamily.FINISHES, True): "F",
    (RelationFamily.CONTAINS, False): "D",
    (RelationFamily.CONTAINS, True): "d",
    (RelationFamily.STARTS, False): "s",
    (RelationFamily.STARTS, True): "S",
    (RelationFamily.EQUALS, False): "e",
}


@total_ordering
@dataclass(frozen=True)
class Relation:
    """
    One of the thirteen relations Allen's interval algebra distinguishes between
    two intervals ``s`` and ``t``.

    A relation is a family plus an orientation. ``is_inverted=False`` reads
    "s <family> t" (e.g. "s precedes t"), ``is_inverted=True`` reads
    "s is <family>ed by t" (e.g. "s is preceded by t"). Inverting a relation
    gives its converse, the relation that holds once ``s`` and ``t`` swap places.

    ::

        PRECEDES          s: [----]             MEETS         s: [----]
                          t:        [----]                    t:      [----]

        OVERLAPS          s: [------]           FINISHES      s:     [----]
                          t:     [------]                     t: [--------]

        CONTAINS          s: [--------]         STARTS        s: [----]
                          t:   [----]                         t: [--------]

        EQUALS            s: [----]
                          t: [----]

    Relations are totally ordered by how far ``s`` begins before ``t`` and then
    by how far ``s`` ends before ``t``::

        PRECEDES < MEETS < OVERLAPS < IS_FINISHED_BY < CONTAINS < STARTS < EQUALS
        < IS_STARTED_BY < IS_CONTAINED_BY < FINISHES < IS_OVERLAPPED_BY
        < IS_MET_BY < IS_PRECEDED_BY
    """

    family: RelationFamily
    is_inverted: bool = False

    def __post_init__(self) -> None:
        if self.family is RelationFamily.EQUALS and self.is_inverted:
            raise ValueError(ErrorMessages.INVERTED_EQUALS)

    @property
    def _key(self) -> _Key:
        return self.family, self.is_inverted

    @property
    def rank(self) -> int:
        """Position of the relation in the total order, from 0 to 12"""
        return _RANKS[self._key]

    @property
    def name(self) -> str:
        return _NAMES[self._key]

    @property
    def symbol(self) -> str:
        """Conventional one-letter notation (p, m, o, F, D, s, e, S, d, f, O, M, P)"""
        return _SYMBOLS[self._key]

    @property
    def is_symmetric(self) -> bool:
        return self.family is RelationFamily.EQUALS

    def as_converse(self) -> "Relation":
        """Returns the relation that holds between ``t`` and ``s``"""
        if self.is_symmetric:
            return self
        return Relation(self.family, not self.is_inverted)

    @classmethod
    def all(cls) -> Tuple["Relation", ...]:
        """All thirteen relations, in ascending order"""
        return tuple(cls(family, is_inverted) for family, is_inverted in _RANKING)

    @classmethod
    def from_name(cls, name: str) -> "Relation":
        """
        Looks up a relation by name. Both display names ("IsPrecededBy") and
        constant names ("IS_PRECEDED_BY") are accepted, case-insensitively.
        """
        normalized = name.replace("_", "").replace(" ", "").lower()
        for key, display_name in _NAMES.items():
            if display_name.lower() == normalized:
                return cls(*key)
        raise ValueError(ErrorMessages.UNKNOWN_RELATION.format(name))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.rank < other.rank

    def __repr__(self) -> str:
        return f"Relation.{_CONSTANT_NAMES[self._key]}"

    def __str__(self) -> str:
        return self.name


PRECEDES = Relation(RelationFamily.PRECEDES)
IS_PRECEDED_BY = Relation(RelationFamily.PRECEDES, is_inverted=True)
MEETS = Relation(RelationFamily.MEETS)
IS_MET_BY = Relation(RelationFamily.MEETS, is_inverted=True)
OVERLAPS = Relation(RelationFamily.OVERLAPS)
IS_OVERLAPPED_BY = Relation(RelationFamily.OVERLAPS, is_inverted=True)
FINISHES = Relation(RelationFamily.FINISHES)
IS_FINISHED_BY = Relation(RelationFamily.FINISHES, is_inverted=True)
CONTAINS = Relation(RelationFamily.CONTAINS)
IS_CONTAINED_BY = Relation(RelationFamily.CONTAINS, is_inverted=True)
STARTS = Relation(RelationFamily.STARTS)
IS_STARTED_BY = Relation(RelationFamily.STARTS, is_inverted=True)
EQUALS = Relation(RelationFamily.EQUALS)

_CONSTANTS: Dict[str, Relation] = {
    "PRECEDES": PRECEDES,
    "IS_PRECEDED_BY": IS_PRECEDED_BY,
    "MEETS": MEETS,
    "IS_MET_BY": IS_MET_BY,
    "OVERLAPS": OVERLAPS,
    "IS_OVERLAPPED_BY": IS_OVERLAPPED_BY,
    "FINISHES": FINISHES,
    "IS_FINISHED_BY": IS_FINISHED_BY,
    "CONTAINS": CONTAINS,
    "IS_CONTAINED_BY": IS_CONTAINED_BY,
    "STARTS": STARTS,
    "IS_STARTED_BY": IS_STARTED_BY,
    "EQUALS": EQUALS,
}
_CONSTANT_NAMES: Dict[_Key, str] = {
    relation._key: constant for constant, relation in _CONSTANTS.items()
}

# Expose the constants on the class as well, e.g. Relation.MEETS
for _constant, _relation in _CONSTANTS.items():
    setattr(Relation, _constant, _relation)
del _constant, _relation
