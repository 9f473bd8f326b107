# solrcriteria/query/entries.py
"""Predicate entries attached to a criteria.

`OperationKey` maps each predicate kind to the symbolic key renderers
dispatch on. The keys are a stable contract and never change at runtime.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

# Marks an unset boost or fuzzy distance. Always reuse this object so entries
# holding it still compare equal.
UNSET = math.nan


class OperationKey(Enum):
    EQUALS = "$equals"
    CONTAINS = "$contains"
    STARTS_WITH = "$startsWith"
    ENDS_WITH = "$endsWith"
    EXPRESSION = "$expression"
    BETWEEN = "$between"
    NEAR = "$near"
    WITHIN = "$within"
    FUZZY = "$fuzzy"
    SLOPPY = "$sloppy"

    @property
    def key(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class CriteriaEntry:
    """Single (operation kind, operand) pair.

    Operand shapes per kind:

    - EQUALS, CONTAINS, STARTS_WITH, ENDS_WITH, EXPRESSION: the raw value
    - BETWEEN: (lower, upper, include_lower, include_upper), None bounds are open
    - FUZZY: (text, levenshtein_distance), distance is `UNSET` for the default
    - SLOPPY: (phrase, slop)
    - WITHIN, NEAR: (location, distance) or, for NEAR only, (bounding_box,)
    """

    kind: OperationKey
    value: Any

    @property
    def key(self) -> str:
        return self.kind.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CriteriaEntry):
            return NotImplemented
        return self.kind is other.kind and _same_operand(self.value, other.value)

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        return f"CriteriaEntry({self.key}, {self.value!r})"


def _same_operand(a: Any, b: Any) -> bool:
    """Equality that keeps `1`, `1.0` and `True` apart, also inside tuples."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, tuple):
        return len(a) == len(b) and all(_same_operand(x, y) for x, y in zip(a, b))
    return a == b
