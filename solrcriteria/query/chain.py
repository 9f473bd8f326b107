# solrcriteria/query/chain.py
from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING

from solrcriteria.errors import CriteriaFrozen

if TYPE_CHECKING:
    from solrcriteria.query.criteria import Criteria

logger = logging.getLogger(__name__)

AND_OPERATOR = " AND "
OR_OPERATOR = " OR "


class Conjunction(Enum):
    """How a criteria joins to whatever precedes it in the chain."""

    AND = AND_OPERATOR
    OR = OR_OPERATOR

    @property
    def operator(self) -> str:
        return self.value


class CriteriaChain:
    """Ordered criteria forming a left-associative AND/OR sequence.

    One chain is shared by every criteria derived from the same root, so
    appending through any of them is visible from all. The chain is not
    synchronized: build it on one thread and freeze it before handing it to
    readers.
    """

    def __init__(self) -> None:
        self._nodes: list[Criteria] = []
        self._frozen = False
        # Chain this group was linked into through `and_(criteria)`, if any.
        self.host: CriteriaChain | None = None

    @property
    def frozen(self) -> bool:
        return self._frozen

    def append(self, node: Criteria) -> None:
        self.ensure_mutable()
        self._nodes.append(node)

    def ensure_mutable(self) -> None:
        if self._frozen:
            raise CriteriaFrozen("Criteria chain is frozen and cannot be modified")

    def freeze(self) -> None:
        if not self._frozen:
            logger.debug("Freezing criteria chain with %d nodes", len(self._nodes))
        self._frozen = True

    def view(self) -> tuple[Criteria, ...]:
        return tuple(self._nodes)

    def __iter__(self) -> Iterator[Criteria]:
        return iter(tuple(self._nodes))

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        names = ", ".join(node.field.name for node in self._nodes)
        return f"CriteriaChain([{names}])"
