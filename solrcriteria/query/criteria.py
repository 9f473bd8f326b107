# solrcriteria/query/criteria.py
"""Fluent criteria builder.

A `Criteria` groups the predicates for one field. Criteria created through
`and_`/`or_` share one `CriteriaChain`, which renderers walk left to right,
joining each node to the previous one with the node's own conjunction:

    where("title").is_("solr").and_("year").greater_than(2010).or_("tag").starts_with("sea")

Several EQUALS entries on one node form a value list for that field
(`field:(v1 v2 v3)`), not separate AND-ed clauses.
"""

import logging
import math
from typing import Any, Self

from solrcriteria.errors import InvalidArgument, InvalidChainLink
from solrcriteria.geo import BoundingBox, Distance, GeoLocation
from solrcriteria.query import _validation as check
from solrcriteria.query.chain import Conjunction, CriteriaChain
from solrcriteria.query.entries import UNSET, CriteriaEntry, OperationKey
from solrcriteria.query.fields import Field, as_field

logger = logging.getLogger(__name__)


class Criteria:
    """Field-scoped group of predicate entries inside an AND/OR chain.

    Builder methods mutate the node and return it, so calls can be chained.
    `and_` with a field and `or_` return the newly appended node instead.
    A node without entries matches everything for its field.
    """

    def __init__(
        self,
        field: Field | str,
        *,
        chain: CriteriaChain | None = None,
        conjunction: Conjunction = Conjunction.AND,
    ) -> None:
        self._field = as_field(field)
        self._entries: list[CriteriaEntry] = []
        self._boost = UNSET
        self._negating = False
        self._conjunction = conjunction
        self._chain = chain if chain is not None else CriteriaChain()
        self._chain.append(self)
        logger.debug(
            "Created criteria for field %s (%s, chain length %d)",
            self._field.name,
            conjunction.name,
            len(self._chain),
        )

    @classmethod
    def where(cls, field: Field | str) -> "Criteria":
        """Start a new chain with a criteria for `field`."""
        return cls(field)

    # Chaining

    def and_(self, target: "Criteria | Field | str", *more: "Criteria") -> "Criteria":
        """Chain using AND.

        With a field (or field name) a new node is appended and returned. With
        one or more existing criteria, those are linked into this chain as
        groups and this node is returned.
        """
        if more or isinstance(target, Criteria):
            return self._link(target, *more)
        return Criteria(target, chain=self._chain)

    def or_(self, target: "Criteria | Field | str") -> "Criteria":
        """Chain using OR.

        Given an existing criteria, a new OR node for its field is appended and
        receives a copy of its entries; later changes to either side stay
        separate.
        """
        if target is None:
            raise InvalidChainLink("Cannot chain None criteria")
        if isinstance(target, Criteria):
            node = Criteria(target.field, chain=self._chain, conjunction=Conjunction.OR)
            node._entries.extend(target._entries)
            logger.debug("Copied %d entries into OR criteria for %s", len(node._entries), node.field)
            return node
        return Criteria(target, chain=self._chain, conjunction=Conjunction.OR)

    def _link(self, *nodes: "Criteria | None") -> Self:
        self._chain.ensure_mutable()
        seen: list[Criteria] = []
        groups: list[CriteriaChain] = []
        for node in nodes:
            if node is None:
                raise InvalidChainLink("Cannot chain None criteria")
            if not isinstance(node, Criteria):
                raise InvalidChainLink(f"Expected Criteria, got {type(node).__name__}")
            if node._reaches(self._chain):
                raise InvalidChainLink(f"Criteria for {node.field} is already part of this chain")
            group = node._chain
            if group.host is not None or any(g is group for g in groups):
                raise InvalidChainLink(f"Criteria for {node.field} is already linked into a chain")
            seen.append(node)
            groups.append(group)
        for node in seen:
            node._chain.host = self._chain
            self._chain.append(node)
            logger.debug("Linked criteria group for %s into chain", node.field)
        return self

    def _reaches(self, chain: CriteriaChain) -> bool:
        if self._chain is chain:
            return True
        return any(node._reaches(chain) for node in self._chain if node._chain is not self._chain)

    def freeze(self) -> Self:
        """Publish the chain read-only, including linked groups."""
        chain = self._chain
        if chain.frozen:
            return self
        chain.freeze()
        for node in chain:
            if node._chain is not chain:
                node.freeze()
        return self

    # Predicates

    def is_(self, value: Any, *more: Any) -> Self:
        """Match `value` exactly; several values (or an iterable) delegate to `in_`.

        None matches documents without a value for the field.
        """
        if more or check.is_collection(value):
            return self.in_(value, *more)
        if value is None:
            return self.is_null()
        return self._add(OperationKey.EQUALS, value)

    def in_(self, *values: Any) -> Self:
        """Match any of `values`. Nested iterables are flattened."""
        items = check.require_values(values, "in")
        for value in check.flatten(items):
            self.is_(value)
        return self

    def is_null(self) -> Self:
        return self.between(None, None).not_()

    def is_not_null(self) -> Self:
        return self.between(None, None)

    def contains(self, *values: str) -> Self:
        """Leading and trailing wildcard. Values must not contain blanks."""
        return self._add_wildcarded(OperationKey.CONTAINS, values, leading=True, trailing=True)

    def starts_with(self, *values: str) -> Self:
        """Trailing wildcard. Values must not contain blanks."""
        return self._add_wildcarded(OperationKey.STARTS_WITH, values, leading=False, trailing=True)

    def ends_with(self, *values: str) -> Self:
        """Leading wildcard. Values must not contain blanks."""
        return self._add_wildcarded(OperationKey.ENDS_WITH, values, leading=True, trailing=False)

    def _add_wildcarded(
        self, kind: OperationKey, values: tuple[Any, ...], *, leading: bool, trailing: bool
    ) -> Self:
        items = check.require_values(values, kind.key)
        texts = [check.assert_no_blank_in_wildcarded(v, leading, trailing) for v in items]
        for text in texts:
            self._add(kind, text)
        return self

    def not_(self) -> Self:
        self._chain.ensure_mutable()
        self._negating = True
        return self

    def fuzzy(self, value: str, levenshtein_distance: float = UNSET) -> Self:
        """Fuzzy match (`value~distance`); distance within [0, 1] or unset."""
        text = check.require_text(value, "Fuzzy value")
        distance = check.check_levenshtein_distance(levenshtein_distance)
        return self._add(OperationKey.FUZZY, (text, distance))

    def sloppy(self, phrase: str, distance: int) -> Self:
        """Phrase match allowing `distance` positions between its terms."""
        text = check.check_slop(phrase, distance)
        return self._add(OperationKey.SLOPPY, (text, distance))

    def expression(self, value: str) -> Self:
        """Raw engine-native expression, passed through untouched."""
        return self._add(OperationKey.EXPRESSION, check.require_text(value, "Expression"))

    def boost(self, value: float) -> Self:
        boost = check.check_boost(value)
        self._chain.ensure_mutable()
        self._boost = boost
        return self

    def between(
        self,
        lower: Any = None,
        upper: Any = None,
        include_lower: bool = True,
        include_upper: bool = True,
    ) -> Self:
        """Range match. A None bound is open-ended."""
        return self._add(OperationKey.BETWEEN, (lower, upper, include_lower, include_upper))

    def less_than(self, upper: Any) -> Self:
        return self.between(None, upper, True, False)

    def less_than_equal(self, upper: Any) -> Self:
        return self.between(None, upper, True, True)

    def greater_than(self, lower: Any) -> Self:
        return self.between(lower, None, False, True)

    def greater_than_equal(self, lower: Any) -> Self:
        return self.between(lower, None, True, True)

    def within(self, location: GeoLocation, distance: Distance | float | None = None) -> Self:
        """Exact geo radius match. Plain numbers are kilometres."""
        location = self._require_location(location)
        return self._add(OperationKey.WITHIN, (location, check.to_distance(distance)))

    def near(
        self, location: GeoLocation | BoundingBox, distance: Distance | float | None = None
    ) -> Self:
        """Approximate geo match, by bounding box or by center and radius."""
        if isinstance(location, BoundingBox):
            if distance is not None:
                raise InvalidArgument("Distance cannot be combined with a bounding box")
            return self._add(OperationKey.NEAR, (location,))
        location = self._require_location(location)
        return self._add(OperationKey.NEAR, (location, check.to_distance(distance)))

    @staticmethod
    def _require_location(location: Any) -> GeoLocation:
        if not isinstance(location, GeoLocation):
            raise InvalidArgument(f"Location must be a GeoLocation, got {type(location).__name__}")
        return location

    def _add(self, kind: OperationKey, value: Any) -> Self:
        self._chain.ensure_mutable()
        entry = CriteriaEntry(kind, value)
        if entry not in self._entries:
            self._entries.append(entry)
        return self

    # Read access for renderers

    @property
    def field(self) -> Field:
        return self._field

    @property
    def entries(self) -> tuple[CriteriaEntry, ...]:
        return tuple(self._entries)

    @property
    def conjunction(self) -> Conjunction:
        return self._conjunction

    @property
    def conjunction_operator(self) -> str:
        return self._conjunction.operator

    @property
    def chain(self) -> tuple["Criteria", ...]:
        return self._chain.view()

    @property
    def negating(self) -> bool:
        return self._negating

    @property
    def boost_value(self) -> float:
        """Boost factor, `nan` when unset."""
        return self._boost

    @property
    def has_boost(self) -> bool:
        return not math.isnan(self._boost)

    @property
    def frozen(self) -> bool:
        return self._chain.frozen

    # Operators

    def __and__(self, other: "Criteria") -> "Criteria":
        return self.and_(other)

    def __or__(self, other: "Criteria") -> "Criteria":
        return self.or_(other)

    def __invert__(self) -> Self:
        return self.not_()

    def __repr__(self) -> str:
        parts = [f"field={self._field.name!r}", f"entries={self._entries!r}"]
        if self._conjunction is Conjunction.OR:
            parts.append("conjunction=OR")
        if self._negating:
            parts.append("negating=True")
        if self.has_boost:
            parts.append(f"boost={self._boost}")
        return f"Criteria({', '.join(parts)})"


def where(field: Field | str) -> Criteria:
    """Start a new chain with a criteria for `field`."""
    return Criteria(field)
