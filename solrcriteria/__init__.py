# solrcriteria/__init__.py
"""solrcriteria - A fluent builder for field-scoped search criteria."""

from solrcriteria.errors import (
    CriteriaError,
    CriteriaFrozen,
    InvalidArgument,
    InvalidChainLink,
    InvalidField,
)
from solrcriteria.geo import BoundingBox, Distance, DistanceUnit, GeoLocation
from solrcriteria.query import (
    AND_OPERATOR,
    CRITERIA_VALUE_SEPARATOR,
    OR_OPERATOR,
    UNSET,
    WILDCARD,
    Conjunction,
    Criteria,
    CriteriaChain,
    CriteriaEntry,
    Field,
    OperationKey,
    where,
)

__all__ = [
    # Builder
    "Criteria",
    "CriteriaChain",
    "CriteriaEntry",
    "Conjunction",
    "Field",
    "OperationKey",
    "where",
    # Constants
    "UNSET",
    "WILDCARD",
    "CRITERIA_VALUE_SEPARATOR",
    "AND_OPERATOR",
    "OR_OPERATOR",
    # Geo
    "GeoLocation",
    "Distance",
    "DistanceUnit",
    "BoundingBox",
    # Errors
    "CriteriaError",
    "InvalidField",
    "InvalidArgument",
    "InvalidChainLink",
    "CriteriaFrozen",
]
