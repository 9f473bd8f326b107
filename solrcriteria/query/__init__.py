from .chain import AND_OPERATOR, OR_OPERATOR, Conjunction, CriteriaChain
from ._validation import CRITERIA_VALUE_SEPARATOR, WILDCARD
from .criteria import Criteria, where
from .entries import UNSET, CriteriaEntry, OperationKey
from .fields import Field

__all__ = [
    "Criteria",
    "CriteriaChain",
    "CriteriaEntry",
    "Conjunction",
    "Field",
    "OperationKey",
    "where",
    "UNSET",
    "WILDCARD",
    "CRITERIA_VALUE_SEPARATOR",
    "AND_OPERATOR",
    "OR_OPERATOR",
]
