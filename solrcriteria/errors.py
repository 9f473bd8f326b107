# solrcriteria/errors.py
"""Exceptions raised while building criteria."""


class CriteriaError(ValueError):
    """Base class for all criteria building errors."""


class InvalidField(CriteriaError):
    """Field reference is missing or has an empty name."""


class InvalidArgument(CriteriaError):
    """A predicate method received a value it cannot represent."""


class InvalidChainLink(CriteriaError):
    """A criteria cannot be linked into the chain."""


class CriteriaFrozen(CriteriaError):
    """The chain was frozen and no longer accepts changes."""
