# solrcriteria/query/_validation.py
"""Argument checks shared by the criteria builder methods."""

import math
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from solrcriteria.errors import InvalidArgument
from solrcriteria.geo import Distance
from solrcriteria.query.entries import UNSET

CRITERIA_VALUE_SEPARATOR = " "
WILDCARD = "*"


def is_collection(value: Any) -> bool:
    """Iterables other than strings, bytes and mappings hold several values."""
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Iterable)


def require_values(values: tuple[Any, ...], operation: str) -> list[Any]:
    """Unwrap `f(iterable)` into its items and require at least one value."""
    if len(values) == 1 and is_collection(values[0]):
        items = list(values[0])
    else:
        items = list(values)
    if not items:
        raise InvalidArgument(f"At least one value has to be present for '{operation}'")
    return items


def flatten(values: Iterable[Any]) -> Iterator[Any]:
    for value in values:
        if is_collection(value):
            yield from flatten(value)
        else:
            yield value


def require_text(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgument(f"{what} must be a string, got {type(value).__name__}")
    return value


def assert_no_blank_in_wildcarded(value: Any, leading: bool, trailing: bool) -> str:
    text = require_text(value, "Wildcarded value")
    if CRITERIA_VALUE_SEPARATOR in text:
        pattern = f"{WILDCARD if leading else ''}\"{text}\"{WILDCARD if trailing else ''}"
        raise InvalidArgument(
            f"Cannot construct query '{pattern}'. Use expression or multiple clauses instead."
        )
    return text


def require_number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{what} must be a number, got {type(value).__name__}")
    return float(value)


def check_levenshtein_distance(distance: Any) -> float:
    distance = require_number(distance, "Levenshtein distance")
    if math.isnan(distance):
        return UNSET
    if distance < 0 or distance > 1:
        raise InvalidArgument(
            f"Levenshtein distance has to be within its bounds (0.0 - 1.0), got {distance}"
        )
    return distance


def check_slop(phrase: Any, distance: Any) -> str:
    text = require_text(phrase, "Phrase")
    if isinstance(distance, bool) or not isinstance(distance, int):
        raise InvalidArgument(f"Slop distance must be an integer, got {type(distance).__name__}")
    if distance <= 0:
        raise InvalidArgument(f"Slop distance has to be greater than 0, got {distance}")
    if CRITERIA_VALUE_SEPARATOR not in text:
        raise InvalidArgument(
            f"Phrase must consist of multiple terms, separated with spaces, got {text!r}"
        )
    return text


def check_boost(value: Any) -> float:
    value = require_number(value, "Boost")
    if math.isnan(value):
        raise InvalidArgument("Boost must be a number, got nan")
    if value < 0:
        raise InvalidArgument(f"Boost must not be negative, got {value}")
    return value


def to_distance(distance: "Distance | float | None") -> Distance:
    """Plain numbers are kilometres, None is a zero radius."""
    match distance:
        case None:
            return Distance(0)
        case Distance():
            resolved = distance
        case bool():
            raise InvalidArgument("Distance must be a number or Distance, got bool")
        case int() | float():
            resolved = Distance(float(distance))
        case _:
            raise InvalidArgument(
                f"Distance must be a number or Distance, got {type(distance).__name__}"
            )
    if resolved.value < 0:
        raise InvalidArgument(f"Distance must not be negative, got {resolved.value}")
    return resolved
