# solrcriteria/geo.py
"""Geo values used by the `within` and `near` predicates."""

from dataclasses import dataclass
from enum import Enum

from solrcriteria.errors import InvalidArgument

KILOMETERS_PER_MILE = 1.609344


class DistanceUnit(Enum):
    KILOMETERS = "km"
    MILES = "mi"


@dataclass(frozen=True)
class GeoLocation:
    """Point given in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidArgument(f"Latitude must be within -90 and 90, got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidArgument(f"Longitude must be within -180 and 180, got {self.longitude}")


@dataclass(frozen=True)
class Distance:
    """Radius around a location."""

    value: float
    unit: DistanceUnit = DistanceUnit.KILOMETERS

    def in_kilometers(self) -> float:
        if self.unit is DistanceUnit.MILES:
            return self.value * KILOMETERS_PER_MILE
        return float(self.value)


@dataclass(frozen=True)
class BoundingBox:
    """Box spanned by two opposite corners."""

    start: GeoLocation
    end: GeoLocation
