"""Mini README: Great-circle geometry shared by every planner stage.

Structure:
    * Point - immutable latitude/longitude pair in decimal degrees.
    * BoundingBox - padded query rectangle around a start and end point.
    * distance - haversine distance in kilometres.
    * path_length - cumulative distance along an ordered path.
    * validate_point - guard rejecting non-finite or out-of-range input.

Everything here is pure: no I/O, no shared state, no logging.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..errors import InputValidationError

EARTH_RADIUS_KM = 6371.0
BUFFER_RADIUS = 0.009


@dataclass(frozen=True, order=True, slots=True)
class Point:
    """Geographic coordinate; ordering is lexicographic on (lat, lon)."""

    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


def validate_point(point: Point, *, label: str = "point") -> Point:
    """Return ``point`` unchanged or raise ``InputValidationError``."""

    latitude, longitude = point.latitude, point.longitude
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InputValidationError(f"{label} has non-finite coordinates: {point}")
    if not -90.0 <= latitude <= 90.0:
        raise InputValidationError(f"{label} latitude {latitude} outside [-90, 90]")
    if not -180.0 <= longitude <= 180.0:
        raise InputValidationError(f"{label} longitude {longitude} outside [-180, 180]")
    return point


def distance(p1: Point, p2: Point) -> float:
    """Haversine great-circle distance between two points in kilometres."""

    lat1 = math.radians(p1.latitude)
    lon1 = math.radians(p1.longitude)
    lat2 = math.radians(p2.latitude)
    lon2 = math.radians(p2.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push ``a`` a hair above 1 for near-antipodal points.
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def path_length(points: Sequence[Point]) -> float:
    """Sum of consecutive haversine distances; zero for fewer than two points."""

    return sum(distance(points[i - 1], points[i]) for i in range(1, len(points)))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned lat/lon rectangle used to scope map-data queries."""

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @classmethod
    def around(cls, start: Point, end: Point, buffer_radius: float = BUFFER_RADIUS) -> "BoundingBox":
        """Enclose ``start`` and ``end`` and pad every side by ``buffer_radius`` degrees."""

        validate_point(start, label="start")
        validate_point(end, label="end")
        if not math.isfinite(buffer_radius) or buffer_radius < 0:
            raise InputValidationError(f"Buffer radius must be a non-negative number, got {buffer_radius}")
        return cls(
            min_lat=min(start.latitude, end.latitude) - buffer_radius,
            min_lon=min(start.longitude, end.longitude) - buffer_radius,
            max_lat=max(start.latitude, end.latitude) + buffer_radius,
            max_lon=max(start.longitude, end.longitude) + buffer_radius,
        )

    def contains(self, point: Point) -> bool:
        return (
            self.min_lat <= point.latitude <= self.max_lat
            and self.min_lon <= point.longitude <= self.max_lon
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return ``(min_lat, min_lon, max_lat, max_lon)``, Overpass' south-west-north-east order."""

        return (self.min_lat, self.min_lon, self.max_lat, self.max_lon)
