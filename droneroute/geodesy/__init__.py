"""Mini README: Geodesy helpers (points, boxes, haversine distance)."""

from .distance import (
    BUFFER_RADIUS,
    EARTH_RADIUS_KM,
    BoundingBox,
    Point,
    distance,
    path_length,
    validate_point,
)

__all__ = [
    "BUFFER_RADIUS",
    "EARTH_RADIUS_KM",
    "BoundingBox",
    "Point",
    "distance",
    "path_length",
    "validate_point",
]
