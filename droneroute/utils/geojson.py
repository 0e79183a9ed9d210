"""Mini README: GeoJSON helper utilities for planned routes.

This module converts planner output into GeoJSON so routes can be dropped
onto any web map. GeoJSON positions are ``[longitude, latitude]``; keeping
the swap in one place avoids it leaking into callers.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..geodesy import Point


def path_to_geojson(points: Sequence[Point], properties: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return a ``LineString`` Feature for ``points`` (a ``Point`` geometry for one point)."""

    coordinates = [[point.longitude, point.latitude] for point in points]
    if len(coordinates) == 1:
        geometry: Dict[str, Any] = {"type": "Point", "coordinates": coordinates[0]}
    else:
        geometry = {"type": "LineString", "coordinates": coordinates}
    return {"type": "Feature", "geometry": geometry, "properties": dict(properties or {})}
