"""Mini README: Utility helper functions for the route planner.

Currently exports the GeoJSON converter used to print planned routes in a
map-friendly format.
"""

from .geojson import path_to_geojson

__all__ = ["path_to_geojson"]
