"""Mini README: Spatial clustering of waypoint candidates."""

from .dbscan import EPS, MIN_POINTS, ClusteringSummary, WaypointClusterer

__all__ = ["EPS", "MIN_POINTS", "ClusteringSummary", "WaypointClusterer"]
