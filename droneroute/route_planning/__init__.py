"""Mini README: Route planning subsystem for drone deliveries.

Exports the pathfinder used on pre-computed waypoints and the planner that
runs the whole fetch, cluster and search pipeline between two points.
"""

from .pathfinder import MIN_NEIGHBOUR_DISTANCE, find_shortest_path
from .planner import FlightPath, RoutePlanner

__all__ = ["FlightPath", "MIN_NEIGHBOUR_DISTANCE", "RoutePlanner", "find_shortest_path"]
