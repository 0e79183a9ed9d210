"""Mini README: Core package initializer for the drone route planner.

The package turns two station coordinates into a flyable path that follows
real-world road crossings. Subpackages are arranged leaves first:
``geodesy`` (distances and boxes), ``geodata`` (Overpass fetching),
``clustering`` (waypoint reduction), ``route_planning`` (search and
orchestration) and ``fleet`` (vehicle suitability checks).
"""

from .errors import (
    DroneRouteError,
    ExternalDataError,
    InputValidationError,
    VehicleUnsuitableError,
)
from .logging_utils import get_logger

__all__ = [
    "DroneRouteError",
    "ExternalDataError",
    "InputValidationError",
    "VehicleUnsuitableError",
    "get_logger",
]
