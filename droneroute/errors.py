"""Mini README: Exception hierarchy shared by the route planner.

Structure:
    * DroneRouteError - base class for every error raised by the package.
    * ExternalDataError - map data could not be fetched or understood.
    * InputValidationError - coordinates or arguments are malformed.
    * VehicleUnsuitableError - a vehicle cannot serve a delivery.

"No route" is deliberately absent: the planner reports it as an empty path.
"""

from __future__ import annotations


class DroneRouteError(Exception):
    """Base class for route planner failures."""


class ExternalDataError(DroneRouteError):
    """Raised when the map-data service fails or returns malformed data."""


class InputValidationError(DroneRouteError, ValueError):
    """Raised for non-finite or out-of-range coordinates and bad arguments."""


class VehicleUnsuitableError(DroneRouteError):
    """Raised when a vehicle cannot carry the load or cover the distance."""

    def __init__(self, vehicle_number: str, reason: str) -> None:
        super().__init__(f"Vehicle {vehicle_number} is unsuitable: {reason}")
        self.vehicle_number = vehicle_number
        self.reason = reason
