"""Mini README: Fleet value types handed to the planner by CRUD services.

Structure:
    * Station - numbered take-off / landing site.
    * VehicleProfile - lifting capacity and range of a delivery drone.

Both are resolved elsewhere (station and vehicle services own persistence);
the planner only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..geodesy import Point


@dataclass(frozen=True, slots=True)
class Station:
    """Delivery station with a fixed location."""

    number: str
    latitude: float
    longitude: float

    @property
    def location(self) -> Point:
        return Point(self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class VehicleProfile:
    """Capabilities of a drone relevant to dispatch decisions."""

    number: str
    lifting_capacity: float
    flight_distance_km: float
