"""Mini README: Dispatch checks deciding whether a drone can take a delivery.

Structure:
    * SuitabilityReport - outcome of a successful check.
    * assess_vehicle - validates payload weight and straight-line range.

A vehicle must keep ``MARGIN_DISTANCE_KM`` of range in reserve beyond the
great-circle distance between departure and arrival stations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import InputValidationError, VehicleUnsuitableError
from ..geodesy import distance, validate_point
from ..logging_utils import get_logger
from .models import Station, VehicleProfile

LOGGER = get_logger(__name__)

MARGIN_DISTANCE_KM = 10.0


@dataclass(slots=True)
class SuitabilityReport:
    vehicle_number: str
    weight: float
    distance_km: float
    remaining_range_km: float


def assess_vehicle(
    vehicle: VehicleProfile,
    weight: float,
    departure: Station,
    arrival: Station,
    *,
    margin_km: float = MARGIN_DISTANCE_KM,
) -> SuitabilityReport:
    """Raise ``VehicleUnsuitableError`` unless ``vehicle`` can fly this delivery."""

    if not math.isfinite(weight) or weight < 0:
        raise InputValidationError(f"Weight must be a non-negative number, got {weight}")
    origin = validate_point(departure.location, label=f"station {departure.number}")
    destination = validate_point(arrival.location, label=f"station {arrival.number}")

    if weight > vehicle.lifting_capacity:
        raise VehicleUnsuitableError(
            vehicle.number,
            f"load {weight} exceeds lifting capacity {vehicle.lifting_capacity}",
        )

    trip_km = distance(origin, destination)
    usable_range = vehicle.flight_distance_km - margin_km
    if trip_km > usable_range:
        raise VehicleUnsuitableError(
            vehicle.number,
            f"flight distance {vehicle.flight_distance_km} km can't reach {trip_km:.3f} km "
            f"with a {margin_km} km reserve",
        )

    LOGGER.info(
        "Vehicle %s suitable for %s -> %s (%.2f km, load %s)",
        vehicle.number,
        departure.number,
        arrival.number,
        trip_km,
        weight,
    )
    return SuitabilityReport(
        vehicle_number=vehicle.number,
        weight=weight,
        distance_km=trip_km,
        remaining_range_km=usable_range - trip_km,
    )
