"""Mini README: Tests for the vehicle suitability check.

Ensures dispatch rejects overweight loads and trips that would eat into the
reserve range, and reports the remaining range otherwise.
"""

import pytest

from droneroute.errors import InputValidationError, VehicleUnsuitableError
from droneroute.fleet import MARGIN_DISTANCE_KM, Station, VehicleProfile, assess_vehicle
from droneroute.geodesy import distance

DEPARTURE = Station(number="ST1", latitude=50.0, longitude=36.0)
ARRIVAL = Station(number="ST2", latitude=50.1, longitude=36.1)


def test_suitable_vehicle_reports_remaining_range():
    vehicle = VehicleProfile(number="VEH1", lifting_capacity=5.0, flight_distance_km=40.0)

    report = assess_vehicle(vehicle, 4.5, DEPARTURE, ARRIVAL)

    trip = distance(DEPARTURE.location, ARRIVAL.location)
    assert report.distance_km == pytest.approx(trip)
    assert report.remaining_range_km == pytest.approx(40.0 - MARGIN_DISTANCE_KM - trip)


def test_overweight_load_is_rejected():
    vehicle = VehicleProfile(number="VEH2", lifting_capacity=2.0, flight_distance_km=100.0)
    with pytest.raises(VehicleUnsuitableError, match="lifting capacity") as excinfo:
        assess_vehicle(vehicle, 2.5, DEPARTURE, ARRIVAL)
    assert excinfo.value.vehicle_number == "VEH2"


def test_trip_must_leave_reserve_range():
    trip = distance(DEPARTURE.location, ARRIVAL.location)
    vehicle = VehicleProfile(number="VEH3", lifting_capacity=10.0, flight_distance_km=trip + 5.0)
    with pytest.raises(VehicleUnsuitableError, match="can't reach"):
        assess_vehicle(vehicle, 1.0, DEPARTURE, ARRIVAL)


def test_negative_weight_is_invalid_input():
    vehicle = VehicleProfile(number="VEH4", lifting_capacity=10.0, flight_distance_km=100.0)
    with pytest.raises(InputValidationError):
        assess_vehicle(vehicle, -1.0, DEPARTURE, ARRIVAL)
