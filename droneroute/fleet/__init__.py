"""Mini README: Fleet subsystem package initialiser.

Re-exports the station and vehicle value types together with the dispatch
suitability check so callers need a single import.
"""

from .models import Station, VehicleProfile
from .suitability import MARGIN_DISTANCE_KM, SuitabilityReport, assess_vehicle

__all__ = [
    "MARGIN_DISTANCE_KM",
    "Station",
    "SuitabilityReport",
    "VehicleProfile",
    "assess_vehicle",
]
