"""Mini README: Station-to-station flight route planning.

Structure:
    * FlightPath - container aggregating planned points and metadata.
    * RoutePlanner - fetch -> cluster -> search pipeline for one request.

Each call builds its own bounding box, coordinate sets and search state;
nothing is cached between calls, so one planner instance can serve
concurrent requests. The only shared object is the fetcher's HTTP session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..clustering import WaypointClusterer
from ..configuration import RouterSettings, get_settings
from ..fleet import Station
from ..geodata import OverpassFetcher
from ..geodesy import BUFFER_RADIUS, BoundingBox, Point, path_length, validate_point
from ..logging_utils import get_logger
from ..utils.geojson import path_to_geojson
from .pathfinder import MIN_NEIGHBOUR_DISTANCE, find_shortest_path

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class FlightPath:
    """Ordered collection of points forming a delivery route.

    An empty ``waypoints`` list means the planner found no route.
    """

    waypoints: List[Point] = field(default_factory=list)
    description: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.waypoints

    @property
    def total_distance_km(self) -> float:
        return path_length(self.waypoints)

    def as_commands(self, cruise_speed: float) -> List[dict]:
        """Convert waypoints to command dictionaries for flight controllers."""

        commands: List[dict] = []
        for waypoint in self.waypoints:
            commands.append(
                {
                    "action": "navigate_to",
                    "latitude": waypoint.latitude,
                    "longitude": waypoint.longitude,
                    "cruise_speed": cruise_speed,
                }
            )
        return commands

    def to_geojson(self) -> Dict[str, Any]:
        return path_to_geojson(
            self.waypoints,
            properties={
                "description": self.description,
                "waypoint_count": len(self.waypoints),
                "total_distance_km": self.total_distance_km,
            },
        )


class RoutePlanner:
    """Plan drone routes that hop between real-world road crossings."""

    def __init__(
        self,
        *,
        fetcher: Optional[OverpassFetcher] = None,
        clusterer: Optional[WaypointClusterer] = None,
        buffer_radius: float = BUFFER_RADIUS,
        max_hop_km: float = MIN_NEIGHBOUR_DISTANCE,
    ) -> None:
        self.fetcher = fetcher or OverpassFetcher()
        self.clusterer = clusterer or WaypointClusterer()
        self.buffer_radius = buffer_radius
        self.max_hop_km = max_hop_km
        LOGGER.debug(
            "Initialised RoutePlanner with buffer=%s max_hop_km=%s",
            buffer_radius,
            max_hop_km,
        )

    @classmethod
    def from_settings(cls, settings: Optional[RouterSettings] = None, **overrides: Any) -> "RoutePlanner":
        """Wire a planner from ``RouterSettings``; keyword overrides win."""

        settings = settings or get_settings()
        components: Dict[str, Any] = {
            "buffer_radius": settings.buffer_radius_deg,
            "max_hop_km": settings.max_hop_km,
        }
        components.update(overrides)
        if components.get("fetcher") is None:
            components["fetcher"] = OverpassFetcher.from_settings(settings)
        if components.get("clusterer") is None:
            components["clusterer"] = WaypointClusterer(
                eps=settings.cluster_eps_deg,
                min_points=settings.cluster_min_points,
            )
        return cls(**components)

    def plan(self, start: Point, end: Point) -> List[Point]:
        """Return the ordered route from ``start`` to ``end``, or ``[]`` if none exists.

        Raises ``InputValidationError`` for malformed coordinates and
        ``ExternalDataError`` when map data cannot be fetched.
        """

        validate_point(start, label="start")
        validate_point(end, label="end")
        bbox = BoundingBox.around(start, end, self.buffer_radius)
        LOGGER.info("Planning route %s -> %s", start.as_tuple(), end.as_tuple())

        raw_points = self.fetcher.fetch(bbox)
        waypoints = self.clusterer.cluster(raw_points)
        path = find_shortest_path(start, end, waypoints, max_hop_km=self.max_hop_km)

        if path:
            LOGGER.info(
                "Planned route with %s points covering %.3f km",
                len(path),
                path_length(path),
            )
        else:
            LOGGER.warning(
                "No route from %s to %s with %s candidate waypoints",
                start.as_tuple(),
                end.as_tuple(),
                len(waypoints),
            )
        return path

    def plan_flight(self, start: Point, end: Point, *, description: str = "") -> FlightPath:
        """Wrap ``plan`` output into a ``FlightPath``."""

        return FlightPath(waypoints=self.plan(start, end), description=description or "Crossing route")

    def plan_between(self, departure: Station, arrival: Station) -> FlightPath:
        """Plan a delivery from one station to another."""

        LOGGER.info("Planning delivery from station %s to %s", departure.number, arrival.number)
        return self.plan_flight(
            departure.location,
            arrival.location,
            description=f"Station {departure.number} to {arrival.number}",
        )
