"""Mini README: Heuristic shortest-path search over waypoint candidates.

Structure:
    * find_shortest_path - A* search on an implicit proximity graph.

Two candidates are adjacent when their great-circle distance is strictly
below ``max_hop_km``. Edge cost and heuristic are both haversine distance,
so the heuristic is consistent and the first time ``end`` leaves the
frontier its path is the cheapest one. An empty list means no route exists.
"""

from __future__ import annotations

import heapq
import math
from typing import Dict, Iterable, Iterator, List, Set, Tuple

from ..errors import InputValidationError
from ..geodesy import Point, distance, validate_point
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MIN_NEIGHBOUR_DISTANCE = 0.5


def _neighbours(
    current: Point, candidates: Tuple[Point, ...], max_hop_km: float
) -> Iterator[Tuple[Point, float]]:
    for candidate in candidates:
        if candidate == current:
            continue
        hop = distance(current, candidate)
        if hop < max_hop_km:
            yield candidate, hop


def _reconstruct(came_from: Dict[Point, Point], current: Point) -> List[Point]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def find_shortest_path(
    start: Point,
    end: Point,
    waypoints: Iterable[Point],
    *,
    max_hop_km: float = MIN_NEIGHBOUR_DISTANCE,
) -> List[Point]:
    """Return the cheapest hop-limited path from ``start`` to ``end``.

    ``end`` joins a per-call candidate tuple built from ``waypoints``; the
    caller's collection is never modified. ``start`` is only the origin.
    Frontier entries are ``(g + h, h, point)`` so equal estimates prefer the
    point nearer the goal and then the lower coordinate.
    """

    validate_point(start, label="start")
    validate_point(end, label="end")
    if not math.isfinite(max_hop_km) or max_hop_km <= 0:
        raise InputValidationError(f"max_hop_km must be a positive number, got {max_hop_km}")

    candidates = tuple(sorted(set(waypoints) | {end}))
    for candidate in candidates:
        validate_point(candidate, label="waypoint")

    start_estimate = distance(start, end)
    frontier: List[Tuple[float, float, Point]] = [(start_estimate, start_estimate, start)]
    best_cost: Dict[Point, float] = {start: 0.0}
    came_from: Dict[Point, Point] = {}
    closed: Set[Point] = set()

    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current in closed:
            continue
        if current == end:
            path = _reconstruct(came_from, current)
            LOGGER.debug(
                "Route found with %s points after expanding %s nodes",
                len(path),
                len(closed),
            )
            return path
        closed.add(current)

        current_cost = best_cost[current]
        for neighbour, hop in _neighbours(current, candidates, max_hop_km):
            if neighbour in closed:
                continue
            tentative = current_cost + hop
            if tentative < best_cost.get(neighbour, math.inf):
                came_from[neighbour] = current
                best_cost[neighbour] = tentative
                remaining = distance(neighbour, end)
                heapq.heappush(frontier, (tentative + remaining, remaining, neighbour))

    LOGGER.info(
        "No route between %s and %s across %s candidates",
        start.as_tuple(),
        end.as_tuple(),
        len(candidates),
    )
    return []
