"""Mini README: Density-based reduction of raw waypoint candidates.

Structure:
    * ClusteringSummary - counts reported after a clustering pass.
    * WaypointClusterer - DBSCAN wrapper collapsing dense groups to centroids.

OpenStreetMap often tags every leg of a junction as its own crossing, so a
single intersection arrives as a tight knot of nodes. The clusterer replaces
each knot with its mean coordinate and passes isolated nodes through.

Neighbourhoods are measured with plain Euclidean distance on degrees, so the
effective east-west radius shrinks with cos(latitude). The hop limit used by
the pathfinder is in kilometres; the two radii are not on a common basis.

Determinism: input is sorted by (latitude, longitude) before clustering, and
scikit-learn expands clusters from seeds in index order. A border point
reachable from two clusters therefore joins the one whose lowest core point
sorts first, regardless of how the caller ordered the input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Set, Tuple

import numpy as np
from sklearn.cluster import DBSCAN

from ..errors import InputValidationError
from ..geodesy import Point, validate_point
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

EPS = 0.00018
MIN_POINTS = 2
NOISE_LABEL = -1


@dataclass(slots=True)
class ClusteringSummary:
    """Bookkeeping for a single clustering pass."""

    input_count: int
    cluster_count: int
    noise_count: int

    @property
    def output_count(self) -> int:
        return self.cluster_count + self.noise_count


class WaypointClusterer:
    """Collapse dense waypoint neighbourhoods into single representatives."""

    def __init__(self, *, eps: float = EPS, min_points: int = MIN_POINTS) -> None:
        if eps <= 0:
            raise InputValidationError(f"eps must be positive, got {eps}")
        if min_points < 1:
            raise InputValidationError(f"min_points must be at least 1, got {min_points}")
        self.eps = eps
        self.min_points = min_points
        LOGGER.debug("Initialised WaypointClusterer eps=%s min_points=%s", eps, min_points)

    def cluster(self, points: Iterable[Point]) -> Set[Point]:
        """Return cluster centroids plus every point that joined no cluster."""

        reduced, _ = self.cluster_with_summary(points)
        return reduced

    def cluster_with_summary(self, points: Iterable[Point]) -> Tuple[Set[Point], ClusteringSummary]:
        unique = set(points)
        for point in unique:
            validate_point(point, label="waypoint")
        ordered = sorted(unique)
        if not ordered:
            return set(), ClusteringSummary(input_count=0, cluster_count=0, noise_count=0)

        coordinates = np.array([point.as_tuple() for point in ordered], dtype=np.float64)
        # scikit-learn counts the sample itself towards min_samples.
        labels = DBSCAN(
            eps=self.eps,
            min_samples=self.min_points + 1,
            metric="euclidean",
        ).fit_predict(coordinates)

        reduced: Set[Point] = set()
        cluster_labels = sorted(int(label) for label in set(labels.tolist()) if label != NOISE_LABEL)
        for label in cluster_labels:
            members = coordinates[labels == label]
            mean_lat, mean_lon = members.mean(axis=0)
            reduced.add(Point(float(mean_lat), float(mean_lon)))

        noise_mask = labels == NOISE_LABEL
        for index in np.flatnonzero(noise_mask):
            reduced.add(ordered[int(index)])

        summary = ClusteringSummary(
            input_count=len(ordered),
            cluster_count=len(cluster_labels),
            noise_count=int(noise_mask.sum()),
        )
        LOGGER.info(
            "Clustered %s waypoints into %s clusters and %s isolated points",
            summary.input_count,
            summary.cluster_count,
            summary.noise_count,
        )
        return reduced, summary
