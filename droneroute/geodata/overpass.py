"""Mini README: Overpass (OpenStreetMap) client for candidate waypoints.

Structure:
    * build_crossings_query - Overpass QL selecting crossings and turning circles.
    * parse_elements - strict conversion of an Overpass payload to points.
    * OverpassFetcher - blocking HTTP client with timeout and retry policy.

The fetcher either returns the complete set of coordinates inside the box or
raises ``ExternalDataError``; a partial set is never handed to the caller.
Connection errors, timeouts, HTTP 429 and 5xx responses are retried with a
linearly growing delay. Everything else fails on the first attempt.
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable, Dict, Optional, Set

import requests

from ..configuration import DEFAULT_OVERPASS_URL, RouterSettings
from ..errors import ExternalDataError
from ..geodesy import BoundingBox, Point
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

WAYPOINT_TAGS = ("crossing", "turning_circle")
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def build_crossings_query(bbox: BoundingBox, *, server_timeout: Optional[int] = None) -> str:
    """Return an Overpass QL query for crossing and turning-circle nodes in ``bbox``."""

    area = "{},{},{},{}".format(*bbox.as_tuple())
    settings = "[out:json]"
    if server_timeout is not None:
        settings += f"[timeout:{server_timeout}]"
    selectors = "".join(f'node["highway"="{tag}"]({area});' for tag in WAYPOINT_TAGS)
    return f"{settings};({selectors});out;"


def _coordinate(element: Dict[str, Any], key: str, index: int) -> float:
    value = element.get(key)
    # bool is an int subclass but never a coordinate.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ExternalDataError(f"Element {index} has missing or non-numeric '{key}': {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ExternalDataError(f"Element {index} has non-finite '{key}': {value!r}")
    limit = 90.0 if key == "lat" else 180.0
    if not -limit <= value <= limit:
        raise ExternalDataError(f"Element {index} has '{key}' {value} outside [-{limit:g}, {limit:g}]")
    return value


def parse_elements(payload: Any) -> Set[Point]:
    """Extract ``lat``/``lon`` from every element, ignoring all other fields."""

    if not isinstance(payload, dict):
        raise ExternalDataError("Overpass payload is not a JSON object")

    remark = payload.get("remark")
    if isinstance(remark, str) and "error" in remark.lower():
        raise ExternalDataError(f"Overpass reported a server-side failure: {remark}")

    elements = payload.get("elements")
    if not isinstance(elements, list):
        raise ExternalDataError("Overpass payload has no 'elements' array")

    points: Set[Point] = set()
    for index, element in enumerate(elements):
        if not isinstance(element, dict):
            raise ExternalDataError(f"Element {index} is not an object")
        points.add(
            Point(
                latitude=_coordinate(element, "lat", index),
                longitude=_coordinate(element, "lon", index),
            )
        )
    return points


class OverpassFetcher:
    """Retrieve raw waypoint candidates for a bounding box."""

    def __init__(
        self,
        *,
        url: str = DEFAULT_OVERPASS_URL,
        timeout_seconds: float = 30.0,
        max_retries: int = 3,
        backoff_seconds: float = 2.0,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.max_retries = max_retries
        self.backoff_seconds = backoff_seconds
        self.session = session or requests.Session()
        self._sleep = sleep
        LOGGER.debug(
            "Initialised OverpassFetcher url=%s timeout=%ss retries=%s",
            url,
            timeout_seconds,
            max_retries,
        )

    @classmethod
    def from_settings(cls, settings: RouterSettings, **kwargs: Any) -> "OverpassFetcher":
        return cls(
            url=settings.overpass_url,
            timeout_seconds=settings.request_timeout_seconds,
            max_retries=settings.max_retries,
            backoff_seconds=settings.retry_backoff_seconds,
            **kwargs,
        )

    def fetch(self, bbox: BoundingBox) -> Set[Point]:
        """Return deduplicated crossing / turning-circle coordinates inside ``bbox``."""

        query = build_crossings_query(bbox, server_timeout=math.ceil(self.timeout_seconds))
        LOGGER.info("Fetching waypoints for bounds %s", bbox.as_tuple())
        response = self._get_with_retries(query)
        try:
            payload = response.json()
        except ValueError as error:
            raise ExternalDataError("Overpass response is not valid JSON") from error
        points = parse_elements(payload)
        LOGGER.info("Fetched %s unique waypoint candidates", len(points))
        return points

    def _get_with_retries(self, query: str) -> requests.Response:
        message = "Overpass request was not attempted"
        cause: Optional[BaseException] = None
        for attempt in range(1, self.max_retries + 1):
            try:
                response = self.session.get(
                    self.url,
                    params={"data": query},
                    timeout=self.timeout_seconds,
                )
            except requests.RequestException as error:
                message, cause = f"Overpass request failed: {error}", error
            else:
                if 200 <= response.status_code < 300:
                    return response
                message, cause = f"Overpass responded with HTTP {response.status_code}", None
                if response.status_code not in RETRYABLE_STATUS_CODES:
                    LOGGER.error("%s; not retrying", message)
                    raise ExternalDataError(message)

            if attempt < self.max_retries:
                delay = self.backoff_seconds * attempt
                LOGGER.warning(
                    "Retry %s/%s after error: %s (waiting %.1fs)",
                    attempt,
                    self.max_retries,
                    message,
                    delay,
                )
                self._sleep(delay)

        LOGGER.error("Giving up on Overpass after %s attempts: %s", self.max_retries, message)
        raise ExternalDataError(message) from cause

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "OverpassFetcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
