"""Mini README: Centralised configuration for the drone route planner.

Structure:
    * RouterSettings - Pydantic settings model for network and algorithm knobs.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``DRONEROUTE_*`` environment variables or
    a local ``.env`` file. Defaults reproduce the constants the planner has
    always used (1 km buffer, 20 m clustering radius, 0.5 km hop limit), so an
    unconfigured process behaves exactly like the reference deployment.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OVERPASS_URL = "https://overpass-api.de/api/interpreter"


class RouterSettings(BaseSettings):
    """Runtime configuration for the route planning pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DRONEROUTE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field("INFO", description="Root logging level name.")
    overpass_url: str = Field(
        DEFAULT_OVERPASS_URL,
        description="Overpass interpreter endpoint queried for crossings.",
    )
    request_timeout_seconds: float = Field(
        30.0,
        gt=0,
        description="Upper bound for a single map-data request.",
    )
    max_retries: int = Field(
        3,
        ge=1,
        le=10,
        description="Total attempts made for transient map-data failures.",
    )
    retry_backoff_seconds: float = Field(
        2.0,
        ge=0,
        description="Base delay; attempt N waits N times this value.",
    )
    buffer_radius_deg: float = Field(
        0.009,
        gt=0,
        description="Bounding-box margin around start and end (~1 km).",
    )
    cluster_eps_deg: float = Field(
        0.00018,
        gt=0,
        description="DBSCAN neighbourhood radius in degrees (~20 m).",
    )
    cluster_min_points: int = Field(
        2,
        ge=1,
        description="Neighbours (excluding the point) needed for a core point.",
    )
    max_hop_km: float = Field(
        0.5,
        gt=0,
        description="Two waypoints are connected when closer than this distance.",
    )
    default_cruise_speed: float = Field(
        6.5,
        gt=0,
        description="Cruise speed (m/s) written into navigation commands.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        """Reject level names the logging module does not understand."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> RouterSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return RouterSettings()
