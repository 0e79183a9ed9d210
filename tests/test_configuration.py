"""Mini README: Tests for settings loading and logging setup.

Confirms defaults reproduce the planner constants, environment variables
override them and invalid values are rejected by validation.
"""

import logging

import pytest
from pydantic import ValidationError

from droneroute.clustering import EPS, MIN_POINTS
from droneroute.configuration import RouterSettings, get_settings
from droneroute.geodesy import BUFFER_RADIUS
from droneroute.logging_utils import configure_root_logger
from droneroute.route_planning import MIN_NEIGHBOUR_DISTANCE, RoutePlanner


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_match_planner_constants():
    settings = RouterSettings()
    assert settings.buffer_radius_deg == BUFFER_RADIUS
    assert settings.cluster_eps_deg == EPS
    assert settings.cluster_min_points == MIN_POINTS
    assert settings.max_hop_km == MIN_NEIGHBOUR_DISTANCE


def test_every_setting_is_consumed_by_the_pipeline():
    assert set(RouterSettings.model_fields) == {
        "log_level",
        "overpass_url",
        "request_timeout_seconds",
        "max_retries",
        "retry_backoff_seconds",
        "buffer_radius_deg",
        "cluster_eps_deg",
        "cluster_min_points",
        "max_hop_km",
        "default_cruise_speed",
    }


def test_environment_overrides_are_applied(monkeypatch):
    monkeypatch.setenv("DRONEROUTE_MAX_HOP_KM", "0.75")
    monkeypatch.setenv("DRONEROUTE_MAX_RETRIES", "5")
    monkeypatch.setenv("DRONEROUTE_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.max_hop_km == pytest.approx(0.75)
    assert settings.max_retries == 5
    assert settings.log_level == "DEBUG"
    assert get_settings() is settings


def test_invalid_values_are_rejected(monkeypatch):
    monkeypatch.setenv("DRONEROUTE_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        RouterSettings()
    monkeypatch.delenv("DRONEROUTE_LOG_LEVEL")
    monkeypatch.setenv("DRONEROUTE_REQUEST_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        RouterSettings()


def test_planner_is_wired_from_settings():
    settings = RouterSettings(max_hop_km=0.8, cluster_eps_deg=0.0003, request_timeout_seconds=7.0)

    planner = RoutePlanner.from_settings(settings)

    assert planner.max_hop_km == pytest.approx(0.8)
    assert planner.clusterer.eps == pytest.approx(0.0003)
    assert planner.fetcher.timeout_seconds == pytest.approx(7.0)
    planner.fetcher.close()


def test_configure_root_logger_accepts_level_names():
    configure_root_logger("warning")
    assert logging.getLogger().level == logging.WARNING
    configure_root_logger(logging.INFO)
    assert logging.getLogger().level == logging.INFO
