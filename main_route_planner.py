"""Mini README: Entry point CLI for the drone route planner.

This script exposes a Typer CLI that lets operators plan a crossing-based
route between two coordinates and check whether a drone can take a delivery.
Settings come from ``DRONEROUTE_*`` environment variables; command-line
options override them for a single invocation.
"""

from __future__ import annotations

import json
from typing import Optional

import typer

from droneroute.configuration import get_settings
from droneroute.errors import DroneRouteError
from droneroute.fleet import Station, VehicleProfile, assess_vehicle
from droneroute.geodesy import Point
from droneroute.logging_utils import configure_root_logger
from droneroute.route_planning import FlightPath, RoutePlanner

cli = typer.Typer(help="Plan drone delivery routes along real-world road crossings.")

NO_ROUTE_EXIT_CODE = 2


@cli.command()
def plan(
    start_lat: float = typer.Option(..., help="Departure latitude in decimal degrees."),
    start_lon: float = typer.Option(..., help="Departure longitude in decimal degrees."),
    end_lat: float = typer.Option(..., help="Arrival latitude in decimal degrees."),
    end_lon: float = typer.Option(..., help="Arrival longitude in decimal degrees."),
    output: str = typer.Option("commands", help="Output format: 'commands' or 'geojson'."),
    cruise_speed: Optional[float] = typer.Option(None, help="Cruise speed for navigation commands."),
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level."),
) -> None:
    """Fetch crossings, cluster them and print the shortest route as JSON."""

    settings = get_settings()
    try:
        configure_root_logger(log_level or settings.log_level)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="--log-level") from error
    if cruise_speed is None:
        cruise_speed = settings.default_cruise_speed
    elif cruise_speed <= 0:
        raise typer.BadParameter("cruise speed must be positive", param_hint="--cruise-speed")
    if output not in {"commands", "geojson"}:
        raise typer.BadParameter("output must be 'commands' or 'geojson'", param_hint="--output")

    planner = RoutePlanner.from_settings(settings)
    try:
        flight_path = planner.plan_flight(Point(start_lat, start_lon), Point(end_lat, end_lon))
    except DroneRouteError as error:
        typer.echo(f"Route planning failed: {error}", err=True)
        raise typer.Exit(code=1) from error
    finally:
        planner.fetcher.close()

    if flight_path.is_empty:
        typer.echo("No route found between the requested points.", err=True)
        raise typer.Exit(code=NO_ROUTE_EXIT_CODE)

    typer.echo(json.dumps(_render(flight_path, output, cruise_speed), indent=2))


def _render(flight_path: FlightPath, output: str, cruise_speed: float) -> object:
    if output == "geojson":
        return flight_path.to_geojson()
    return {
        "total_distance_km": flight_path.total_distance_km,
        "commands": flight_path.as_commands(cruise_speed=cruise_speed),
    }


@cli.command("check-vehicle")
def check_vehicle(
    vehicle: str = typer.Option(..., help="Vehicle number, e.g. VEH12."),
    lifting_capacity: float = typer.Option(..., help="Maximum payload the vehicle can lift."),
    flight_distance: float = typer.Option(..., help="Vehicle range in kilometres."),
    weight: float = typer.Option(..., help="Payload weight of the delivery."),
    from_lat: float = typer.Option(..., help="Departure station latitude."),
    from_lon: float = typer.Option(..., help="Departure station longitude."),
    to_lat: float = typer.Option(..., help="Arrival station latitude."),
    to_lon: float = typer.Option(..., help="Arrival station longitude."),
) -> None:
    """Report whether a vehicle can carry ``weight`` between two stations."""

    configure_root_logger(get_settings().log_level)
    profile = VehicleProfile(
        number=vehicle,
        lifting_capacity=lifting_capacity,
        flight_distance_km=flight_distance,
    )
    try:
        report = assess_vehicle(
            profile,
            weight,
            Station(number="departure", latitude=from_lat, longitude=from_lon),
            Station(number="arrival", latitude=to_lat, longitude=to_lon),
        )
    except DroneRouteError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error

    typer.echo(
        f"Vehicle {report.vehicle_number} is suitable: {report.distance_km:.3f} km trip, "
        f"{report.remaining_range_km:.3f} km spare range."
    )


if __name__ == "__main__":
    cli()
