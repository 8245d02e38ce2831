import logging
import os
from typing import NoReturn, Optional

import typer

from weatherapp.domain.errors import ValidationError, WeatherAppError
from weatherapp.domain.models import CityInfo
from weatherapp.providers.weather.base import WeatherProvider
from weatherapp.providers.weather.visualcrossing import VisualCrossingWeatherProvider
from weatherapp.services import weather_comparison
from weatherapp.services.weather_service import WeatherService

app = typer.Typer(help="CLI to query and compare city weather")

DEFAULT_HOST = os.getenv("WEATHERAPP_HOST", "0.0.0.0")
DEFAULT_PORT = int(os.getenv("WEATHERAPP_PORT", "8080"))

_provider_factory = VisualCrossingWeatherProvider


def _service() -> WeatherService:
    provider: WeatherProvider = _provider_factory()
    return WeatherService(provider)


def _fetch(service: WeatherService, city: str) -> CityInfo:
    if not city.strip():
        raise ValidationError("City names cannot be empty")
    info = service.forecast_by_city(city)
    if info is None:
        raise WeatherAppError(f"No weather data found for {city}")
    return info


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command("forecast")
def cli_forecast(city: str = typer.Argument(..., help="City name")):
    try:
        info = _fetch(_service(), city)
    except (WeatherAppError, RuntimeError) as exc:
        _fail(exc)
    typer.echo(info.resolved_address or info.address or city)
    if info.description:
        typer.echo(info.description)
    current = info.current_conditions
    if current is None:
        typer.echo("No current conditions available")
        return
    typer.echo(f"conditions\t{current.conditions or 'Unknown'}")
    if current.temp is not None:
        typer.echo(f"temp\t{current.temp:.1f}")
    typer.echo(f"sunrise\t{current.sunrise or '-'}")
    typer.echo(f"sunset\t{current.sunset or '-'}")


@app.command("compare-daylight")
def cli_compare_daylight(
    city1: str = typer.Argument(..., help="First city"),
    city2: str = typer.Argument(..., help="Second city"),
):
    try:
        service = _service()
        verdict = weather_comparison.compare_daylight(_fetch(service, city1), _fetch(service, city2), city1, city2)
    except (WeatherAppError, RuntimeError) as exc:
        _fail(exc)
    typer.echo(verdict)


@app.command("check-rain")
def cli_check_rain(
    city1: str = typer.Argument(..., help="First city"),
    city2: str = typer.Argument(..., help="Second city"),
):
    try:
        service = _service()
        verdict = weather_comparison.check_rain(_fetch(service, city1), _fetch(service, city2), city1, city2)
    except (WeatherAppError, RuntimeError) as exc:
        _fail(exc)
    typer.echo(verdict)


@app.command("serve")
def cli_serve(
    host: str = typer.Option(DEFAULT_HOST, help="Bind address"),
    port: int = typer.Option(DEFAULT_PORT, help="Bind port"),
    log_level: str = typer.Option("info", help="Logging level"),
):
    import uvicorn

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    uvicorn.run("weatherapp.api.main:app", host=host, port=port, log_level=log_level.lower())


if __name__ == "__main__":
    app()
