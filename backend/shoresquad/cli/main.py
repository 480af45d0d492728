import asyncio
import logging

import typer

from shoresquad.config import Settings
from shoresquad.domain.errors import ValidationFailure
from shoresquad.domain.geo import haversine_km
from shoresquad.services.app_controller import AppController

app = typer.Typer(help="CLI for ShoreSquad beach cleanups")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output")):
    settings = Settings.from_env()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format="%(message)s")


@app.command("events")
def cli_events(
    filter: str = typer.Option("all", "--filter", "-f", help="all | today | week | month"),
):
    controller = AppController(settings=Settings.from_env())
    controller.load_events()
    try:
        listing = controller.select_filter(filter)
    except ValidationFailure as exc:
        raise typer.BadParameter(exc.errors["filter"], param_hint="--filter") from exc
    if listing.empty_message:
        typer.echo(listing.empty_message)
        raise typer.Exit(code=0)
    typer.echo("badge\tdate\ttime\tname\tlocation\tvolunteers")
    for record in listing.records:
        typer.echo(
            f"{record.urgency_badge}\t{record.date}\t{record.time}\t{record.name}\t"
            f"{record.location}\t{record.participants_label}"
        )


@app.command("weather")
def cli_weather():
    controller = AppController(settings=Settings.from_env())
    days = asyncio.run(controller.refresh_weather())
    if controller.state.forecast_is_fallback:
        typer.echo("Using demo weather data", err=True)
    typer.echo("day\tdate\tforecast\ttemp\thumidity")
    for day in days:
        typer.echo(
            f"{day.icon} {day.label}\t{day.date.isoformat()}\t{day.condition}\t"
            f"{day.temp_low:g}-{day.temp_high:g}°C\t{day.humidity_low:g}-{day.humidity_high:g}%"
        )


@app.command("distance")
def cli_distance(
    lat1: float = typer.Argument(..., help="Origin latitude"),
    lon1: float = typer.Argument(..., help="Origin longitude"),
    lat2: float = typer.Argument(..., help="Destination latitude"),
    lon2: float = typer.Argument(..., help="Destination longitude"),
):
    typer.echo(f"{haversine_km(lat1, lon1, lat2, lon2):.2f} km")


@app.command("serve")
def cli_serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Port"),
):
    import uvicorn

    from shoresquad.api.main import create_app

    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    app()
