from typer.testing import CliRunner

from shoresquad.cli.main import app
from shoresquad.domain.errors import NetworkFailure
from shoresquad.infra.weather.nea_client import NeaForecastClient


def test_events_command_lists_demo_events():
    runner = CliRunner()
    result = runner.invoke(app, ["events", "--filter", "week"])
    assert result.exit_code == 0
    assert "Santa Monica Cleanup" in result.stdout
    assert "volunteers interested" in result.stdout


def test_events_command_empty_state():
    runner = CliRunner()
    result = runner.invoke(app, ["events", "--filter", "today"])
    assert result.exit_code == 0
    assert "No events found" in result.stdout


def test_events_command_rejects_unknown_filter():
    runner = CliRunner()
    result = runner.invoke(app, ["events", "--filter", "yearly"])
    assert result.exit_code != 0


def test_weather_command_falls_back_offline(monkeypatch):
    async def offline(self):
        raise NetworkFailure("offline")

    monkeypatch.setattr(NeaForecastClient, "fetch_items", offline)
    runner = CliRunner()
    result = runner.invoke(app, ["weather"])
    assert result.exit_code == 0
    assert "Partly Cloudy" in result.stdout
    assert "Tomorrow" in result.stdout


def test_distance_command():
    runner = CliRunner()
    result = runner.invoke(app, ["distance", "1.381497", "103.955574", "1.381497", "103.955574"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "0.00 km"
