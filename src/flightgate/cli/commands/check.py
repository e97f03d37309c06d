"""Check command: validate one flight-search request from options."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from flightgate.config.loader import RulesetLoader
from flightgate.config.models import RulesetConfig
from flightgate.config.presets import DEFAULT_RULESET
from flightgate.core.errors import ConfigError
from flightgate.search import FlightSearch
from flightgate.validation.parsing import format_date

app = typer.Typer(help="Validate a flight-search request")
console = Console()


def load_ruleset(ruleset: str, config: Path | None) -> RulesetConfig:
    """Pick the ruleset from --config if given, else the named preset."""
    try:
        if config is not None:
            return RulesetLoader.load(config)
        return RulesetLoader.resolve(ruleset)
    except (ConfigError, FileNotFoundError) as e:
        typer.echo(f"Invalid ruleset: {e}", err=True)
        raise typer.Exit(2)


def render_result(search: FlightSearch, ok: bool) -> None:
    console.print(f"Valid? {ok}")
    if not ok and search.last_violation is not None:
        console.print(f"[red]Rejected:[/red] {search.last_violation.value}")

    table = Table(title=f"Flight search ({search.config.name})")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in search.state.as_dict().items():
        if name in ("departure_date", "return_date"):
            value = format_date(value)
        table.add_row(name, "" if value is None else str(value))
    console.print(table)


@app.callback(invoke_without_command=True)
def check(
    departure: str = typer.Option(..., "--departure", "-d", help="Departure date DD/MM/YYYY"),
    origin: str = typer.Option(..., "--origin", "-f", help="Departure airport code"),
    returning: str | None = typer.Option(None, "--return", "-r", help="Return date DD/MM/YYYY"),
    destination_airport: str = typer.Option(..., "--to", "-t", help="Destination airport code"),
    seating_class: str = typer.Option("economy", "--class", "-c"),
    emergency_row: bool = typer.Option(False, "--emergency-row"),
    adults: int = typer.Option(1, "--adults"),
    children: int = typer.Option(0, "--children"),
    infants: int = typer.Option(0, "--infants"),
    passenger_name: str | None = typer.Option(None, "--name"),
    destination: str | None = typer.Option(None, "--destination"),
    budget: float | None = typer.Option(None, "--budget"),
    ruleset: str = typer.Option(DEFAULT_RULESET, "--ruleset", help="Built-in ruleset name"),
    config: Path | None = typer.Option(
        None, "--config", help="Ruleset YAML file (overrides --ruleset)", exists=True
    ),
) -> None:
    """Validate one request; exit code 1 when it is rejected."""
    search = FlightSearch(config=load_ruleset(ruleset, config))
    ok = search.run_flight_search(
        departure_date=departure,
        departure_airport_code=origin,
        emergency_row_seating=emergency_row,
        return_date=returning,
        destination_airport_code=destination_airport,
        seating_class=seating_class,
        adult_passenger_count=adults,
        child_passenger_count=children,
        infant_passenger_count=infants,
        passenger_name=passenger_name,
        destination=destination,
        budget=budget,
    )
    render_result(search, ok)
    if not ok:
        raise typer.Exit(1)
