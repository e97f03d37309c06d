"""Demo command: run the sample request from the booking assignment."""

import typer

from flightgate.cli.commands.check import load_ruleset, render_result
from flightgate.config.presets import DEFAULT_RULESET
from flightgate.search import FlightSearch

app = typer.Typer(help="Run a sample flight search")

SAMPLE_REQUEST = {
    "departure_date": "01/12/2025",
    "departure_airport_code": "mel",
    "emergency_row_seating": False,
    "return_date": "15/12/2025",
    "destination_airport_code": "pvg",
    "seating_class": "economy",
    "adult_passenger_count": 2,
    "child_passenger_count": 2,
    "infant_passenger_count": 0,
}


@app.callback(invoke_without_command=True)
def demo(
    ruleset: str = typer.Option(DEFAULT_RULESET, "--ruleset", help="Built-in ruleset name"),
) -> None:
    """Validate the sample request once and print the result."""
    search = FlightSearch(config=load_ruleset(ruleset, None))
    ok = search.run_flight_search(**SAMPLE_REQUEST)
    render_result(search, ok)
