"""Main CLI entry point for flightgate"""

import typer

from flightgate.__version__ import __version__
from flightgate.cli.commands import check as check_module
from flightgate.cli.commands import demo as demo_module
from flightgate.observability.logging import setup_logging

app = typer.Typer(
    name="flightgate",
    help="flightgate - validation gate for flight-search requests",
    add_completion=False,
)

# Register subcommands
app.add_typer(check_module.app, name="check", help="Validate a flight-search request")
app.add_typer(demo_module.app, name="demo", help="Run a sample flight search")


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"flightgate version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    log_file: str | None = typer.Option(None, "--log-file", help="Also write JSON logs here"),
) -> None:
    """flightgate - validation gate for flight-search requests"""
    setup_logging(level=log_level.upper(), log_file=log_file)


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
