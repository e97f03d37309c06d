"""Command-line interface for flightgate."""
