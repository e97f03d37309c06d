"""Observability module for flightgate."""

from flightgate.observability.logging import ContextLogger, setup_logging

__all__ = ["ContextLogger", "setup_logging"]
