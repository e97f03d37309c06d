"""Core domain types and errors."""

from flightgate.core.constants import AirportMode, DateInput, Violation
from flightgate.core.errors import (
    ConfigError,
    FlightGateError,
    UnknownRulesetError,
    ValidatorNotFoundError,
)
from flightgate.core.types import FlightSearchCandidate, FlightSearchState

__all__ = [
    "FlightSearchCandidate",
    "FlightSearchState",
    "Violation",
    "AirportMode",
    "DateInput",
    "FlightGateError",
    "ConfigError",
    "UnknownRulesetError",
    "ValidatorNotFoundError",
]
