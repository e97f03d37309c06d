"""Core error hierarchy.

Invalid flight-search input is never an exception: the validator reports it as
a ``False`` result. These errors are reserved for misconfiguration and misuse.
"""


class FlightGateError(Exception):
    """Base class for all flightgate errors."""

    pass


class ConfigError(FlightGateError):
    """Raised when a ruleset configuration is invalid."""


class UnknownRulesetError(ConfigError):
    """Raised when a named ruleset preset does not exist."""

    pass


class ValidatorNotFoundError(FlightGateError, ValueError):
    """Raised when a field predicate is not registered."""

    pass
