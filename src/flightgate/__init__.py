"""flightgate - validation gate for flight-search requests.

A request is checked against an ordered chain of business rules and committed
only when every rule passes; a rejected request leaves the previous state
untouched.

Quick start:
    from flightgate import FlightSearch, FlightSearchCandidate

    search = FlightSearch()
    ok = search.validate(FlightSearchCandidate(...))
"""

from flightgate.__version__ import __version__
from flightgate.config import IATA, STRICT, RulesetConfig, RulesetLoader, get_ruleset
from flightgate.core.constants import Violation
from flightgate.core.errors import ConfigError, FlightGateError, UnknownRulesetError
from flightgate.core.types import FlightSearchCandidate, FlightSearchState
from flightgate.search import FlightSearch

__all__ = [
    "__version__",
    "FlightSearch",
    "FlightSearchCandidate",
    "FlightSearchState",
    "Violation",
    "RulesetConfig",
    "RulesetLoader",
    "STRICT",
    "IATA",
    "get_ruleset",
    "FlightGateError",
    "ConfigError",
    "UnknownRulesetError",
]
