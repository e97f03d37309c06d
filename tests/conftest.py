"""Shared fixtures for flightgate tests.

The validator takes "today" from an injected clock; tests pin it so the
sample December 2025 trips are always in the future.
"""

import logging
from datetime import date

import pytest

from flightgate.config.presets import IATA, STRICT
from flightgate.search import FlightSearch

TODAY = date(2025, 11, 1)


def fixed_clock() -> date:
    return TODAY


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def search() -> FlightSearch:
    """Validator with the strict ruleset and a pinned clock."""
    return FlightSearch(config=STRICT, clock=fixed_clock)


@pytest.fixture
def iata_search() -> FlightSearch:
    """Validator with the IATA ruleset and a pinned clock."""
    return FlightSearch(config=IATA, clock=fixed_clock)


@pytest.fixture
def valid_fields() -> dict:
    """A request every strict rule accepts."""
    return {
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


@pytest.fixture
def iata_fields() -> dict:
    """A request every IATA rule accepts."""
    return {
        "departure_date": "01/12/2025",
        "departure_airport_code": "JFK",
        "emergency_row_seating": False,
        "return_date": "15/12/2025",
        "destination_airport_code": "NRT",
        "seating_class": "Business",
        "adult_passenger_count": 1,
        "child_passenger_count": 0,
        "infant_passenger_count": 0,
    }


@pytest.fixture(autouse=True)
def reset_flightgate_logger():
    """Undo setup_logging() so caplog keeps seeing flightgate records."""
    root = logging.getLogger()
    root_handlers = list(root.handlers)
    root_level = root.level
    yield
    root.handlers[:] = root_handlers
    root.setLevel(root_level)
    logger = logging.getLogger("flightgate")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
