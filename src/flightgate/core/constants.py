"""Core constants and enums."""

from enum import Enum

DATE_TEXT_FORMAT = "%d/%m/%Y"

SEATING_CLASSES = ("economy", "premium economy", "business", "first")

ECONOMY = "economy"
BUSINESS = "business"
FIRST = "first"

LISTED_AIRPORTS = ("syd", "mel", "lax", "cdg", "del", "pvg", "doh")


class AirportMode(str, Enum):
    """How airport codes are recognized."""

    IATA = "iata"
    ALLOW_LIST = "allow_list"


class DateInput(str, Enum):
    """Accepted representations for travel dates."""

    TEXT = "text"
    NATIVE = "native"
    ANY = "any"


class Violation(str, Enum):
    """Reason a candidate was rejected, one per rule in the chain."""

    PASSENGER_NAME = "passenger_name"
    DESTINATION = "destination"
    BUDGET = "budget"
    AIRPORT_CODE = "airport_code"
    SAME_AIRPORT = "same_airport"
    DATE_FORMAT = "date_format"
    DEPARTURE_IN_PAST = "departure_in_past"
    RETURN_BEFORE_DEPARTURE = "return_before_departure"
    PASSENGER_COUNT = "passenger_count"
    PASSENGER_TOTAL = "passenger_total"
    EMERGENCY_ROW = "emergency_row"
    CHILD_RESTRICTION = "child_restriction"
    INFANT_RESTRICTION = "infant_restriction"
    SEATING_CLASS = "seating_class"
