"""Flight-search value types.

A candidate carries raw caller input exactly as supplied; the state carries the
normalized values that survived the rule chain. Both are frozen so a commit is
a single reference swap.
"""

from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class FlightSearchCandidate:
    """Proposed field values for one validation attempt.

    Fields are deliberately loosely typed: malformed values are rejected by the
    rule chain rather than at construction time.
    """

    departure_date: str | date | None = None
    departure_airport_code: str | None = None
    emergency_row_seating: Any = False
    return_date: str | date | None = None
    destination_airport_code: str | None = None
    seating_class: str | None = None
    adult_passenger_count: Any = 0
    child_passenger_count: Any = 0
    infant_passenger_count: Any = 0
    passenger_name: str | None = None
    destination: str | None = None
    budget: Any = None


@dataclass(frozen=True)
class FlightSearchState:
    """Committed, normalized flight-search parameters."""

    departure_date: date | None = None
    departure_airport_code: str | None = None
    emergency_row_seating: bool = False
    return_date: date | None = None
    destination_airport_code: str | None = None
    seating_class: str | None = None
    adult_passenger_count: int = 0
    child_passenger_count: int = 0
    infant_passenger_count: int = 0
    passenger_name: str | None = None
    destination: str | None = None
    budget: Decimal | None = None

    @classmethod
    def empty(cls) -> "FlightSearchState":
        """The unset state every validator starts from."""
        return cls()

    @property
    def is_set(self) -> bool:
        return self != FlightSearchState.empty()

    @property
    def total_passengers(self) -> int:
        return self.adult_passenger_count + self.child_passenger_count + self.infant_passenger_count

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
