"""Flight-search request validator.

FlightSearch holds one committed request. ``validate`` either replaces it with
the normalized candidate or leaves it exactly as it was.

Usage:
    from flightgate import FlightSearch

    search = FlightSearch()
    ok = search.run_flight_search(
        departure_date="01/12/2026",
        departure_airport_code="mel",
        return_date="15/12/2026",
        destination_airport_code="pvg",
        seating_class="economy",
        adult_passenger_count=2,
        child_passenger_count=2,
    )
"""

from collections.abc import Callable
from datetime import date
from decimal import Decimal
from threading import Lock
from typing import Any

from flightgate.config.loader import RulesetLoader
from flightgate.config.models import RulesetConfig
from flightgate.config.presets import STRICT
from flightgate.core.constants import Violation
from flightgate.core.types import FlightSearchCandidate, FlightSearchState
from flightgate.observability.logging import ContextLogger
from flightgate.validation import evaluate
from flightgate.validation.parsing import format_date


class FlightSearch:
    """Validate-and-commit gate for flight-search parameters."""

    def __init__(
        self,
        config: RulesetConfig | None = None,
        clock: Callable[[], date] = date.today,
    ):
        """
        Args:
            config: Ruleset to enforce (defaults to the strict preset)
            clock: Provides "today" for the past-departure rule
        """
        self._config = config or STRICT
        self._clock = clock
        self._state = FlightSearchState.empty()
        self._last_violation: Violation | None = None
        self._lock = Lock()
        self._log = ContextLogger(__name__).with_context(ruleset=self._config.name)

    @classmethod
    def from_env(cls, clock: Callable[[], date] = date.today) -> "FlightSearch":
        """Create a validator using the ruleset named by FLIGHTGATE_RULESET."""
        return cls(config=RulesetLoader.from_env(), clock=clock)

    @property
    def config(self) -> RulesetConfig:
        return self._config

    def validate(self, candidate: FlightSearchCandidate) -> bool:
        """Run the rule chain and commit the candidate if every rule passes.

        Returns:
            True if the state now holds the normalized candidate, False if the
            candidate was rejected and the state is unchanged
        """
        with self._lock:
            result = evaluate(candidate, self._config, self._clock())
            if not result.ok:
                self._last_violation = result.violation
                self._log.debug(f"Rejected flight search at rule '{result.rule}'")
                return False

            self._state = result.state
            self._last_violation = None
            self._log.debug(
                f"Committed flight search {self._state.departure_airport_code}"
                f" -> {self._state.destination_airport_code}"
            )
            return True

    def run_flight_search(self, **fields: Any) -> bool:
        """Build a candidate from keyword fields and validate it.

        Omitted fields take the candidate defaults; the call still replaces
        the whole state on success.
        """
        return self.validate(FlightSearchCandidate(**fields))

    @property
    def state(self) -> FlightSearchState:
        return self._state

    @property
    def last_violation(self) -> Violation | None:
        """Why the most recent call was rejected, or None after a success."""
        return self._last_violation

    @property
    def departure_date(self) -> date | None:
        return self._state.departure_date

    @property
    def departure_airport_code(self) -> str | None:
        return self._state.departure_airport_code

    @property
    def emergency_row_seating(self) -> bool:
        return self._state.emergency_row_seating

    @property
    def return_date(self) -> date | None:
        return self._state.return_date

    @property
    def destination_airport_code(self) -> str | None:
        return self._state.destination_airport_code

    @property
    def seating_class(self) -> str | None:
        return self._state.seating_class

    @property
    def adult_passenger_count(self) -> int:
        return self._state.adult_passenger_count

    @property
    def child_passenger_count(self) -> int:
        return self._state.child_passenger_count

    @property
    def infant_passenger_count(self) -> int:
        return self._state.infant_passenger_count

    @property
    def passenger_name(self) -> str | None:
        return self._state.passenger_name

    @property
    def destination(self) -> str | None:
        return self._state.destination

    @property
    def budget(self) -> Decimal | None:
        return self._state.budget

    def __str__(self) -> str:
        s = self._state
        return (
            f"FlightSearch(dep={format_date(s.departure_date)!r}, "
            f"from={s.departure_airport_code!r}, "
            f"emergency={s.emergency_row_seating}, "
            f"ret={format_date(s.return_date)!r}, "
            f"to={s.destination_airport_code!r}, "
            f"class={s.seating_class!r}, "
            f"adults={s.adult_passenger_count}, "
            f"children={s.child_passenger_count}, "
            f"infants={s.infant_passenger_count})"
        )
