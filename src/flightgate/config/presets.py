"""Built-in rulesets.

``strict`` is the booking-assignment ruleset: a fixed airport allow-list,
occupancy ratios, and emergency rows limited to economy. ``iata`` accepts any
three-letter uppercase code and applies only the base passenger rules.
"""

from flightgate.config.models import PassengerLimits, RulesetConfig
from flightgate.core.constants import BUSINESS, ECONOMY, FIRST, AirportMode, DateInput
from flightgate.core.errors import UnknownRulesetError

STRICT = RulesetConfig(
    name="strict",
    airport_mode=AirportMode.ALLOW_LIST,
    date_input=DateInput.TEXT,
    allow_same_day_return=True,
    forbid_past_departure=True,
    passengers=PassengerLimits(
        min_total=1,
        max_total=9,
        max_children_per_adult=2,
        max_infants_per_adult=1,
    ),
    emergency_row_classes=frozenset({ECONOMY}),
    child_forbidden_classes=frozenset({FIRST}),
    infant_forbidden_classes=frozenset({BUSINESS}),
)

IATA = RulesetConfig(
    name="iata",
    airport_mode=AirportMode.IATA,
    date_input=DateInput.ANY,
    allow_same_day_return=False,
    passengers=PassengerLimits(min_total=1, max_total=9),
)

RULESETS: dict[str, RulesetConfig] = {
    STRICT.name: STRICT,
    IATA.name: IATA,
}

DEFAULT_RULESET = STRICT.name


def get_ruleset(name: str) -> RulesetConfig:
    """Look up a built-in ruleset by name.

    Raises:
        UnknownRulesetError: If no preset has that name
    """
    try:
        return RULESETS[name]
    except KeyError:
        raise UnknownRulesetError(
            f"Ruleset '{name}' not found. Available: {sorted(RULESETS)}"
        ) from None
