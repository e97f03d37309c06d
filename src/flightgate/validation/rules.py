"""Ordered rule chain for flight-search candidates.

Each rule inspects the raw candidate and returns a Violation or None. The chain
stops at the first violation, so later rules never see a candidate an earlier
rule rejected. Normalization runs only after the whole chain has passed.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from flightgate.config.models import RulesetConfig, TextFieldRule
from flightgate.core.constants import AirportMode, Violation
from flightgate.core.types import FlightSearchCandidate, FlightSearchState
from flightgate.validation.parsing import (
    normalize_seating_class,
    normalize_text,
    parse_amount,
    parse_count,
    parse_date,
)
from flightgate.validation.registry import ValidatorRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleContext:
    """Inputs a rule may consult besides the candidate."""

    config: RulesetConfig
    today: date


RuleFn = Callable[[FlightSearchCandidate, RuleContext], Violation | None]


@dataclass(frozen=True)
class Rule:
    name: str
    check: RuleFn


@dataclass(frozen=True)
class Evaluation:
    """Outcome of running the chain against one candidate."""

    state: FlightSearchState | None = None
    violation: Violation | None = None
    rule: str | None = None

    @property
    def ok(self) -> bool:
        return self.state is not None


def _text_ok(value: object, rule: TextFieldRule) -> bool:
    if not ValidatorRegistry.validate("non_blank", value):
        return False
    if rule.letters_only and not ValidatorRegistry.validate("name_text", value):
        return False
    if rule.max_length is not None and len(str(value).strip()) > rule.max_length:
        return False
    return True


def check_text_fields(candidate: FlightSearchCandidate, ctx: RuleContext) -> Violation | None:
    config = ctx.config
    if config.passenger_name is not None and not _text_ok(
        candidate.passenger_name, config.passenger_name
    ):
        return Violation.PASSENGER_NAME
    if config.destination is not None and not _text_ok(candidate.destination, config.destination):
        return Violation.DESTINATION
    return None


def check_budget(candidate: FlightSearchCandidate, ctx: RuleContext) -> Violation | None:
    if ctx.config.require_budget and not ValidatorRegistry.validate(
        "positive_amount", candidate.budget
    ):
        return Violation.BUDGET
    return None


def _airport_ok(code: object, config: RulesetConfig) -> bool:
    if config.airport_mode == AirportMode.IATA:
        return ValidatorRegistry.validate("iata_code", code)
    return isinstance(code, str) and code in config.allowed_airports


def check_airports(candidate: FlightSearchCandidate, ctx: RuleContext) -> Violation | None:
    origin = candidate.departure_airport_code
    target = candidate.destination_airport_code
    if not (_airport_ok(origin, ctx.config) and _airport_ok(target, ctx.config)):
        return Violation.AIRPORT_CODE
    if origin == target:
        return Violation.SAME_AIRPORT
    return None


def check_dates(candidate: FlightSearchCandidate, ctx: RuleContext) -> Violation | None:
    config = ctx.config
    departure = parse_date(candidate.departure_date, config.date_input)
    if departure is None:
        return Violation.DATE_FORMAT

    returning = None
    if candidate.return_date is not None or config.require_return_date:
        returning = parse_date(candidate.return_date, config.date_input)
        if returning is None:
            return Violation.DATE_FORMAT

    if config.forbid_past_departure and departure < ctx.today:
        return Violation.DEPARTURE_IN_PAST

    if returning is not None:
        if config.allow_same_day_return:
            if returning < departure:
                return Violation.RETURN_BEFORE_DEPARTURE
        elif returning <= departure:
            return Violation.RETURN_BEFORE_DEPARTURE
    return None


def check_passenger_counts(
    candidate: FlightSearchCandidate, ctx: RuleContext
) -> Violation | None:
    counts = (
        candidate.adult_passenger_count,
        candidate.child_passenger_count,
        candidate.infant_passenger_count,
    )
    if not all(ValidatorRegistry.validate("passenger_count", c) for c in counts):
        return Violation.PASSENGER_COUNT

    limits = ctx.config.passengers
    total = sum(counts)
    if limits.min_total is not None and total < limits.min_total:
        return Violation.PASSENGER_TOTAL
    if limits.max_total is not None and total > limits.max_total:
        return Violation.PASSENGER_TOTAL
    return None


def check_emergency_row(candidate: FlightSearchCandidate, ctx: RuleContext) -> Violation | None:
    flag = candidate.emergency_row_seating
    if not isinstance(flag, bool):
        return Violation.EMERGENCY_ROW
    if not flag:
        return None

    # Counts were validated by the previous rule
    if candidate.adult_passenger_count < 1:
        return Violation.EMERGENCY_ROW
    if candidate.child_passenger_count > 0 or candidate.infant_passenger_count > 0:
        return Violation.EMERGENCY_ROW

    allowed = ctx.config.emergency_row_classes
    if allowed is not None and normalize_seating_class(candidate.seating_class) not in allowed:
        return Violation.EMERGENCY_ROW
    return None


def check_occupancy(candidate: FlightSearchCandidate, ctx: RuleContext) -> Violation | None:
    config = ctx.config
    limits = config.passengers
    seating_class = normalize_seating_class(candidate.seating_class)
    adults = candidate.adult_passenger_count
    children = candidate.child_passenger_count
    infants = candidate.infant_passenger_count

    if children > 0:
        if seating_class in config.child_forbidden_classes:
            return Violation.CHILD_RESTRICTION
        if (
            limits.max_children_per_adult is not None
            and children > adults * limits.max_children_per_adult
        ):
            return Violation.CHILD_RESTRICTION

    if infants > 0:
        if seating_class in config.infant_forbidden_classes:
            return Violation.INFANT_RESTRICTION
        if (
            limits.max_infants_per_adult is not None
            and infants > adults * limits.max_infants_per_adult
        ):
            return Violation.INFANT_RESTRICTION
    return None


def check_seating_class(candidate: FlightSearchCandidate, ctx: RuleContext) -> Violation | None:
    if normalize_seating_class(candidate.seating_class) not in ctx.config.seating_classes:
        return Violation.SEATING_CLASS
    return None


RULE_CHAIN: tuple[Rule, ...] = (
    Rule("text_fields", check_text_fields),
    Rule("budget", check_budget),
    Rule("airports", check_airports),
    Rule("dates", check_dates),
    Rule("passenger_counts", check_passenger_counts),
    Rule("emergency_row", check_emergency_row),
    Rule("occupancy", check_occupancy),
    Rule("seating_class", check_seating_class),
)


def normalize(candidate: FlightSearchCandidate, config: RulesetConfig) -> FlightSearchState:
    """Build the committed state from a candidate that passed every rule."""
    return FlightSearchState(
        departure_date=parse_date(candidate.departure_date, config.date_input),
        departure_airport_code=candidate.departure_airport_code,
        emergency_row_seating=candidate.emergency_row_seating,
        return_date=parse_date(candidate.return_date, config.date_input),
        destination_airport_code=candidate.destination_airport_code,
        seating_class=normalize_seating_class(candidate.seating_class),
        adult_passenger_count=parse_count(candidate.adult_passenger_count) or 0,
        child_passenger_count=parse_count(candidate.child_passenger_count) or 0,
        infant_passenger_count=parse_count(candidate.infant_passenger_count) or 0,
        passenger_name=normalize_text(candidate.passenger_name),
        destination=normalize_text(candidate.destination),
        budget=parse_amount(candidate.budget),
    )


def evaluate(
    candidate: FlightSearchCandidate,
    config: RulesetConfig,
    today: date,
    rules: tuple[Rule, ...] = RULE_CHAIN,
) -> Evaluation:
    """Run the rule chain and return the normalized state or the first violation.

    Pure function: no state is read or written besides the arguments.
    """
    ctx = RuleContext(config=config, today=today)
    for rule in rules:
        violation = rule.check(candidate, ctx)
        if violation is not None:
            logger.debug(
                f"Rule '{rule.name}' rejected candidate: {violation.value}",
                extra={"rule": rule.name, "violation": violation.value, "ruleset": config.name},
            )
            return Evaluation(violation=violation, rule=rule.name)
    return Evaluation(state=normalize(candidate, config))
