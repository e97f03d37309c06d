"""Ruleset configuration models.

A ruleset selects which rules in the chain are active and with which bounds.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from flightgate.core.constants import LISTED_AIRPORTS, SEATING_CLASSES, AirportMode, DateInput


def _normalize_class_names(values: frozenset[str] | tuple[str, ...]) -> list[str]:
    return [" ".join(str(v).split()).lower() for v in values]


class TextFieldRule(BaseModel):
    """Constraints for a free-text field such as the passenger name."""

    model_config = ConfigDict(frozen=True)

    letters_only: bool = Field(
        default=True, description="Restrict to letters, spaces and hyphens"
    )
    max_length: int | None = Field(default=None, ge=1, description="Maximum stripped length")


class PassengerLimits(BaseModel):
    """Passenger total bounds and per-adult occupancy ratios."""

    model_config = ConfigDict(frozen=True)

    min_total: int | None = Field(default=1, ge=0, description="Inclusive minimum passengers")
    max_total: int | None = Field(default=9, ge=0, description="Inclusive maximum passengers")
    max_children_per_adult: int | None = Field(default=None, ge=0)
    max_infants_per_adult: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _validate_bounds(self) -> "PassengerLimits":
        if (
            self.min_total is not None
            and self.max_total is not None
            and self.min_total > self.max_total
        ):
            raise ValueError(
                f"min_total ({self.min_total}) exceeds max_total ({self.max_total})"
            )
        return self


class RulesetConfig(BaseModel):
    """Complete configuration of the request validator."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="custom", description="Ruleset identifier used in logs")

    # Text and budget fields are only checked when configured
    passenger_name: TextFieldRule | None = Field(default=None)
    destination: TextFieldRule | None = Field(default=None)
    require_budget: bool = Field(default=False, description="Require a budget greater than zero")

    airport_mode: AirportMode = Field(default=AirportMode.IATA)
    allowed_airports: frozenset[str] = Field(
        default=frozenset(LISTED_AIRPORTS),
        description="Recognized codes when airport_mode is allow_list",
    )

    date_input: DateInput = Field(default=DateInput.TEXT)
    require_return_date: bool = Field(default=True)
    allow_same_day_return: bool = Field(
        default=False, description="Accept a return date equal to the departure date"
    )
    forbid_past_departure: bool = Field(default=False)

    passengers: PassengerLimits = Field(default_factory=PassengerLimits)

    seating_classes: tuple[str, ...] = Field(default=SEATING_CLASSES)
    emergency_row_classes: frozenset[str] | None = Field(
        default=None,
        description="Classes where emergency-row seating is allowed (None means any class)",
    )
    child_forbidden_classes: frozenset[str] = Field(default=frozenset())
    infant_forbidden_classes: frozenset[str] = Field(default=frozenset())

    @field_validator("seating_classes", mode="after")
    @classmethod
    def _normalize_seating_classes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized = tuple(_normalize_class_names(value))
        if not normalized:
            raise ValueError("seating_classes must not be empty")
        return normalized

    @field_validator(
        "emergency_row_classes",
        "child_forbidden_classes",
        "infant_forbidden_classes",
        mode="after",
    )
    @classmethod
    def _normalize_class_sets(cls, value: frozenset[str] | None) -> frozenset[str] | None:
        if value is None:
            return None
        return frozenset(_normalize_class_names(value))

    @model_validator(mode="after")
    def _validate_class_references(self) -> "RulesetConfig":
        known = set(self.seating_classes)
        for field_name in (
            "emergency_row_classes",
            "child_forbidden_classes",
            "infant_forbidden_classes",
        ):
            referenced = getattr(self, field_name) or frozenset()
            unknown = sorted(referenced - known)
            if unknown:
                raise ValueError(f"{field_name} references unknown seating classes: {unknown}")
        if self.airport_mode == AirportMode.ALLOW_LIST and not self.allowed_airports:
            raise ValueError("allowed_airports must not be empty in allow_list mode")
        return self
