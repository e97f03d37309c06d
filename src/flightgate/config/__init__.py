"""Configuration module for flightgate."""

from flightgate.config.loader import RulesetLoader
from flightgate.config.models import PassengerLimits, RulesetConfig, TextFieldRule
from flightgate.config.presets import IATA, STRICT, get_ruleset

__all__ = [
    "RulesetConfig",
    "PassengerLimits",
    "TextFieldRule",
    "RulesetLoader",
    "STRICT",
    "IATA",
    "get_ruleset",
]
