"""Validation module for flightgate"""

# Import validators to auto-register them
from flightgate.validation import validators  # noqa: F401
from flightgate.validation.registry import ValidatorRegistry
from flightgate.validation.rules import RULE_CHAIN, Evaluation, Rule, evaluate

__all__ = ["ValidatorRegistry", "RULE_CHAIN", "Evaluation", "Rule", "evaluate"]
