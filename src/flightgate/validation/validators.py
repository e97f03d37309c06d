"""Built-in field predicates"""

import re
from typing import Any

from flightgate.validation.parsing import parse_amount, parse_count
from flightgate.validation.registry import ValidatorRegistry


@ValidatorRegistry.register("non_blank")
def validate_non_blank(value: Any) -> bool:
    """Text with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


@ValidatorRegistry.register("name_text")
def validate_name_text(value: Any) -> bool:
    """
    Validate a person or place name.

    Args:
        value: Text to validate

    Returns:
        True if it contains only letters, spaces and hyphens, False otherwise
    """
    if not isinstance(value, str):
        return False
    # Letters (any script), spaces, hyphens
    return bool(re.match(r"^[^\W\d_](?:[^\W\d_]|[ \-])*$", value.strip()))


@ValidatorRegistry.register("iata_code")
def validate_iata_code(value: Any) -> bool:
    """
    Validate IATA airport code.

    Args:
        value: Airport code to validate

    Returns:
        True if exactly 3 uppercase ASCII letters, False otherwise
    """
    if not isinstance(value, str):
        return False
    return bool(re.fullmatch(r"[A-Z]{3}", value))


@ValidatorRegistry.register("positive_amount")
def validate_positive_amount(value: Any) -> bool:
    amount = parse_amount(value)
    return amount is not None and amount > 0


@ValidatorRegistry.register("passenger_count")
def validate_passenger_count(value: Any) -> bool:
    """Non-negative integer count of one passenger category."""
    return parse_count(value) is not None
