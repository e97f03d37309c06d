"""Parsers and normalizers for loosely typed request fields.

Every function returns ``None`` for input it cannot accept instead of raising,
so the rule chain can treat malformed input as an ordinary violation.
"""

import re
from datetime import date, datetime
from decimal import Decimal
from numbers import Rational, Real
from typing import Any

from flightgate.core.constants import DATE_TEXT_FORMAT, DateInput

# Two-digit day and month, four-digit year, ASCII digits only
_DATE_TEXT_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")


def parse_date_text(value: str) -> date | None:
    """Parse ``DD/MM/YYYY`` strictly.

    Non-existent calendar days such as ``29/02/2026`` are rejected, never
    rolled over to the next valid day.

    Examples:
        >>> parse_date_text("28/02/2026")
        datetime.date(2026, 2, 28)
        >>> parse_date_text("29/02/2026") is None
        True
        >>> parse_date_text("1/3/2026") is None
        True
    """
    if not _DATE_TEXT_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, DATE_TEXT_FORMAT).date()
    except ValueError:
        return None


def parse_date(value: Any, mode: DateInput) -> date | None:
    """Parse a travel date according to the accepted input representation."""
    if isinstance(value, datetime):
        value = value.date() if mode != DateInput.TEXT else None
    elif isinstance(value, date):
        value = value if mode != DateInput.TEXT else None
    elif isinstance(value, str):
        value = parse_date_text(value) if mode != DateInput.NATIVE else None
    else:
        value = None
    return value


def format_date(value: date | None) -> str | None:
    if value is None:
        return None
    return value.strftime(DATE_TEXT_FORMAT)


def normalize_seating_class(value: Any) -> str | None:
    """Lower-case a class name and collapse internal whitespace.

    ``"Premium  Economy "`` becomes ``"premium economy"``.
    """
    if not isinstance(value, str):
        return None
    normalized = " ".join(value.split()).lower()
    return normalized or None


def parse_count(value: Any) -> int | None:
    """Accept a non-negative int; bools and floats are not counts."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 0:
        return None
    return value


def parse_amount(value: Any) -> Decimal | None:
    """Convert a finite real number to Decimal.

    Ints and fractions are converted exactly so arbitrarily large amounts never
    pass through float.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, int):
            amount = Decimal(value)
        elif isinstance(value, Rational):
            amount = Decimal(value.numerator) / Decimal(value.denominator)
        else:
            amount = Decimal(str(float(value)))
    except (ArithmeticError, ValueError):
        return None
    return amount if amount.is_finite() else None


def normalize_text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None
