"""
Value Normalizers Module

Converts the amount and date strings scraped from the Fortuneo portal into
numeric and calendar values.
"""

import logging
import math
import re
from datetime import date, datetime

logger = logging.getLogger(__name__)

# strptime formats keyed by portal locale
DATE_FORMATS = {
    "fr": "%d/%m/%Y",
}

# Strict shapes accepted for each locale (strptime alone accepts "1/2/2020")
DATE_PATTERNS = {
    "fr": re.compile(r"\d{2}/\d{2}/\d{4}", re.ASCII),
}

_WHITESPACE = re.compile(r"\s")
_DECIMAL_LITERAL = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def normalize_amount(amount: str) -> float:
    """Convert a French formatted amount to float.

    Interior whitespace is treated as a thousands separator and the comma as
    the decimal separator: ``"1 234,56 "`` becomes ``1234.56``.

    Args:
        amount: Amount string as displayed by the portal

    Returns:
        Parsed value, or NaN when the cleaned string is not a number
    """
    cleaned = _WHITESPACE.sub("", amount).replace(",", ".", 1).strip()

    if not _DECIMAL_LITERAL.fullmatch(cleaned):
        logger.debug(f"Cannot parse amount: {amount!r}")
        return math.nan

    return float(cleaned)


def is_valid_amount(value: float) -> bool:
    """Check that a normalized amount can be used downstream."""
    return isinstance(value, (int, float)) and math.isfinite(value)


def parse_date(value: str, locale: str = "fr") -> date | None:
    """Convert a portal date string to a date.

    Args:
        value: Date string, e.g. ``"01/02/2020"`` for February 1st
        locale: Portal locale selecting the expected format

    Returns:
        Parsed date, or None when the string is not a valid date

    Raises:
        ValueError: If the locale has no known date format
    """
    if locale not in DATE_FORMATS:
        raise ValueError(f"Unsupported date locale: {locale}")

    value = value.strip()
    if not DATE_PATTERNS[locale].fullmatch(value):
        logger.debug(f"Cannot parse date: {value!r}")
        return None

    try:
        return datetime.strptime(value, DATE_FORMATS[locale]).date()
    except ValueError:
        logger.debug(f"Not a calendar date: {value!r}")
        return None
