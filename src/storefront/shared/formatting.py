"""Display formatting for prices and dates shown next to carts and orders."""

import math
from datetime import date, datetime
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

CURRENCY_SYMBOL = "₹"
NOT_AVAILABLE = "N/A"


def format_currency(amount: Any) -> str:
    """Format an amount as rupees with two decimals, e.g. ``"₹1234.56"``.

    Numeric strings are accepted. ``None``, NaN, infinities and anything
    non-numeric format as ``"N/A"``.
    """
    if amount is None or isinstance(amount, bool):
        logger.debug("Invalid amount for currency formatting", amount=amount)
        return NOT_AVAILABLE

    try:
        value = float(amount)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Invalid amount for currency formatting", amount=amount)
        return NOT_AVAILABLE

    if not math.isfinite(value):
        logger.debug("Invalid amount for currency formatting", amount=amount)
        return NOT_AVAILABLE

    return f"{CURRENCY_SYMBOL}{value:.2f}"


def format_date(value: Any) -> str:
    """Format a date, datetime or ISO 8601 string as ``DD/MM/YYYY``."""
    if value is None:
        logger.debug("Invalid date for formatting", value=value)
        return NOT_AVAILABLE

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.debug("Could not parse date", value=value)
            return NOT_AVAILABLE

    if not isinstance(value, date):
        logger.debug("Invalid date for formatting", value=value)
        return NOT_AVAILABLE

    return value.strftime("%d/%m/%Y")
