"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser

from pocketledger.domain.errors import ValidationError


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Accepts "today", "yesterday" and absolute dates in any format
    dateutil understands ("2024-01-15", "January 15, 2024").

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValidationError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    if date_str == "today":
        return today
    if date_str == "yesterday":
        return today - timedelta(days=1)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Could not parse date '{date_str}': {e}") from e
