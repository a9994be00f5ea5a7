"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from pocketledger.domain.errors import ValidationError


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValidationError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValidationError("Empty amount string")

    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$€£¥₽]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValidationError(f"Could not parse amount '{amount_str}'") from e

    if not amount.is_finite():
        raise ValidationError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount


def parse_magnitude(amount_str: str) -> Decimal:
    """Parse a non-negative transaction amount.

    Raises:
        ValidationError: If the string cannot be parsed or is negative
    """
    amount = parse_amount(amount_str)
    if amount < 0:
        raise ValidationError(
            f"Amount must not be negative, got {amount}. "
            "Use --income or --expense to set the direction."
        )
    return amount
