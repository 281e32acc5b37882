"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "100000"
    - "1,234.56"
    - "1 234 567" (space or no-break space thousands separators)
    - "$123.45" / "123.45 UZS"

    The sign is kept as written; whether an amount is acceptable is decided
    by draft validation, not here.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency symbols and codes
    amount_str = re.sub(r"[$€£¥₽]|\b(?:UZS|USD|EUR|RUB)\b", "", amount_str, flags=re.IGNORECASE)

    # Remove thousands separators
    amount_str = re.sub(r"[,\s]", "", amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e!r}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return amount
