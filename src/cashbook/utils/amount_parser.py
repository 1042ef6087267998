"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def to_decimal(value) -> Decimal:
    """Convert a number to Decimal without going through binary floats.

    Floats are converted from their shortest repr, so 0.1 becomes
    Decimal("0.1") and not Decimal("0.1000000000000000055511151231257827").

    Raises:
        ValueError: If value cannot be represented as a finite Decimal
    """
    if isinstance(value, bool):
        raise ValueError(f"Could not convert {value!r} to an amount")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        return parse_amount(value)
    else:
        raise ValueError(f"Could not convert {value!r} to an amount")

    if not result.is_finite():
        raise ValueError(f"Amount must be a finite number, got {value!r}")
    return result


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45" / "₹123.45"
    - "1,234.56"

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

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥₹]", "", amount_str)

    # Remove thousands separators
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount
