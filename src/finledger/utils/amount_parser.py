"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from finledger.domain.errors import ValidationError, negative_amount

# Up to 15 significant digits survive a trip through a JSON number unchanged
MAX_SIGNIFICANT_DIGITS = 15
MAX_AMOUNT = Decimal("1e15")
MIN_EXPONENT = -18


def parse_amount(amount) -> Decimal:
    """Parse a user-supplied amount into a non-negative Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "€ 99"
    - 123.45 / 10 / Decimal("1.5")

    Args:
        amount: Amount string or number

    Returns:
        Decimal amount

    Raises:
        ValidationError: If the amount is empty, non-numeric, not finite, negative
            or outside the range that can be stored exactly
    """
    if isinstance(amount, bool):
        raise ValidationError(f"Could not parse amount '{amount}'")

    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, (int, float)):
        value = Decimal(str(amount))
    else:
        if amount is None or not str(amount).strip():
            raise ValidationError("Empty amount string")

        # Remove whitespace, currency symbols and thousands separators
        amount_str = str(amount).strip()
        amount_str = re.sub(r"[$€£¥₿]", "", amount_str)
        amount_str = amount_str.replace(",", "").strip()

        try:
            value = Decimal(amount_str)
        except InvalidOperation:
            raise ValidationError(f"Could not parse amount '{amount}'") from None

    if not value.is_finite():
        raise ValidationError(f"Amount must be a finite number, got '{amount}'")
    if value < 0:
        raise ValidationError(negative_amount(value))
    if value == 0:
        return Decimal("0")
    if value >= MAX_AMOUNT:
        raise ValidationError(f"Amount must be below {MAX_AMOUNT:,f}, got '{amount}'")
    if value.adjusted() < MIN_EXPONENT:
        raise ValidationError(f"Amount is too small to record, got '{amount}'")
    if len(value.normalize().as_tuple().digits) > MAX_SIGNIFICANT_DIGITS:
        raise ValidationError(
            f"Amount has more than {MAX_SIGNIFICANT_DIGITS} significant digits, got '{amount}'"
        )
    return value
