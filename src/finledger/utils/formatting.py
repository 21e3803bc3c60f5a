"""Display formatting helpers."""

from decimal import Decimal

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def format_amount(amount: Decimal, currency: str = "USD") -> str:
    """Format an amount for display.

    Fiat currencies get their symbol and two decimals; crypto currencies keep
    up to eight decimals and are suffixed with their code.
    """
    symbol = CURRENCY_SYMBOLS.get(currency)
    sign = "-" if amount < 0 else ""
    magnitude = abs(amount)
    if symbol is not None:
        return f"{sign}{symbol}{magnitude:,.2f}"
    text = f"{magnitude:,.8f}".rstrip("0").rstrip(".")
    return f"{sign}{text} {currency}"


def format_percentage(value: Decimal) -> str:
    """Format a percentage with one decimal place."""
    return f"{value:.1f}%"
