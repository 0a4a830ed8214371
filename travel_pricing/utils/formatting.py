"""
Formatting Utilities
Currency display and rounding helpers shared by the pricing service
"""

import math
from typing import Optional

from ..config import settings


CURRENCY_SYMBOLS = {
    "TRY": "₺",
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
}


def js_round(value: float) -> int:
    """
    Round half up (toward +infinity)

    Python's round() uses banker's rounding; quotes must agree with the
    web client, which rounds .5 upward.

    Example:
        >>> js_round(2.5), js_round(-2.5), round(2.5)
        (3, -2, 2)
    """
    return int(math.floor(value + 0.5))


def format_currency(
    amount: float,
    currency: Optional[str] = None,
    decimals: int = 0
) -> str:
    """
    Format amount as a display string in the platform's convention

    Thousands are grouped with "." and decimals separated with ",".
    Known currencies get a prefixed glyph, others the code as suffix.

    Args:
        amount: Raw amount
        currency: ISO currency code (default: settings.CURRENCY)
        decimals: Number of decimal places to render

    Returns:
        str: Formatted amount (e.g., "₺7.000", "₺1.234,50", "1.200 CHF")
    """
    currency = (currency or settings.CURRENCY).upper()

    grouped = f"{abs(amount):,.{decimals}f}"
    grouped = grouped.replace(",", "\0").replace(".", ",").replace("\0", ".")

    sign = "-" if amount < 0 and grouped.strip("0.,") else ""

    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol:
        return f"{sign}{symbol}{grouped}"
    return f"{sign}{grouped} {currency}"


def format_percentage(value: int, locale: Optional[str] = None) -> str:
    """Render a percentage the way the locale writes it ("%15" in Turkish)"""
    locale = locale or settings.DEFAULT_LOCALE
    if locale == "tr":
        return f"%{value}"
    return f"{value}%"
