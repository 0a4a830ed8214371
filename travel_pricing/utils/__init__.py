"""
Utilities Module
Formatting and message helpers for the pricing service
"""

from .formatting import format_currency, format_percentage, js_round
from .messages import localize_discount, resolve_locale, resolve_message

__all__ = [
    "format_currency",
    "format_percentage",
    "js_round",
    "localize_discount",
    "resolve_locale",
    "resolve_message",
]
