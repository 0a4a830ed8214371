# agents/__init__.py
"""
Background Agents Package

Contains:
- PriceComparisonBot: Periodic competitor price checker
"""

from .price_comparison_bot import PriceComparisonBot, StaticPriceSource

__all__ = [
    "PriceComparisonBot",
    "StaticPriceSource",
]
