"""
Pricing Algorithms Module
Core algorithms for bundle pricing, recommendations and price comparison
"""

from .discount_rules import (
    DiscountRule,
    SeasonProfile,
    Season,
    classify_destination,
    lead_time_days,
)
from .bundle_pricing import (
    ServiceCategory,
    BundleItem,
    PricingContext,
    Discount,
    BundlePricing,
    compute_bundle_pricing,
    compute_bundle_pricing_from_dicts,
)
from .recommendation import get_bundle_recommendation, next_bundle_tier
from .price_comparison import CompetitorPrice, PriceComparison, compare_prices
from .search_intent import (
    SearchIntent,
    SearchSuggestion,
    analyze_search_intent,
    calculate_bundle_discount,
    generate_search_suggestions,
    sort_results,
)

__all__ = [
    "DiscountRule",
    "SeasonProfile",
    "Season",
    "classify_destination",
    "lead_time_days",
    "ServiceCategory",
    "BundleItem",
    "PricingContext",
    "Discount",
    "BundlePricing",
    "compute_bundle_pricing",
    "compute_bundle_pricing_from_dicts",
    "get_bundle_recommendation",
    "next_bundle_tier",
    "CompetitorPrice",
    "PriceComparison",
    "compare_prices",
    "SearchIntent",
    "SearchSuggestion",
    "analyze_search_intent",
    "calculate_bundle_discount",
    "generate_search_suggestions",
    "sort_results",
]
