"""
Pydantic Schemas Package

Contains the Pydantic v2 models for API requests and responses
"""

from .pricing_schemas import (
    # Bundle pricing
    BundleItemIn, PricingContextIn, BundlePricingRequest, DiscountOut, BundlePricingResponse,
    # Recommendation
    RecommendationRequest, RecommendationResponse,
    # Search
    SearchResultIn, SearchIntentRequest, SearchIntentOut, SearchSuggestionOut, SearchIntentResponse,
    # Price comparison
    CompetitorPriceIn, PriceComparisonRequest, PriceComparisonResponse, TrackProductRequest,
    # Health
    HealthResponse,
)

__all__ = [
    "BundleItemIn", "PricingContextIn", "BundlePricingRequest", "DiscountOut", "BundlePricingResponse",
    "RecommendationRequest", "RecommendationResponse",
    "SearchResultIn", "SearchIntentRequest", "SearchIntentOut", "SearchSuggestionOut", "SearchIntentResponse",
    "CompetitorPriceIn", "PriceComparisonRequest", "PriceComparisonResponse", "TrackProductRequest",
    "HealthResponse",
]
