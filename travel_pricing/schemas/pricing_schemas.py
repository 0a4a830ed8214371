# schemas/pricing_schemas.py
"""
Pydantic v2 schemas for the Pricing Service API
Request validation happens here; the pricing core itself never rejects input.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..algorithms.bundle_pricing import ServiceCategory


# ============================================
# Bundle Pricing
# ============================================

class BundleItemIn(BaseModel):
    """One cart line"""
    category: ServiceCategory
    name: str = ""
    base_price: float = Field(..., ge=0, description="Price per night/day/instance")
    quantity: Optional[int] = Field(None, ge=1, description="Nights, days, etc. (default 1)")


class PricingContextIn(BaseModel):
    """Optional side inputs for the discount rules"""
    booking_date: Optional[datetime] = None
    travel_date: Optional[datetime] = None
    nights: Optional[int] = Field(None, ge=0)
    location: Optional[str] = None
    user_miles: Optional[int] = Field(None, ge=0)


class BundlePricingRequest(BaseModel):
    items: List[BundleItemIn] = Field(default_factory=list)
    context: Optional[PricingContextIn] = None
    locale: Optional[str] = Field(None, description="tr or en")
    currency: Optional[str] = None


class DiscountOut(BaseModel):
    rule: str
    percentage: int = Field(..., ge=0, le=100)
    amount: int = Field(..., ge=0)
    reason: str
    badge: str
    reason_key: str
    badge_key: str
    formatted_amount: str
    formatted_percentage: str


class BundlePricingResponse(BaseModel):
    items: List[BundleItemIn]
    subtotal: float
    discounts: List[DiscountOut]
    total_discount: float
    final_total: float
    savings_percentage: int
    loyalty_miles_earned: int
    formatted: Dict[str, str] = Field(default_factory=dict)
    recommendation: Optional[str] = None
    locale: str


# ============================================
# Recommendation
# ============================================

class RecommendationRequest(BaseModel):
    categories: List[str] = Field(default_factory=list)
    locale: Optional[str] = None


class RecommendationResponse(BaseModel):
    message: Optional[str] = None
    next_tier_percentage: Optional[int] = None


# ============================================
# Unified Search
# ============================================

class SearchResultIn(BaseModel):
    """A search hit to be ordered alongside the intent"""
    category: str
    title: str
    price: Optional[float] = None
    rating: Optional[float] = None
    location: Optional[str] = None
    url: Optional[str] = None


class SearchIntentRequest(BaseModel):
    query: str
    results: List[SearchResultIn] = Field(default_factory=list)
    locale: Optional[str] = None


class SearchIntentOut(BaseModel):
    location: Optional[str] = None
    nights: Optional[int] = None
    guests: Optional[int] = None
    categories: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    raw_query: str = ""


class SearchSuggestionOut(BaseModel):
    type: str
    title: str
    description: str
    items: List[str] = Field(default_factory=list)
    savings: Optional[int] = None


class SearchIntentResponse(BaseModel):
    intent: SearchIntentOut
    bundle_discount: int
    suggestions: List[SearchSuggestionOut]
    results: List[SearchResultIn]
    total_results: int


# ============================================
# Price Comparison
# ============================================

class CompetitorPriceIn(BaseModel):
    provider: str
    price: float = Field(..., ge=0)
    currency: str = "TRY"
    url: Optional[str] = None
    rating: Optional[float] = None


class PriceComparisonRequest(BaseModel):
    our_price: float = Field(..., ge=0)
    competitors: List[CompetitorPriceIn] = Field(default_factory=list)
    product_id: Optional[str] = None


class PriceComparisonResponse(BaseModel):
    product_id: Optional[str] = None
    our_price: float
    average_competitor_price: float
    savings: float
    savings_percent: int
    is_best_price: bool
    suggested_price: Optional[int] = None
    cheapest_provider: Optional[str] = None
    competitors: List[CompetitorPriceIn] = Field(default_factory=list)


class TrackProductRequest(BaseModel):
    our_price: float = Field(..., ge=0)


# ============================================
# Health
# ============================================

class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    environment: str
    price_bot_running: bool
    timestamp: str
