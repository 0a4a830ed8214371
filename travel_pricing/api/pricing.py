# api/pricing.py
"""
/pricing HTTP API Endpoints
Bundle quotes and next-tier recommendations for the checkout/cart UI.

POST /api/pricing/bundle - Price a cart with all applicable discounts
POST /api/pricing/recommendation - Next bundle tier message
"""

from typing import List, Optional

from fastapi import APIRouter
from loguru import logger

from ..algorithms.bundle_pricing import BundleItem, BundlePricing, PricingContext, compute_bundle_pricing
from ..algorithms.recommendation import get_bundle_recommendation, next_bundle_tier
from ..schemas.pricing_schemas import (
    BundleItemIn,
    BundlePricingRequest,
    BundlePricingResponse,
    DiscountOut,
    RecommendationRequest,
    RecommendationResponse,
)
from ..utils.formatting import format_currency, format_percentage
from ..utils.messages import localize_discount, resolve_locale


router = APIRouter(prefix="/api/pricing", tags=["pricing"])


# ============================================
# Helper Functions
# ============================================

def build_pricing_response(
    quote: BundlePricing,
    items: List[BundleItemIn],
    locale: str,
    currency: Optional[str] = None
) -> BundlePricingResponse:
    """Render a quote with localized discount text and formatted totals"""
    discounts = []
    for discount in quote.discounts:
        text = localize_discount(discount, locale)
        discounts.append(DiscountOut(
            rule=discount.rule.value,
            percentage=discount.percentage,
            amount=discount.amount,
            reason=text["reason"],
            badge=text["badge"],
            reason_key=discount.reason,
            badge_key=discount.badge,
            formatted_amount=format_currency(discount.amount, currency),
            formatted_percentage=format_percentage(discount.percentage, locale),
        ))

    categories = list(dict.fromkeys(item.category for item in quote.items))

    return BundlePricingResponse(
        items=items,
        subtotal=quote.subtotal,
        discounts=discounts,
        total_discount=quote.total_discount,
        final_total=quote.final_total,
        savings_percentage=quote.savings_percentage,
        loyalty_miles_earned=quote.loyalty_miles_earned,
        formatted={
            "subtotal": format_currency(quote.subtotal, currency),
            "total_discount": format_currency(quote.total_discount, currency),
            "final_total": format_currency(quote.final_total, currency),
        },
        recommendation=get_bundle_recommendation(categories, locale),
        locale=locale,
    )


# ============================================
# Endpoints
# ============================================

@router.post("/bundle", response_model=BundlePricingResponse)
async def price_bundle(request: BundlePricingRequest):
    """
    Price a cart.

    Discounts are listed in evaluation order: bundle size, early booking,
    long stay, seasonal, loyalty.
    """
    items = [
        BundleItem(
            category=item.category.value,
            name=item.name,
            base_price=item.base_price,
            quantity=item.quantity,
        )
        for item in request.items
    ]
    context = PricingContext(**request.context.model_dump()) if request.context else None

    quote = compute_bundle_pricing(items, context)
    locale = resolve_locale(request.locale)

    logger.info(
        f"Bundle priced: {len(items)} items, subtotal={quote.subtotal}, "
        f"final_total={quote.final_total}, discounts={len(quote.discounts)}"
    )

    return build_pricing_response(quote, request.items, locale, request.currency)


@router.post("/recommendation", response_model=RecommendationResponse)
async def bundle_recommendation(request: RecommendationRequest):
    """Message for reaching the next bundle discount tier"""
    return RecommendationResponse(
        message=get_bundle_recommendation(request.categories, resolve_locale(request.locale)),
        next_tier_percentage=next_bundle_tier(len(request.categories)),
    )
