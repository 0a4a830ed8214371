# api/price_comparison.py
"""
Price Comparison API
Implements the "best price guarantee" check against competitor offers.

POST /api/price-comparison - Compare a price with supplied competitor offers
POST /api/price-comparison/{product_id}/track - Track a product in the bot
GET  /api/price-comparison/{product_id} - Latest comparison from the bot
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger

from ..agents.price_comparison_bot import PriceComparisonBot
from ..algorithms.price_comparison import CompetitorPrice, compare_prices
from ..config import settings
from ..schemas.pricing_schemas import (
    PriceComparisonRequest,
    PriceComparisonResponse,
    TrackProductRequest,
)


router = APIRouter(prefix="/api/price-comparison", tags=["price-comparison"])


def get_price_bot(request: Request) -> PriceComparisonBot:
    """The bot owned by the application lifespan"""
    bot = getattr(request.app.state, "price_bot", None)
    if bot is None:
        raise HTTPException(status_code=503, detail="Price comparison bot is not configured")
    return bot


@router.post("", response_model=PriceComparisonResponse)
async def compare(request: PriceComparisonRequest):
    """Compare our price with the given competitor offers"""
    comparison = compare_prices(
        request.our_price,
        [CompetitorPrice(**c.model_dump()) for c in request.competitors],
        undercut_percent=settings.PRICE_MATCH_UNDERCUT_PERCENT,
        max_match_discount_percent=settings.PRICE_MATCH_MAX_DISCOUNT_PERCENT,
        product_id=request.product_id,
    )
    return PriceComparisonResponse(**comparison.to_dict())


@router.post("/{product_id}/track")
async def track_product(
    product_id: str,
    request: TrackProductRequest,
    bot: PriceComparisonBot = Depends(get_price_bot)
):
    """Add a product to the bot's periodic checks"""
    bot.track(product_id, request.our_price)
    logger.info(f"Tracking {product_id} for competitor prices")
    return {"product_id": product_id, "our_price": request.our_price, "tracked": True}


@router.get("/{product_id}", response_model=PriceComparisonResponse)
async def latest_comparison(
    product_id: str,
    bot: PriceComparisonBot = Depends(get_price_bot)
):
    """Latest comparison computed by the bot"""
    comparison = bot.latest(product_id)
    if comparison is None:
        raise HTTPException(status_code=404, detail=f"No comparison for {product_id}")
    return PriceComparisonResponse(**comparison.to_dict())
