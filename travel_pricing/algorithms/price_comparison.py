"""
Competitor Price Comparison
Naive price-matching heuristic against external providers

1. Sort competitor offers by price
2. Compare our price with the competitor average
3. If a competitor undercuts us, suggest a matching price slightly below
   the cheapest offer, bounded by the maximum match discount
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from loguru import logger

from ..utils.formatting import js_round


@dataclass
class CompetitorPrice:
    """Price offered by an external provider"""
    provider: str
    price: float
    currency: str = "TRY"
    url: Optional[str] = None
    rating: Optional[float] = None


@dataclass
class PriceComparison:
    """Our price against the competitor field"""
    our_price: float
    competitors: List[CompetitorPrice]
    average_competitor_price: float
    savings: float
    savings_percent: int
    is_best_price: bool
    suggested_price: Optional[int] = None
    product_id: Optional[str] = None

    @property
    def cheapest(self) -> Optional[CompetitorPrice]:
        return self.competitors[0] if self.competitors else None

    @property
    def needs_price_match(self) -> bool:
        return self.suggested_price is not None

    def to_dict(self) -> Dict[str, Any]:
        cheapest = self.cheapest
        return {
            "product_id": self.product_id,
            "our_price": self.our_price,
            "average_competitor_price": self.average_competitor_price,
            "savings": self.savings,
            "savings_percent": self.savings_percent,
            "is_best_price": self.is_best_price,
            "suggested_price": self.suggested_price,
            "cheapest_provider": cheapest.provider if cheapest else None,
            "competitors": [
                {
                    "provider": c.provider,
                    "price": c.price,
                    "currency": c.currency,
                    "url": c.url,
                    "rating": c.rating,
                }
                for c in self.competitors
            ],
        }


def compare_prices(
    our_price: float,
    competitors: List[CompetitorPrice],
    undercut_percent: float = 1.0,
    max_match_discount_percent: float = 15.0,
    product_id: Optional[str] = None
) -> PriceComparison:
    """
    Compare our price with competitor offers

    Args:
        our_price: Our current selling price
        competitors: Competitor offers (any order)
        undercut_percent: How far below the cheapest offer to suggest
        max_match_discount_percent: Never suggest more than this below our price
        product_id: Optional identifier echoed in the result

    Returns:
        PriceComparison: Comparison with an optional suggested match price

    Example:
        >>> result = compare_prices(1000, [CompetitorPrice("A", 900), CompetitorPrice("B", 1300)])
        >>> result.savings_percent, result.suggested_price
        (9, 891)
    """
    ordered = sorted(competitors, key=lambda c: c.price)

    if not ordered:
        return PriceComparison(
            our_price=our_price,
            competitors=[],
            average_competitor_price=our_price,
            savings=0.0,
            savings_percent=0,
            is_best_price=True,
            product_id=product_id,
        )

    average = sum(c.price for c in ordered) / len(ordered)
    savings = average - our_price
    savings_percent = js_round(savings / average * 100) if average > 0 else 0

    cheapest = ordered[0]
    is_best_price = our_price <= cheapest.price

    suggested_price = None
    if not is_best_price:
        floor_price = our_price * (1 - max_match_discount_percent / 100)
        target = cheapest.price * (1 - undercut_percent / 100)
        suggested_price = js_round(max(target, floor_price))
        logger.debug(
            f"Price match for {product_id or 'product'}: {cheapest.provider} at {cheapest.price} "
            f"undercuts {our_price}, suggesting {suggested_price}"
        )

    return PriceComparison(
        our_price=our_price,
        competitors=ordered,
        average_competitor_price=round(average, 2),
        savings=round(savings, 2),
        savings_percent=savings_percent,
        is_best_price=is_best_price,
        suggested_price=suggested_price,
        product_id=product_id,
    )
