"""
Bundle Pricing Composer
Composes the discount policy evaluators into a single deterministic quote

Order of evaluation (the order of BundlePricing.discounts):
1. Bundle size    - always evaluated
2. Early booking  - needs booking_date and travel_date
3. Long stay      - needs nights and a hotel item in the cart
4. Seasonal       - needs travel_date and location
5. Loyalty tier   - needs user_miles > 0

Discounts stack without a cap; only the final total is floored at zero.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from loguru import logger

from .discount_rules import (
    DateLike,
    DiscountCandidate,
    DiscountRule,
    evaluate_bundle_size,
    evaluate_early_booking,
    evaluate_long_stay,
    evaluate_loyalty_tier,
    evaluate_seasonal,
)
from ..utils.formatting import js_round


class ServiceCategory(str, Enum):
    HOTEL = "hotel"
    CAR = "car"
    FLIGHT = "flight"
    TOUR = "tour"
    TRANSFER = "transfer"


@dataclass
class BundleItem:
    """One line in the cart"""
    category: str
    name: str
    base_price: float  # per night/day/instance
    quantity: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.category, ServiceCategory):
            self.category = self.category.value

    @property
    def line_total(self) -> float:
        return self.base_price * (self.quantity or 1)


@dataclass
class PricingContext:
    """Optional side inputs; each one enables the rule that needs it"""
    booking_date: Optional[DateLike] = None
    travel_date: Optional[DateLike] = None
    nights: Optional[int] = None
    location: Optional[str] = None
    user_miles: Optional[int] = None


@dataclass(frozen=True)
class Discount:
    """One applied promotional reduction"""
    rule: DiscountRule
    percentage: int
    amount: int
    reason: str  # message key
    badge: str  # message key
    params: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule": self.rule.value,
            "percentage": self.percentage,
            "amount": self.amount,
            "reason": self.reason,
            "badge": self.badge,
            "params": dict(self.params),
        }


@dataclass
class BundlePricing:
    """Final quote returned by compute_bundle_pricing"""
    items: List[BundleItem]
    subtotal: float
    discounts: List[Discount]
    total_discount: float
    final_total: float
    savings_percentage: int
    loyalty_miles_earned: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [
                {
                    "category": item.category,
                    "name": item.name,
                    "base_price": item.base_price,
                    "quantity": item.quantity,
                }
                for item in self.items
            ],
            "subtotal": self.subtotal,
            "discounts": [d.to_dict() for d in self.discounts],
            "total_discount": self.total_discount,
            "final_total": self.final_total,
            "savings_percentage": self.savings_percentage,
            "loyalty_miles_earned": self.loyalty_miles_earned,
        }


def compute_bundle_pricing(
    items: List[BundleItem],
    context: Optional[PricingContext] = None
) -> BundlePricing:
    """
    Compute the bundle quote for a cart

    Args:
        items: Cart lines; may be empty
        context: Optional side inputs (dates, nights, location, miles)

    Returns:
        BundlePricing: Quote with discounts in evaluation order

    Example:
        >>> quote = compute_bundle_pricing(
        ...     [BundleItem("hotel", "Otel", 1000), BundleItem("transfer", "Transfer", 200)]
        ... )
        >>> quote.final_total
        1140
    """
    context = context or PricingContext()

    subtotal = sum(item.line_total for item in items)
    hotel_item = next((item for item in items if item.category == ServiceCategory.HOTEL.value), None)

    discounts: List[Discount] = []

    def apply(candidate: Optional[DiscountCandidate], base: float) -> None:
        if candidate is None:
            return
        discounts.append(Discount(
            rule=candidate.rule,
            percentage=candidate.percentage,
            amount=js_round(base * candidate.percentage / 100),
            reason=candidate.reason,
            badge=candidate.badge,
            params=dict(candidate.params or {}),
        ))

    apply(evaluate_bundle_size(item.category for item in items), subtotal)

    if context.booking_date is not None and context.travel_date is not None:
        apply(evaluate_early_booking(context.booking_date, context.travel_date), subtotal)

    if context.nights is not None and hotel_item is not None:
        apply(evaluate_long_stay(context.nights), hotel_item.line_total)

    if context.travel_date is not None and context.location:
        apply(evaluate_seasonal(context.travel_date, context.location), subtotal)

    if context.user_miles is not None and context.user_miles > 0:
        apply(evaluate_loyalty_tier(context.user_miles), subtotal)

    total_discount = sum(d.amount for d in discounts)
    final_total = max(0, subtotal - total_discount)
    savings_percentage = js_round(total_discount / subtotal * 100) if subtotal > 0 else 0

    quote = BundlePricing(
        items=items,
        subtotal=subtotal,
        discounts=discounts,
        total_discount=total_discount,
        final_total=final_total,
        savings_percentage=savings_percentage,
        loyalty_miles_earned=math.floor(final_total),
    )

    logger.debug(
        f"Bundle quote: subtotal={subtotal} discounts={[d.rule.value for d in discounts]} "
        f"total_discount={total_discount} final_total={final_total}"
    )

    return quote


# ============================================
# Convenience Function
# ============================================

def compute_bundle_pricing_from_dicts(
    items: List[Dict[str, Any]],
    context: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Convenience function to price a cart given as raw dicts

    Args:
        items: List of item dicts (category, name, base_price, quantity)
        context: Context dict with any of the PricingContext fields

    Returns:
        dict: Quote as a plain dict
    """
    item_objs = [BundleItem(**item) for item in items]
    context_obj = PricingContext(**context) if context else None
    return compute_bundle_pricing(item_objs, context_obj).to_dict()
