"""
Bundle Recommendation Advisor
Suggests adding one more category to reach the next bundle discount tier
"""

from typing import Dict, Optional, Sequence

from ..utils.messages import resolve_message


# Current category count -> bundle percentage reached by adding one more
NEXT_TIER_PERCENTAGES: Dict[int, int] = {1: 5, 2: 10, 3: 15, 4: 20}


def next_bundle_tier(category_count: int) -> Optional[int]:
    """Percentage unlocked by one more category, None past the top tier"""
    return NEXT_TIER_PERCENTAGES.get(category_count)


def get_bundle_recommendation(
    current_categories: Sequence[str],
    locale: Optional[str] = None
) -> Optional[str]:
    """
    Marketing message for the next bundle tier

    Only the length of current_categories matters; duplicates count.

    Args:
        current_categories: Categories currently in the cart
        locale: Message locale (default: settings.DEFAULT_LOCALE)

    Returns:
        str or None when the cart is empty or already at 5+ categories

    Example:
        >>> get_bundle_recommendation(["hotel"], locale="tr")
        'Bir kategori daha ekleyin, %5 paket indirimi kazanın!'
    """
    percentage = next_bundle_tier(len(current_categories))
    if percentage is None:
        return None
    return resolve_message("recommendation.next_tier", locale, percentage=percentage)
