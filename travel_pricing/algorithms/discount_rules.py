"""
Discount Policy Evaluators
Independent promotional rules inspected by the bundle pricing composer

Rules:
1. Bundle size    - 2/3/4/5+ distinct categories: 5/10/15/20%
2. Early booking  - 30/60/90+ days lead time: 5/10/15%
3. Long stay      - 7/14/30+ hotel nights: 10/15/20% (hotel line only)
4. Seasonal       - low season 15%, mid season 10%, high season none
5. Loyalty tier   - 1000/5000/10000+ miles: 2/5/10%

Every evaluator returns a DiscountCandidate or None. Amounts are not
computed here; the composer applies the percentage to the rule's base.
Tier tables are evaluated highest-first and the first match wins.
"""

import math
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Dict, FrozenSet, Iterable, NamedTuple, Optional, Tuple, Union

from loguru import logger


DateLike = Union[date, datetime]

MS_PER_DAY = 86_400_000


class DiscountRule(str, Enum):
    BUNDLE = "bundle"
    EARLY_BOOKING = "early_booking"
    LONG_STAY = "long_stay"
    SEASONAL = "seasonal"
    LOYALTY = "loyalty"


class DiscountCandidate(NamedTuple):
    """
    An applicable rule before its amount is known
    """
    rule: DiscountRule
    percentage: int
    reason: str
    badge: str
    params: Optional[Dict[str, object]] = None


# ============================================
# Tier Tables
# ============================================

BUNDLE_SIZE_TIERS: Dict[int, int] = {2: 5, 3: 10, 4: 15, 5: 20}
MAX_BUNDLE_CATEGORIES = 5

EARLY_BOOKING_TIERS: Tuple[Tuple[int, int], ...] = (
    (90, 15),
    (60, 10),
    (30, 5),
)

LONG_STAY_TIERS: Tuple[Tuple[int, int], ...] = (
    (30, 20),
    (14, 15),
    (7, 10),
)

LOYALTY_TIERS: Tuple[Tuple[int, int, str], ...] = (
    (10_000, 10, "gold"),
    (5_000, 5, "silver"),
    (1_000, 2, "bronze"),
)

LOW_SEASON_PERCENTAGE = 15
MID_SEASON_PERCENTAGE = 10


# ============================================
# Season Profiles
# ============================================

class SeasonProfile(str, Enum):
    DEFAULT = "default"
    SKI = "ski"


class Season(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"


SEASON_MONTHS: Dict[SeasonProfile, Dict[Season, FrozenSet[int]]] = {
    SeasonProfile.DEFAULT: {
        Season.LOW: frozenset({1, 2, 3, 11, 12}),
        Season.MID: frozenset({4, 5, 9, 10}),
        Season.HIGH: frozenset({6, 7, 8}),
    },
    SeasonProfile.SKI: {
        Season.LOW: frozenset({4, 5, 6, 7, 8, 9, 10}),
        Season.MID: frozenset({3, 11}),
        Season.HIGH: frozenset({12, 1, 2}),
    },
}

# Destination name fragment -> season profile.
# Anything not listed uses SeasonProfile.DEFAULT.
DESTINATION_PROFILES: Dict[str, SeasonProfile] = {
    "uludağ": SeasonProfile.SKI,
    "erciyes": SeasonProfile.SKI,
    "palandöken": SeasonProfile.SKI,
    "kartepe": SeasonProfile.SKI,
}


def classify_destination(location: str) -> SeasonProfile:
    """
    Classify a free-text destination into a season profile

    Example:
        >>> classify_destination("Uludağ Kayak Merkezi")
        <SeasonProfile.SKI: 'ski'>
        >>> classify_destination("Antalya")
        <SeasonProfile.DEFAULT: 'default'>
    """
    name = location.lower()
    for fragment, profile in DESTINATION_PROFILES.items():
        if fragment in name:
            return profile
    return SeasonProfile.DEFAULT


def season_for(profile: SeasonProfile, month: int) -> Season:
    """Season a calendar month (1-12) falls into for a profile"""
    for season, months in SEASON_MONTHS[profile].items():
        if month in months:
            return season
    raise ValueError(f"Month out of range: {month}")


# ============================================
# Evaluators
# ============================================

def evaluate_bundle_size(categories: Iterable[str]) -> Optional[DiscountCandidate]:
    """
    Bundle-size rule over the distinct categories present in the cart

    Args:
        categories: Categories of the cart items (duplicates allowed)

    Returns:
        DiscountCandidate or None when fewer than 2 distinct categories
    """
    count = len(set(categories))
    if count < 2:
        return None

    percentage = BUNDLE_SIZE_TIERS[min(count, MAX_BUNDLE_CATEGORIES)]
    return DiscountCandidate(
        rule=DiscountRule.BUNDLE,
        percentage=percentage,
        reason="discount.bundle.reason",
        badge="discount.bundle.badge",
        params={"count": count},
    )


def lead_time_days(booking_date: DateLike, travel_date: DateLike) -> int:
    """
    Whole days between booking and travel, floored

    Both values are compared as UTC instants; naive values and plain
    dates (at midnight) are taken to be UTC.
    """
    delta = _as_datetime(travel_date) - _as_datetime(booking_date)
    milliseconds = delta.days * MS_PER_DAY + delta.seconds * 1000 + delta.microseconds // 1000
    return math.floor(milliseconds / MS_PER_DAY)


def evaluate_early_booking(
    booking_date: DateLike,
    travel_date: DateLike
) -> Optional[DiscountCandidate]:
    """
    Early-booking rule on the booking lead time

    Logic:
    - 90+ days: 15%
    - 60-89 days: 10%
    - 30-59 days: 5%
    - <30 days: no discount
    """
    days = lead_time_days(booking_date, travel_date)

    for min_days, percentage in EARLY_BOOKING_TIERS:
        if days >= min_days:
            return DiscountCandidate(
                rule=DiscountRule.EARLY_BOOKING,
                percentage=percentage,
                reason="discount.early_booking.reason",
                badge="discount.early_booking.badge",
                params={"days": days},
            )
    return None


def evaluate_long_stay(nights: int) -> Optional[DiscountCandidate]:
    """
    Long-stay rule on the number of hotel nights

    Logic:
    - 30+ nights: 20%
    - 14-29 nights: 15%
    - 7-13 nights: 10%
    - <7 nights: no discount
    """
    for min_nights, percentage in LONG_STAY_TIERS:
        if nights >= min_nights:
            return DiscountCandidate(
                rule=DiscountRule.LONG_STAY,
                percentage=percentage,
                reason="discount.long_stay.reason",
                badge="discount.long_stay.badge",
                params={"nights": nights},
            )
    return None


def evaluate_seasonal(travel_date: DateLike, location: str) -> Optional[DiscountCandidate]:
    """
    Seasonal rule on the travel month and the destination's season profile

    Returns:
        15% in low season, 10% in mid season, None in high season
    """
    profile = classify_destination(location)
    season = season_for(profile, _as_datetime(travel_date).month)

    logger.debug(f"Seasonal rule: location={location!r} profile={profile.value} season={season.value}")

    if season == Season.LOW:
        percentage = LOW_SEASON_PERCENTAGE
    elif season == Season.MID:
        percentage = MID_SEASON_PERCENTAGE
    else:
        return None

    return DiscountCandidate(
        rule=DiscountRule.SEASONAL,
        percentage=percentage,
        reason=f"discount.seasonal.{season.value}.reason",
        badge="discount.seasonal.badge",
        params={"location": location, "season": season.value, "profile": profile.value},
    )


def evaluate_loyalty_tier(user_miles: int) -> Optional[DiscountCandidate]:
    """
    Loyalty-tier rule on the user's cumulative mile balance

    Logic:
    - 10000+ miles: 10% (gold)
    - 5000-9999 miles: 5% (silver)
    - 1000-4999 miles: 2% (bronze)
    - <1000 miles: no discount
    """
    for min_miles, percentage, tier in LOYALTY_TIERS:
        if user_miles >= min_miles:
            return DiscountCandidate(
                rule=DiscountRule.LOYALTY,
                percentage=percentage,
                reason="discount.loyalty.reason",
                badge=f"discount.loyalty.{tier}.badge",
                params={"miles": user_miles, "tier": tier},
            )
    return None


def _as_datetime(value: DateLike) -> datetime:
    """Aware UTC datetime for a date, naive datetime or aware datetime"""
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
