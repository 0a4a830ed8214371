"""
Message Catalog
Resolves the message keys carried by discounts, recommendations and
search suggestions into display text.

The pricing core only deals in keys and parameters; text lives here.
"""

from typing import Any, Dict, Optional
from loguru import logger

from ..config import settings


FALLBACK_LOCALE = "tr"

MESSAGES: Dict[str, Dict[str, str]] = {
    "tr": {
        # Discounts
        "discount.bundle.reason": "{count} kategori birlikte rezerve edildi",
        "discount.bundle.badge": "Paket İndirimi",
        "discount.early_booking.reason": "{days} gün önceden rezervasyon",
        "discount.early_booking.badge": "Erken Rezervasyon",
        "discount.long_stay.reason": "{nights} gecelik uzun konaklama",
        "discount.long_stay.badge": "Uzun Konaklama",
        "discount.seasonal.low.reason": "{location} için düşük sezon indirimi",
        "discount.seasonal.mid.reason": "{location} için ara sezon indirimi",
        "discount.seasonal.badge": "Sezon Fırsatı",
        "discount.loyalty.reason": "{miles} mil sadakat bakiyesi",
        "discount.loyalty.gold.badge": "Altın Üye",
        "discount.loyalty.silver.badge": "Gümüş Üye",
        "discount.loyalty.bronze.badge": "Bronz Üye",
        # Recommendations
        "recommendation.next_tier": "Bir kategori daha ekleyin, %{percentage} paket indirimi kazanın!",
        # Search suggestions
        "search.bundle.title": "Paket Rezervasyon Yapın, Kazanın!",
        "search.bundle.description": "{count} kategoriyi birlikte rezerve ederek %{discount} tasarruf edin.",
        "search.alternative.title": "{location} Yerine Keşfedin",
        "search.alternative.description": "Daha uygun fiyatlarla benzer deneyimler",
        "search.upgrade.title": "VIP Deneyim Paketi",
        "search.upgrade.description": "Premium araç, lüks otel ve özel turlarla unutulmaz bir tatil",
        "search.upgrade.hotel": "5 yıldızlı butik otel",
        "search.upgrade.car": "Premium araç",
        "search.upgrade.flight": "Business class uçak bileti",
        "search.upgrade.tour": "Özel rehberli turlar",
        "search.upgrade.transfer": "VIP karşılama ve transfer",
        # Categories
        "category.hotel": "Otel konaklama",
        "category.car": "Araç kiralama",
        "category.flight": "Uçak bileti",
        "category.tour": "Tur ve aktiviteler",
        "category.transfer": "Havaalanı transferi",
    },
    "en": {
        "discount.bundle.reason": "{count} categories booked together",
        "discount.bundle.badge": "Bundle Deal",
        "discount.early_booking.reason": "Booked {days} days in advance",
        "discount.early_booking.badge": "Early Bird",
        "discount.long_stay.reason": "{nights}-night long stay",
        "discount.long_stay.badge": "Long Stay",
        "discount.seasonal.low.reason": "Low season discount for {location}",
        "discount.seasonal.mid.reason": "Mid season discount for {location}",
        "discount.seasonal.badge": "Seasonal Deal",
        "discount.loyalty.reason": "{miles} miles loyalty balance",
        "discount.loyalty.gold.badge": "Gold Member",
        "discount.loyalty.silver.badge": "Silver Member",
        "discount.loyalty.bronze.badge": "Bronze Member",
        "recommendation.next_tier": "Add one more category to unlock a {percentage}% bundle discount!",
        "search.bundle.title": "Book a Package and Save!",
        "search.bundle.description": "Save {discount}% by booking {count} categories together.",
        "search.alternative.title": "Discover Instead of {location}",
        "search.alternative.description": "Similar experiences at better prices",
        "search.upgrade.title": "VIP Experience Package",
        "search.upgrade.description": "An unforgettable holiday with a premium car, luxury hotel and private tours",
        "search.upgrade.hotel": "5-star boutique hotel",
        "search.upgrade.car": "Premium car",
        "search.upgrade.flight": "Business class flight",
        "search.upgrade.tour": "Private guided tours",
        "search.upgrade.transfer": "VIP meet and greet transfer",
        "category.hotel": "Hotel stay",
        "category.car": "Car rental",
        "category.flight": "Flight ticket",
        "category.tour": "Tours and activities",
        "category.transfer": "Airport transfer",
    },
}


def supported_locales() -> list:
    return sorted(MESSAGES.keys())


def resolve_locale(locale: Optional[str] = None) -> str:
    """Pick a supported locale, falling back to the configured default"""
    for candidate in (locale, settings.DEFAULT_LOCALE):
        if candidate and candidate.lower() in MESSAGES:
            return candidate.lower()
    return FALLBACK_LOCALE


def resolve_message(key: str, locale: Optional[str] = None, **params: Any) -> str:
    """
    Resolve a message key into display text

    Args:
        key: Message key (e.g., "discount.bundle.reason")
        locale: Locale code; unsupported locales fall back to the default
        **params: Interpolation values for the template

    Returns:
        str: Resolved text, or the key itself when no template exists
    """
    catalog = MESSAGES[resolve_locale(locale)]
    template = catalog.get(key) or MESSAGES[FALLBACK_LOCALE].get(key)

    if template is None:
        logger.warning(f"No message template for key: {key}")
        return key

    return template.format(**params)


def localize_discount(discount: Any, locale: Optional[str] = None) -> Dict[str, str]:
    """Resolve a discount's reason and badge keys"""
    return {
        "reason": resolve_message(discount.reason, locale, **discount.params),
        "badge": resolve_message(discount.badge, locale, **discount.params),
    }
