"""
Unified Search Intent Analyzer
Extracts structured data from free-text travel searches:
- Destination (Turkish cities)
- Nights and guests
- Service categories (hotel, car, flight, tour, transfer)
Builds bundle / alternative / upgrade suggestions for the result page.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger

from ..utils.messages import resolve_message


@dataclass
class SearchIntent:
    """Structured intent extracted from a search query"""
    location: Optional[str] = None
    nights: Optional[int] = None
    guests: Optional[int] = None
    categories: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    raw_query: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location,
            "nights": self.nights,
            "guests": self.guests,
            "categories": self.categories,
            "keywords": self.keywords,
            "raw_query": self.raw_query,
        }


@dataclass
class SearchSuggestion:
    """Suggestion card shown next to search results"""
    type: str  # bundle | alternative | upgrade
    title: str
    description: str
    items: List[str] = field(default_factory=list)
    savings: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "items": self.items,
            "savings": self.savings,
        }


class SearchIntentAnalyzer:
    """
    Rule-based analyzer for unified search queries.
    Matching is substring based on the lower-cased query.
    """

    def __init__(self):
        # First match wins, in list order
        self.cities = [
            "istanbul", "ankara", "izmir", "antalya", "bodrum", "kapadokya",
            "pamukkale", "fethiye", "marmaris", "kuşadası", "çeşme", "alaçatı",
            "kaş", "kalkan", "didim", "dalaman", "muğla", "aydın", "denizli",
            "konya", "trabzon", "samsun", "adana", "gaziantep", "şanlıurfa",
        ]

        self.category_keywords = {
            "hotel": ["otel", "hotel", "konaklama", "konakla", "kal"],
            "car": ["araç", "car", "araba", "kiralama", "rent"],
            "flight": ["uçuş", "flight", "uçak", "uç"],
            "tour": ["tur", "tour", "gezi", "aktivite", "activity"],
            "transfer": ["transfer", "havaalanı", "airport", "karşılama", "pickup"],
        }

        self.nights_pattern = re.compile(r"(\d+)\s*(gece|night|gün)")
        self.guests_pattern = re.compile(r"(\d+)\s*(kişi|person|guest)")

        # Cheaper nearby alternatives, keyed by lower-case city
        self.alternative_destinations = {
            "antalya": ["Kaş", "Kalkan", "Fethiye"],
            "istanbul": ["Bursa", "İznik", "Polonezköy"],
            "bodrum": ["Marmaris", "Datça", "Akyaka"],
            "kapadokya": ["Konya", "Aksaray", "Kayseri"],
        }
        self.alternative_savings = 25

        # hotel > tour > car > transfer > flight > package
        self.category_priority = {
            "hotel": 1, "tour": 2, "car": 3, "transfer": 4, "flight": 5, "package": 6,
        }

    def analyze(self, query: str) -> SearchIntent:
        """
        Analyze a free-text search query

        Args:
            query: User's search text (Turkish or English)

        Returns:
            SearchIntent with extracted data
        """
        # str.lower() turns "İ" into "i" plus a combining dot
        query_lower = query.replace("İ", "i").lower()

        intent = SearchIntent(raw_query=query)
        intent.location = self._extract_location(query_lower)
        intent.nights = self._extract_number(self.nights_pattern, query_lower)
        intent.guests = self._extract_number(self.guests_pattern, query_lower)
        intent.categories = self._extract_categories(query_lower)
        intent.keywords = [word for word in query_lower.split() if len(word) > 2]

        logger.info(
            f"Search intent: location={intent.location}, nights={intent.nights}, "
            f"guests={intent.guests}, categories={intent.categories}"
        )

        return intent

    def suggestions(
        self,
        intent: SearchIntent,
        result_count: int,
        locale: Optional[str] = None
    ) -> List[SearchSuggestion]:
        """Build bundle, alternative and upgrade suggestions for an intent"""
        suggestions = []

        if len(intent.categories) >= 2:
            discount = calculate_bundle_discount(intent.categories)
            suggestions.append(SearchSuggestion(
                type="bundle",
                title=resolve_message("search.bundle.title", locale),
                description=resolve_message(
                    "search.bundle.description", locale,
                    count=len(intent.categories), discount=discount,
                ),
                savings=discount,
                items=[
                    resolve_message(f"category.{category}", locale)
                    for category in self.category_keywords
                    if category in intent.categories
                ],
            ))

        if intent.location:
            alternatives = self.alternative_destinations.get(intent.location.lower())
            if alternatives:
                suggestions.append(SearchSuggestion(
                    type="alternative",
                    title=resolve_message("search.alternative.title", locale, location=intent.location),
                    description=resolve_message("search.alternative.description", locale),
                    savings=self.alternative_savings,
                    items=list(alternatives),
                ))

        if result_count > 0:
            suggestions.append(SearchSuggestion(
                type="upgrade",
                title=resolve_message("search.upgrade.title", locale),
                description=resolve_message("search.upgrade.description", locale),
                items=[
                    resolve_message(f"search.upgrade.{category}", locale)
                    for category in self.category_keywords
                ],
            ))

        return suggestions

    def sort_results(self, results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Order results by category priority, then by rating (highest first)"""
        return sorted(
            results,
            key=lambda r: (
                self.category_priority.get(r.get("category"), len(self.category_priority) + 1),
                -(r.get("rating") or 0),
            ),
        )

    def _extract_location(self, query: str) -> Optional[str]:
        for city in self.cities:
            if city in query:
                return city[0].upper() + city[1:]
        return None

    def _extract_number(self, pattern: re.Pattern, query: str) -> Optional[int]:
        match = pattern.search(query)
        if match:
            return int(match.group(1))
        return None

    def _extract_categories(self, query: str) -> List[str]:
        return [
            category
            for category, keywords in self.category_keywords.items()
            if any(keyword in query for keyword in keywords)
        ]


def calculate_bundle_discount(categories: List[str]) -> int:
    """
    Bundle discount percentage advertised for a category list

    Counts list entries as given (no de-duplication).
    """
    count = len(categories)

    if count >= 5:
        return 20
    elif count >= 4:
        return 15
    elif count >= 3:
        return 10
    elif count >= 2:
        return 5
    return 0


# ============================================
# Global Instance
# ============================================

search_intent_analyzer = SearchIntentAnalyzer()


# ============================================
# Convenience Functions
# ============================================

def analyze_search_intent(query: str) -> SearchIntent:
    return search_intent_analyzer.analyze(query)


def generate_search_suggestions(
    intent: SearchIntent,
    result_count: int = 0,
    locale: Optional[str] = None
) -> List[SearchSuggestion]:
    return search_intent_analyzer.suggestions(intent, result_count, locale)


def sort_results(results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return search_intent_analyzer.sort_results(results)
