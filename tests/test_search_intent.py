import pytest

from travel_pricing.algorithms.search_intent import (
    SearchIntent,
    analyze_search_intent,
    calculate_bundle_discount,
    generate_search_suggestions,
    sort_results,
)


# ============================================
# Intent extraction
# ============================================

def test_turkish_query():
    intent = analyze_search_intent("Antalya'da 5 gece otel ve transfer 2 kişi")

    assert intent.location == "Antalya"
    assert intent.nights == 5
    assert intent.guests == 2
    assert intent.categories == ["hotel", "transfer"]
    assert intent.keywords == ["antalya'da", "gece", "otel", "transfer", "kişi"]
    assert intent.raw_query == "Antalya'da 5 gece otel ve transfer 2 kişi"


def test_english_query():
    intent = analyze_search_intent("Hotel and car rental in Bodrum for 3 nights, 2 guests")

    assert intent.location == "Bodrum"
    assert intent.nights == 3
    assert intent.guests == 2
    assert intent.categories == ["hotel", "car"]


def test_query_without_signals():
    intent = analyze_search_intent("merhaba")

    assert intent.location is None
    assert intent.nights is None
    assert intent.guests is None
    assert intent.categories == []


def test_first_listed_city_wins():
    intent = analyze_search_intent("bodrum veya antalya")

    assert intent.location == "Antalya"


# ============================================
# Bundle discount advertised in search
# ============================================

@pytest.mark.parametrize(
    "categories, expected",
    [
        ([], 0),
        (["hotel"], 0),
        (["hotel", "car"], 5),
        (["hotel", "car", "tour"], 10),
        (["hotel", "car", "tour", "flight"], 15),
        (["hotel", "car", "tour", "flight", "transfer"], 20),
        (["hotel", "hotel"], 5),
    ],
)
def test_calculate_bundle_discount(categories, expected):
    assert calculate_bundle_discount(categories) == expected


# ============================================
# Suggestions
# ============================================

def test_suggestions_in_display_order():
    intent = analyze_search_intent("Antalya'da 5 gece otel ve transfer 2 kişi")

    suggestions = generate_search_suggestions(intent, result_count=3, locale="tr")

    assert [s.type for s in suggestions] == ["bundle", "alternative", "upgrade"]

    bundle, alternative, upgrade = suggestions
    assert bundle.savings == 5
    assert bundle.description == "2 kategoriyi birlikte rezerve ederek %5 tasarruf edin."
    assert bundle.items == ["Otel konaklama", "Havaalanı transferi"]

    assert alternative.title == "Antalya Yerine Keşfedin"
    assert alternative.items == ["Kaş", "Kalkan", "Fethiye"]
    assert alternative.savings == 25

    assert upgrade.savings is None
    assert len(upgrade.items) == 5


def test_no_upgrade_without_results():
    intent = analyze_search_intent("Antalya'da 5 gece otel ve transfer 2 kişi")

    suggestions = generate_search_suggestions(intent, result_count=0, locale="tr")

    assert [s.type for s in suggestions] == ["bundle", "alternative"]


@pytest.mark.parametrize("query", ["istanbul otel", "İstanbul otel", "ISTANBUL otel"])
def test_istanbul_gets_alternatives_for_any_spelling(query):
    # Keyed by lower-case city, so the dotted "İstanbul" spelling also matches
    intent = analyze_search_intent(query)

    suggestions = generate_search_suggestions(intent, locale="en")

    assert intent.location == "Istanbul"
    assert [s.type for s in suggestions] == ["alternative"]
    assert suggestions[0].title == "Discover Instead of Istanbul"
    assert suggestions[0].items == ["Bursa", "İznik", "Polonezköy"]


def test_no_suggestions_for_empty_intent():
    assert generate_search_suggestions(SearchIntent(), result_count=0) == []


# ============================================
# Result ordering
# ============================================

def test_sort_results_by_category_priority_then_rating():
    results = [
        {"category": "flight", "title": "Uçuş", "rating": 5.0},
        {"category": "package", "title": "Paket", "rating": 4.0},
        {"category": "hotel", "title": "Otel B", "rating": 3.0},
        {"category": "unknown", "title": "Diğer"},
        {"category": "tour", "title": "Tur", "rating": None},
        {"category": "hotel", "title": "Otel A", "rating": 4.5},
    ]

    ordered = sort_results(results)

    assert [r["title"] for r in ordered] == ["Otel A", "Otel B", "Tur", "Uçuş", "Paket", "Diğer"]
