import pytest

from travel_pricing.algorithms.price_comparison import CompetitorPrice, compare_prices


def offers(*prices):
    return [CompetitorPrice(f"provider-{i}", price) for i, price in enumerate(prices)]


def test_undercut_by_competitor_suggests_match_price():
    result = compare_prices(1000, offers(1300, 900))

    assert [c.price for c in result.competitors] == [900, 1300]
    assert result.cheapest.provider == "provider-1"
    assert result.average_competitor_price == 1100
    assert result.savings == 100
    assert result.savings_percent == 9
    assert result.is_best_price is False
    assert result.suggested_price == 891
    assert result.needs_price_match is True


def test_best_price_needs_no_match():
    result = compare_prices(800, offers(900, 1000))

    assert result.is_best_price is True
    assert result.savings == 150
    assert result.savings_percent == 16
    assert result.suggested_price is None
    assert result.needs_price_match is False


def test_suggested_price_bounded_by_max_match_discount():
    result = compare_prices(1000, offers(500))

    assert result.suggested_price == 850
    assert result.savings_percent == -100


def test_custom_undercut_and_bound():
    result = compare_prices(1000, offers(950), undercut_percent=0, max_match_discount_percent=2)

    assert result.suggested_price == 980


def test_matching_the_cheapest_counts_as_best_price():
    result = compare_prices(900, offers(900, 950))

    assert result.is_best_price is True
    assert result.suggested_price is None


def test_no_competitors():
    result = compare_prices(1200, [], product_id="hotel-42")

    assert result.competitors == []
    assert result.cheapest is None
    assert result.average_competitor_price == 1200
    assert result.savings == 0
    assert result.savings_percent == 0
    assert result.is_best_price is True
    assert result.product_id == "hotel-42"


def test_to_dict_names_cheapest_provider():
    data = compare_prices(1000, offers(1300, 900), product_id="tour-7").to_dict()

    assert data["product_id"] == "tour-7"
    assert data["cheapest_provider"] == "provider-1"
    assert [c["price"] for c in data["competitors"]] == [900, 1300]
    assert data["average_competitor_price"] == pytest.approx(1100)
