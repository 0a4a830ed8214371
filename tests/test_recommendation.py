import pytest

from travel_pricing.algorithms.recommendation import get_bundle_recommendation, next_bundle_tier


@pytest.mark.parametrize(
    "categories, percentage",
    [
        (["hotel"], 5),
        (["hotel", "car"], 10),
        (["hotel", "car", "flight"], 15),
        (["hotel", "car", "flight", "tour"], 20),
    ],
)
def test_recommends_next_tier_in_turkish(categories, percentage):
    message = get_bundle_recommendation(categories, locale="tr")

    assert message == f"Bir kategori daha ekleyin, %{percentage} paket indirimi kazanın!"


@pytest.mark.parametrize(
    "categories",
    [
        [],
        ["hotel", "car", "flight", "tour", "transfer"],
        ["hotel", "car", "flight", "tour", "transfer", "hotel"],
    ],
)
def test_no_recommendation_outside_tier_ladder(categories):
    assert get_bundle_recommendation(categories, locale="tr") is None


def test_duplicates_count_toward_category_length():
    assert get_bundle_recommendation(["hotel", "hotel"], locale="tr") == (
        "Bir kategori daha ekleyin, %10 paket indirimi kazanın!"
    )


def test_english_recommendation():
    message = get_bundle_recommendation(["hotel"], locale="en")

    assert "5%" in message
    assert message.startswith("Add one more category")


def test_unknown_locale_falls_back_to_default():
    assert get_bundle_recommendation(["hotel"], locale="de") == (
        "Bir kategori daha ekleyin, %5 paket indirimi kazanın!"
    )


def test_next_bundle_tier():
    assert [next_bundle_tier(n) for n in range(0, 6)] == [None, 5, 10, 15, 20, None]
