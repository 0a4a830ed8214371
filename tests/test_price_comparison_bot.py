import asyncio

import pytest

from travel_pricing.agents.price_comparison_bot import PriceComparisonBot, StaticPriceSource
from travel_pricing.algorithms.price_comparison import CompetitorPrice


@pytest.fixture
def source():
    return StaticPriceSource({
        "hotel-1": [CompetitorPrice("Rakip A", 900), CompetitorPrice("Rakip B", 1300)],
        "tour-2": [CompetitorPrice("Rakip A", 700)],
    })


@pytest.fixture
def bot(source):
    bot = PriceComparisonBot(source, interval_seconds=0.01)
    bot.track("hotel-1", 1000)
    bot.track("tour-2", 500)
    return bot


def test_new_bot_is_idle(source):
    bot = PriceComparisonBot(source)

    assert bot.running is False
    assert bot.last_run_at is None
    assert bot.tracked_products == {}


def test_static_source_reports_whether_it_has_prices(source):
    assert source.has_prices is True
    assert StaticPriceSource().has_prices is False
    assert StaticPriceSource({"hotel-1": []}).has_prices is False


@pytest.mark.anyio
async def test_run_once_stores_comparisons_and_notifies(bot):
    matched = []
    awaited = []

    async def async_listener(comparison):
        awaited.append(comparison.product_id)

    bot.add_listener(lambda comparison: matched.append(comparison.product_id))
    bot.add_listener(async_listener)

    results = await bot.run_once()

    assert len(results) == 2
    assert bot.latest("hotel-1").suggested_price == 891
    assert bot.latest("tour-2").is_best_price is True
    assert matched == ["hotel-1"]
    assert awaited == ["hotel-1"]
    assert bot.last_run_at is not None


@pytest.mark.anyio
async def test_failing_listener_does_not_stop_the_run(bot):
    def broken(comparison):
        raise RuntimeError("listener down")

    bot.add_listener(broken)

    results = await bot.run_once()

    assert len(results) == 2


@pytest.mark.anyio
async def test_source_failure_skips_product(source):
    async def flaky(product_id):
        if product_id == "hotel-1":
            raise ConnectionError("feed unavailable")
        return await source(product_id)

    bot = PriceComparisonBot(flaky)
    bot.track("hotel-1", 1000)
    bot.track("tour-2", 500)

    results = await bot.run_once()

    assert [r.product_id for r in results] == ["tour-2"]
    assert bot.latest("hotel-1") is None


@pytest.mark.anyio
async def test_untrack_clears_latest(bot):
    await bot.run_once()

    bot.untrack("hotel-1")

    assert bot.latest("hotel-1") is None
    assert "hotel-1" not in bot.tracked_products


@pytest.mark.anyio
async def test_start_runs_periodically_until_stopped(bot):
    await bot.start()
    try:
        assert bot.running is True
        for _ in range(100):
            if bot.latest("hotel-1") is not None:
                break
            await asyncio.sleep(0.01)
        assert bot.latest("hotel-1") is not None
    finally:
        await bot.stop()

    assert bot.running is False
    assert bot._task is None


@pytest.mark.anyio
async def test_start_is_idempotent(bot):
    await bot.start()
    task = bot._task
    try:
        await bot.start()
        assert bot._task is task
    finally:
        await bot.stop()


@pytest.mark.anyio
async def test_stop_without_start(bot):
    await bot.stop()

    assert bot.running is False
