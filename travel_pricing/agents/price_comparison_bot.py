# agents/price_comparison_bot.py
"""
Price Comparison Bot
Periodically compares tracked products against competitor prices:
1. Fetch competitor offers from the price source
2. Compare with our price
3. Store the latest comparison
4. Notify listeners when a price match is suggested

The bot is constructed and started by the application's lifespan handler;
importing this module has no side effects.
"""

import asyncio
import inspect
from datetime import datetime, timezone
from typing import Awaitable, Callable, Dict, List, Optional, Union

from loguru import logger

from ..algorithms.price_comparison import CompetitorPrice, PriceComparison, compare_prices


PriceSource = Callable[[str], Awaitable[List[CompetitorPrice]]]
PriceMatchListener = Callable[[PriceComparison], Union[None, Awaitable[None]]]


class StaticPriceSource:
    """
    In-memory competitor price feed.
    Used when no external feed is configured, and in tests.
    """

    def __init__(self, prices: Optional[Dict[str, List[CompetitorPrice]]] = None):
        self._prices: Dict[str, List[CompetitorPrice]] = dict(prices or {})

    def set_prices(self, product_id: str, prices: List[CompetitorPrice]):
        self._prices[product_id] = list(prices)

    @property
    def has_prices(self) -> bool:
        return any(self._prices.values())

    async def __call__(self, product_id: str) -> List[CompetitorPrice]:
        return list(self._prices.get(product_id, []))


class PriceComparisonBot:
    """
    Background checker for competitor prices.
    Lifecycle is explicit: start() and stop() are called by the owner.
    """

    def __init__(
        self,
        price_source: PriceSource,
        interval_seconds: float = 3600,
        undercut_percent: float = 1.0,
        max_match_discount_percent: float = 15.0
    ):
        self.price_source = price_source
        self.interval_seconds = interval_seconds
        self.undercut_percent = undercut_percent
        self.max_match_discount_percent = max_match_discount_percent

        self.running = False
        self.last_run_at: Optional[datetime] = None
        self._task: Optional[asyncio.Task] = None
        self._tracked: Dict[str, float] = {}
        self._latest: Dict[str, PriceComparison] = {}
        self._listeners: List[PriceMatchListener] = []

    # ============================================
    # Tracking
    # ============================================

    def track(self, product_id: str, our_price: float):
        """Track a product at our current selling price"""
        self._tracked[product_id] = our_price
        logger.debug(f"Tracking {product_id} at {our_price}")

    def untrack(self, product_id: str):
        self._tracked.pop(product_id, None)
        self._latest.pop(product_id, None)

    @property
    def tracked_products(self) -> Dict[str, float]:
        return dict(self._tracked)

    def latest(self, product_id: str) -> Optional[PriceComparison]:
        """Most recent comparison for a product, if any"""
        return self._latest.get(product_id)

    def add_listener(self, listener: PriceMatchListener):
        """Register a callback for products that need a price match"""
        self._listeners.append(listener)

    # ============================================
    # Lifecycle
    # ============================================

    async def start(self):
        """Start the periodic check loop"""
        if self.running:
            logger.warning("Price comparison bot already running")
            return

        self.running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info(f"Price comparison bot started (interval={self.interval_seconds}s)")

    async def stop(self):
        """Stop the loop and wait for it to finish"""
        self.running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info("Price comparison bot stopped")

    async def _run_loop(self):
        while self.running:
            try:
                await self.run_once()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Error in price comparison loop: {e}")

            try:
                await asyncio.sleep(self.interval_seconds)
            except asyncio.CancelledError:
                break

    # ============================================
    # Checking
    # ============================================

    async def run_once(self) -> List[PriceComparison]:
        """
        Compare every tracked product once

        Returns:
            List[PriceComparison]: Comparisons that succeeded this run
        """
        results = []

        for product_id, our_price in list(self._tracked.items()):
            try:
                competitors = await self.price_source(product_id)
            except Exception as e:
                logger.error(f"Price source failed for {product_id}: {e}")
                continue

            comparison = compare_prices(
                our_price,
                competitors,
                undercut_percent=self.undercut_percent,
                max_match_discount_percent=self.max_match_discount_percent,
                product_id=product_id,
            )
            self._latest[product_id] = comparison
            results.append(comparison)

            if comparison.needs_price_match:
                logger.info(
                    f"Price match suggested for {product_id}: "
                    f"{our_price} -> {comparison.suggested_price} "
                    f"(cheapest: {comparison.cheapest.provider})"
                )
                await self._notify(comparison)

        self.last_run_at = datetime.now(timezone.utc)
        logger.debug(f"Price comparison run complete: {len(results)}/{len(self._tracked)} products")

        return results

    async def _notify(self, comparison: PriceComparison):
        for listener in self._listeners:
            try:
                result = listener(comparison)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"Price match listener failed: {e}")
