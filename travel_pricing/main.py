"""
Travel Pricing Service - FastAPI Application
Bundle quotes, unified search suggestions and competitor price checks.

The lifespan handler is the composition root: it builds the price
comparison bot, starts it when enabled and stops it on shutdown.
"""

import sys
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from . import __version__
from .agents.price_comparison_bot import PriceComparisonBot, StaticPriceSource
from .api import pricing_router, price_comparison_router, search_router
from .config import settings
from .schemas.pricing_schemas import HealthResponse
from .utils.messages import supported_locales


# Configure logging
logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())


# ============================================
# Application Lifespan
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    logger.info("=" * 50)
    logger.info("Starting Travel Pricing Service")
    logger.info("=" * 50)
    logger.info(f"Environment: {settings.API_ENV}")
    logger.info(f"Locale: {settings.DEFAULT_LOCALE}, currency: {settings.CURRENCY}")

    price_source = StaticPriceSource()
    price_bot = PriceComparisonBot(
        price_source=price_source,
        interval_seconds=settings.PRICE_BOT_INTERVAL_SECONDS,
        undercut_percent=settings.PRICE_MATCH_UNDERCUT_PERCENT,
        max_match_discount_percent=settings.PRICE_MATCH_MAX_DISCOUNT_PERCENT,
    )
    app.state.price_bot = price_bot

    if settings.PRICE_BOT_ENABLED:
        if not price_source.has_prices:
            logger.warning(
                "Price comparison bot enabled without a competitor price feed; "
                "tracked products will report best price until prices are loaded"
            )
        await price_bot.start()
    else:
        logger.info("Price comparison bot disabled (PRICE_BOT_ENABLED=false)")

    yield

    await price_bot.stop()
    app.state.price_bot = None
    logger.info("Travel Pricing Service shutdown complete")


# ============================================
# FastAPI Application
# ============================================

app = FastAPI(
    title="Travel Pricing Service",
    description="Bundle pricing with stacked discounts, search intent analysis and competitor price checks.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pricing_router)
app.include_router(search_router)
app.include_router(price_comparison_router)


# ============================================
# REST Endpoints
# ============================================

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Travel Pricing Service",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
        "locales": supported_locales(),
        "endpoints": [
            "/api/health",
            "/api/pricing/bundle",
            "/api/pricing/recommendation",
            "/api/search/intent",
            "/api/price-comparison",
        ]
    }


@app.get("/api/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Service health"""
    price_bot = getattr(request.app.state, "price_bot", None)
    return HealthResponse(
        status="healthy",
        service="travel-pricing",
        version=__version__,
        environment=settings.API_ENV,
        price_bot_running=bool(price_bot and price_bot.running),
        timestamp=datetime.now().isoformat(),
    )


# ============================================
# Main
# ============================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "travel_pricing.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_ENV == "development"
    )
