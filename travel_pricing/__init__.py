"""
Travel Pricing Service Package

Pricing core for a multi-vertical travel booking platform:
- Bundle pricing with stacked discount rules
- Next-tier bundle recommendations
- Unified search intent analysis
- Competitor price comparison (with a background bot)
"""

__version__ = "1.0.0"

# Package structure:
# travel_pricing/
# ├── __init__.py           <- This file
# ├── main.py               <- FastAPI application entry
# ├── config.py             <- Configuration settings
# │
# ├── algorithms/           <- Pure pricing logic
# │   ├── discount_rules.py     <- Five discount policy evaluators
# │   ├── bundle_pricing.py     <- Quote composer
# │   ├── recommendation.py     <- Next bundle tier advisor
# │   ├── price_comparison.py   <- Competitor price matching
# │   └── search_intent.py      <- Unified search intent analyzer
# │
# ├── agents/               <- Background workers
# │   └── price_comparison_bot.py
# │
# ├── api/                  <- FastAPI Routers
# │   ├── pricing.py            <- /api/pricing
# │   ├── search.py             <- /api/search
# │   └── price_comparison.py   <- /api/price-comparison
# │
# ├── schemas/              <- Pydantic Models
# │   └── pricing_schemas.py
# │
# └── utils/                <- Formatting and message catalog
#     ├── formatting.py
#     └── messages.py
