# api/__init__.py
"""
API Endpoints Package

Contains the FastAPI routers for the pricing service:
- pricing: Bundle quotes and recommendations
- search: Unified search intent and suggestions
- price_comparison: Competitor price checks
"""

from .pricing import router as pricing_router
from .search import router as search_router
from .price_comparison import router as price_comparison_router

__all__ = [
    "pricing_router",
    "search_router",
    "price_comparison_router",
]
