# api/search.py
"""
Unified Search API
Understands free-text searches across hotels, cars, flights, tours and
transfers, and returns bundle/alternative/upgrade suggestions.

POST /api/search/intent - Analyze a query and order supplied results
"""

from fastapi import APIRouter, HTTPException

from ..algorithms.search_intent import (
    analyze_search_intent,
    calculate_bundle_discount,
    generate_search_suggestions,
    sort_results,
)
from ..schemas.pricing_schemas import (
    SearchIntentOut,
    SearchIntentRequest,
    SearchIntentResponse,
    SearchResultIn,
    SearchSuggestionOut,
)
from ..utils.messages import resolve_locale


router = APIRouter(prefix="/api/search", tags=["search"])


@router.post("/intent", response_model=SearchIntentResponse)
async def search_intent(request: SearchIntentRequest):
    """Extract the search intent and build suggestions"""
    if not request.query.strip():
        raise HTTPException(status_code=400, detail="Query is required")

    intent = analyze_search_intent(request.query)
    locale = resolve_locale(request.locale)

    ordered = sort_results([r.model_dump() for r in request.results])
    suggestions = generate_search_suggestions(intent, len(ordered), locale)

    return SearchIntentResponse(
        intent=SearchIntentOut(**intent.to_dict()),
        bundle_discount=calculate_bundle_discount(intent.categories),
        suggestions=[SearchSuggestionOut(**s.to_dict()) for s in suggestions],
        results=[SearchResultIn(**r) for r in ordered],
        total_results=len(ordered),
    )
