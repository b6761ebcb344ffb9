from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query

from .catalog.categories import get_categories
from .listings.data_store import get_listed_categories, get_locations
from .search.category import infer_category
from .search.models import (
    CategoryDescriptor,
    CategorySuggestion,
    SearchRequest,
    SearchResponse,
)
from .search.service import search_services

logger = logging.getLogger(__name__)

app = FastAPI(title="Service Marketplace Search API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/categories", response_model=list[CategoryDescriptor])
def categories() -> list[CategoryDescriptor]:
    return get_categories()


@app.get("/metadata")
def metadata() -> dict:
    try:
        return {"locations": get_locations(), "categories": get_listed_categories()}
    except (OSError, ValueError):
        logger.exception("Listing store unavailable")
        raise HTTPException(status_code=503, detail="Listing store unavailable")


# ── Search endpoints ─────────────────────────────────────────────────────


@app.post("/search", response_model=SearchResponse)
def search(body: SearchRequest) -> SearchResponse:
    try:
        return search_services(body)
    except (OSError, ValueError):
        logger.exception("Search failed for query %r", body.query)
        raise HTTPException(status_code=503, detail="Listing store unavailable")


@app.get("/search/suggest-category", response_model=CategorySuggestion)
def suggest_category(q: str = Query(default="", max_length=500)) -> CategorySuggestion:
    return CategorySuggestion(query=q, category=infer_category(q, get_categories()))
