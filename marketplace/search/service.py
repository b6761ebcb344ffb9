from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from ..catalog.categories import get_categories
from ..listings.data_store import query_services
from ..llm.translator import translate
from .category import infer_category
from .models import CategoryDescriptor, SearchRequest, SearchResponse, SearchResultItem
from .predicate import build_filter_predicate, merge_tokens
from .ranking import score_candidates
from .text import tokenize

logger = logging.getLogger(__name__)


def search_tokens(query: str, inferred_category: str | None) -> list[str]:
    """Query tokens broadened with the tokens of the inferred category name."""
    base = tokenize(query)
    extra = tokenize(inferred_category) if inferred_category else []
    return merge_tokens(base, extra)


def search_services(
    request: SearchRequest,
    categories: Sequence[CategoryDescriptor] | None = None,
) -> SearchResponse:
    start_time = time.time()
    catalog = list(categories) if categories is not None else get_categories()

    # --- Translation (falls back to the raw text) ---
    term = translate(request.query)

    # --- Category inference & predicate ---
    inferred = infer_category(term, catalog) if term.strip() else None
    tokens = search_tokens(term, inferred)

    predicate = None
    if term.strip():
        # A query with no usable tokens is still matched as a whole
        predicate = build_filter_predicate(tokens if tokens else [term])

    # --- Store query with caller filters ---
    candidates = query_services(
        predicate,
        category=request.category,
        location=request.location,
        max_price=request.max_price,
        min_rating=request.min_rating,
    )

    # --- Ranking ---
    ranked = score_candidates(candidates, term, tokens)[: request.limit]
    items = [
        SearchResultItem(service=s.record.model_dump(), score=round(s.score, 4))
        for s in ranked
    ]

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.info(
        "search query=%r translated=%r category=%s candidates=%d returned=%d (%.1f ms)",
        request.query,
        term,
        inferred,
        len(candidates),
        len(items),
        elapsed_ms,
    )

    return SearchResponse(
        query=request.query,
        translated_query=term,
        inferred_category=inferred,
        tokens=tokens,
        total_candidates=len(candidates),
        results=items,
        elapsed_ms=elapsed_ms,
    )
