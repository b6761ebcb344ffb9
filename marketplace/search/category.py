from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .config import CATEGORY_SYNONYMS, DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import CategoryDescriptor
from .text import normalize, tokenize


def jaccard(a: set[str], b: set[str]) -> float:
    """Return |a ∩ b| / |a ∪ b|, or 0.0 when either set is empty."""
    if not a or not b:
        return 0.0
    inter = len(a & b)
    union = len(a) + len(b) - inter
    return inter / union if union else 0.0


def _match_synonym(norm_query: str) -> str | None:
    # Declaration order decides between overlapping phrases.
    for phrase, category_name in CATEGORY_SYNONYMS:
        if phrase in norm_query:
            return category_name
    return None


def _as_descriptor(category: CategoryDescriptor | dict[str, Any]) -> CategoryDescriptor:
    if isinstance(category, CategoryDescriptor):
        return category
    return CategoryDescriptor(
        name=str(category.get("name") or ""),
        description=str(category.get("description") or ""),
    )


def infer_category(
    query: Any,
    categories: Iterable[CategoryDescriptor | dict[str, Any]],
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> str | None:
    """Guess the single category a free-text query is aimed at.

    A synonym phrase contained in the normalized query decides outright.
    Otherwise the category whose ``"{name} {description}"`` tokens have the
    highest Jaccard similarity with the query tokens is returned, provided
    the similarity reaches ``config.similarity_threshold``.
    """
    norm = normalize(query)
    if not norm:
        return None

    synonym_hit = _match_synonym(norm)
    if synonym_hit is not None:
        return synonym_hit

    query_tokens = set(tokenize(norm, config))
    if not query_tokens:
        return None

    best_name: str | None = None
    best_score = 0.0
    for raw in categories:
        category = _as_descriptor(raw)
        category_tokens = set(tokenize(f"{category.name} {category.description}", config))
        score = jaccard(query_tokens, category_tokens)
        if best_name is None or score > best_score:
            best_name, best_score = category.name, score

    if best_name is None:
        return None
    return best_name if best_score >= config.similarity_threshold else None
