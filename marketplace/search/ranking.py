from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import ValidationError

from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import CandidateRecord, ScoredCandidate
from .text import normalize

R = TypeVar("R")


def _as_record(candidate: Any) -> CandidateRecord:
    if isinstance(candidate, CandidateRecord):
        return candidate
    if isinstance(candidate, Mapping):
        return CandidateRecord(**{str(k): v for k, v in candidate.items()})
    # Dataclasses, namedtuples, ORM rows: read the fields as attributes
    try:
        return CandidateRecord.model_validate(candidate, from_attributes=True)
    except ValidationError:
        return CandidateRecord()


def score_candidate(
    record: CandidateRecord | Mapping[str, Any],
    raw_query: Any,
    tokens: Sequence[str],
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> float:
    """Compute a heuristic relevance score for a single listing."""
    rec = _as_record(record)
    title = normalize(rec.title)
    description = normalize(rec.description)
    category = normalize(rec.category)

    score = 0.0
    norm_query = normalize(raw_query)
    if norm_query and (norm_query in title or norm_query in category):
        score += config.phrase_weight

    for token in tokens or ():
        if not isinstance(token, str) or not token.strip():
            continue
        if token in title:
            score += config.title_weight
        if token in category:
            score += config.category_weight
        if token in description:
            score += config.description_weight

    score += min(config.rating_cap, rec.rating) * config.rating_weight
    return max(0.0, score)


def _scored(
    candidates: Sequence[R],
    raw_query: Any,
    tokens: Sequence[str],
    config: SearchConfig,
) -> list[tuple[R, CandidateRecord, float]]:
    scored: list[tuple[R, CandidateRecord, float]] = []
    for candidate in candidates or ():
        rec = _as_record(candidate)
        scored.append((candidate, rec, score_candidate(rec, raw_query, tokens, config)))
    # sorted() is stable: equal scores keep the store's order
    return sorted(scored, key=lambda x: x[2], reverse=True)


def rank(
    candidates: Sequence[R],
    raw_query: Any,
    tokens: Sequence[str],
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[R]:
    """Return ``candidates`` ordered by descending score, ties in input order."""
    return [item[0] for item in _scored(candidates, raw_query, tokens, config)]


def score_candidates(
    candidates: Sequence[Any],
    raw_query: Any,
    tokens: Sequence[str],
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[ScoredCandidate]:
    return [
        ScoredCandidate(record=rec, score=score)
        for _, rec, score in _scored(candidates, raw_query, tokens, config)
    ]
