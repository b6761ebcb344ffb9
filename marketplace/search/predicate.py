from __future__ import annotations

from collections.abc import Iterable

from .config import PREDICATE_FIELDS
from .models import FilterClause


def merge_tokens(*token_lists: Iterable[str]) -> list[str]:
    """Union of several token lists, keeping first-seen order."""
    merged: list[str] = []
    seen: set[str] = set()
    for tokens in token_lists:
        for token in tokens:
            if token not in seen:
                seen.add(token)
                merged.append(token)
    return merged


def build_filter_predicate(tokens: Iterable[str]) -> list[FilterClause] | None:
    """Build an OR-of-contains predicate over the searchable listing fields.

    Every usable token yields one clause per field in ``PREDICATE_FIELDS``.
    Commas are removed so a value can never split a comma-joined filter
    string. Returns ``None`` when nothing usable is left.
    """
    clauses: list[FilterClause] = []
    for token in tokens or ():
        if not isinstance(token, str):
            continue
        safe = token.replace(",", "").strip()
        if not safe:
            continue
        for field in PREDICATE_FIELDS:
            clauses.append(FilterClause(field=field, value=safe))
    return clauses or None


def render_postgrest_or(predicate: list[FilterClause] | None) -> str | None:
    """Render a predicate as a PostgREST ``or=`` filter string.

    Adapter for callers whose listing store is PostgREST; the in-process
    pandas store consumes the clauses directly.
    """
    if not predicate:
        return None
    return ",".join(f"{c.field}.ilike.%{c.value}%" for c in predicate)
