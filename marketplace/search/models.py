from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""


class CandidateRecord(BaseModel):
    """A service listing as returned by the store.

    Only the fields used for ranking are typed; anything else the store
    returns (id, price, created_at, ...) is kept as extra data.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    title: str = ""
    description: str = ""
    category: str = ""
    location: str = ""
    rating: float = 0.0

    @field_validator("title", "description", "category", "location", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("rating", mode="before")
    @classmethod
    def _coerce_rating(cls, value: Any) -> float:
        if value is None or isinstance(value, bool):
            return 0.0
        try:
            rating = float(value)
        except (TypeError, ValueError):
            return 0.0
        return rating if math.isfinite(rating) else 0.0


class ScoredCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    record: CandidateRecord
    score: float


class FilterClause(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    operator: Literal["contains"] = "contains"
    value: str


class SearchRequest(BaseModel):
    query: str = Field(default="", max_length=500)
    category: str | None = Field(
        default=None, description="Exact category name to restrict results to"
    )
    location: str | None = Field(default=None, description="Location substring filter")
    max_price: float | None = Field(default=None, ge=0.0)
    min_rating: float = Field(default=0.0, ge=0.0, le=5.0)
    limit: int = Field(default=20, ge=1, le=100)


class SearchResultItem(BaseModel):
    service: dict[str, Any]
    score: float


class SearchResponse(BaseModel):
    query: str
    translated_query: str
    inferred_category: str | None = None
    tokens: list[str] = Field(default_factory=list)
    total_candidates: int
    results: list[SearchResultItem]
    elapsed_ms: float = 0.0


class CategorySuggestion(BaseModel):
    query: str
    category: str | None = None
