from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from ..search.models import FilterClause

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

SERVICE_COLUMNS: list[str] = [
    "id",
    "title",
    "description",
    "category",
    "location",
    "price",
    "rating",
    "provider_name",
    "approval_status",
    "is_active",
    "created_at",
]

_TEXT_COLUMNS = ("title", "description", "category", "location")


@dataclass(frozen=True)
class StoreConfig:
    services_csv: Path = Path(os.getenv("SERVICES_CSV") or _DATA_DIR / "services.csv")


DEFAULT_STORE_CONFIG = StoreConfig()

_df: pd.DataFrame | None = None


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    for col in SERVICE_COLUMNS:
        if col not in df.columns:
            df[col] = pd.NA

    for col in _TEXT_COLUMNS:
        df[col] = df[col].fillna("").astype(str)
        # Lowercase copies for case-insensitive "contains" matching
        df[f"{col}_lower"] = df[col].str.lower()

    df["price"] = pd.to_numeric(df["price"], errors="coerce")
    df["rating"] = pd.to_numeric(df["rating"], errors="coerce")
    df["created_at"] = pd.to_datetime(df["created_at"], errors="coerce", utc=True)
    return df


def _load(config: StoreConfig = DEFAULT_STORE_CONFIG) -> pd.DataFrame:
    df = pd.read_csv(config.services_csv)
    logger.info("Loaded %d service listings from %s", len(df), config.services_csv)
    return _prepare(df)


def get_dataframe() -> pd.DataFrame:
    """Return the in-memory listings DataFrame, loading it on first call."""
    global _df
    if _df is None:
        _df = _load()
    return _df


def set_dataframe(df: pd.DataFrame) -> None:
    """Replace the listings table, e.g. with rows fetched from another store."""
    global _df
    _df = _prepare(df)


def reset_dataframe() -> None:
    global _df
    _df = None


def _visible_mask(df: pd.DataFrame) -> pd.Series:
    approved = df["approval_status"].fillna("").astype(str).str.lower() == "approved"
    active = df["is_active"].map(_is_active_value).astype(bool)
    return approved & active


def _is_active_value(value: Any) -> bool:
    # Null means "never deactivated"
    if value is None or (isinstance(value, float) and math.isnan(value)) or value is pd.NA:
        return True
    if isinstance(value, str):
        return value.strip().lower() in {"", "true", "1", "yes"}
    return bool(value)


def _predicate_mask(df: pd.DataFrame, predicate: list[FilterClause]) -> pd.Series:
    mask = pd.Series(False, index=df.index)
    for clause in predicate:
        column = f"{clause.field}_lower"
        if column not in df.columns:
            continue
        mask = mask | df[column].str.contains(clause.value.lower(), regex=False, na=False)
    return mask


def _to_record(row: pd.Series) -> dict[str, Any]:
    record: dict[str, Any] = {}
    for col in SERVICE_COLUMNS:
        value = row[col]
        if col == "created_at":
            record[col] = value.isoformat() if pd.notna(value) else None
        elif isinstance(value, np.generic):
            record[col] = value.item() if pd.notna(value) else None
        elif value is pd.NA or (isinstance(value, float) and math.isnan(value)):
            record[col] = None
        else:
            record[col] = value
    return record


def query_services(
    predicate: list[FilterClause] | None = None,
    category: str | None = None,
    location: str | None = None,
    max_price: float | None = None,
    min_rating: float = 0.0,
) -> list[dict[str, Any]]:
    """
    Return visible listings matching ``predicate`` and the caller filters.

    Rows come back most recent first, which is the order ranking ties keep.
    """
    df = get_dataframe()
    mask = _visible_mask(df)

    if category:
        mask = mask & (df["category"] == category)

    if predicate:
        mask = mask & _predicate_mask(df, predicate)

    if location and location.strip():
        mask = mask & df["location_lower"].str.contains(
            location.strip().lower(), regex=False, na=False
        )

    if max_price is not None and np.isfinite(max_price):
        mask = mask & (df["price"] <= max_price)

    if min_rating > 0:
        mask = mask & (df["rating"] >= min_rating)

    rows = df.loc[mask].sort_values("created_at", ascending=False, kind="stable")
    return [_to_record(row) for _, row in rows.iterrows()]


def get_locations() -> list[str]:
    df = get_dataframe()
    visible = df.loc[_visible_mask(df)]
    return sorted({loc.strip() for loc in visible["location"] if loc.strip()})


def get_listed_categories() -> list[str]:
    df = get_dataframe()
    visible = df.loc[_visible_mask(df)]
    return sorted({cat.strip() for cat in visible["category"] if cat.strip()})
