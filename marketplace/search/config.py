from __future__ import annotations

from dataclasses import dataclass

STOP_WORDS: frozenset[str] = frozenset({
    "a",
    "an",
    "the",
    "and",
    "or",
    "to",
    "of",
    "in",
    "on",
    "for",
    "with",
    "near",
    "me",
    "my",
    "best",
    "cheap",
    "cost",
    "price",
    "service",
    "services",
})

# Colloquial phrase -> category name. Phrases are stored normalized.
# Order matters: the first phrase found in the query wins.
CATEGORY_SYNONYMS: tuple[tuple[str, str], ...] = (
    ("system security", "Security Services"),
    ("cyber security", "Security Services"),
    ("cybersecurity", "Security Services"),
    ("cctv", "Security Services"),
    ("camera", "Security Services"),
    ("surveillance", "Security Services"),
    ("guard", "Security Services"),
    ("bodyguard", "Security Services"),
    ("it support", "Technical Services"),
    ("computer repair", "Technical Services"),
    ("laptop repair", "Technical Services"),
    ("mobile repair", "Technical Services"),
    ("plumber", "Home Services"),
    ("electrician", "Home Services"),
    ("ac repair", "Repair & Maintenance"),
    ("appliance repair", "Repair & Maintenance"),
    ("tuition", "Education & Tutoring"),
    ("tutor", "Education & Tutoring"),
    ("moving", "Delivery & Logistics"),
    ("courier", "Delivery & Logistics"),
    ("fitness", "Health & Personal Care"),
    ("salon", "Health & Personal Care"),
    ("consulting", "Business & Consulting"),
    ("legal", "Business & Consulting"),
    ("accounting", "Business & Consulting"),
    ("photography", "Event & Media"),
    ("dj", "Event & Media"),
    ("ai", "AI & Automation"),
    ("automation", "AI & Automation"),
)

PREDICATE_FIELDS: tuple[str, ...] = ("title", "description", "category", "location")


@dataclass(frozen=True)
class SearchConfig:
    max_tokens: int = 8
    min_token_length: int = 2
    similarity_threshold: float = 0.25
    phrase_weight: float = 6.0
    title_weight: float = 4.0
    category_weight: float = 3.0
    description_weight: float = 2.0
    rating_cap: float = 5.0
    rating_weight: float = 0.3


DEFAULT_SEARCH_CONFIG = SearchConfig()
