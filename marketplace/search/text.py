from __future__ import annotations

import re
from typing import Any

from .config import DEFAULT_SEARCH_CONFIG, STOP_WORDS, SearchConfig

_SEPARATOR_RE = re.compile(r"[_/\\|]+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: Any) -> str:
    """Lowercase ``text`` and reduce it to ``[a-z0-9]`` words joined by single spaces.

    Anything that is not a string is treated as an empty query.
    """
    if not isinstance(text, str):
        return ""
    lower = text.lower()
    lower = _SEPARATOR_RE.sub(" ", lower)
    lower = _NON_ALNUM_RE.sub(" ", lower)
    return _WHITESPACE_RE.sub(" ", lower).strip()


def tokenize(text: Any, config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> list[str]:
    """Return the distinct searchable tokens of ``text`` in first-seen order."""
    norm = normalize(text)
    if not norm:
        return []

    tokens: list[str] = []
    seen: set[str] = set()
    for part in norm.split(" "):
        if len(part) < config.min_token_length or part in STOP_WORDS:
            continue
        if part in seen:
            continue
        seen.add(part)
        tokens.append(part)

    # Bounded so the generated store filter stays small
    return tokens[: config.max_tokens]
