from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _as_bool(value: str | None, default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LLMConfig:
    api_key: str = os.getenv("GROQ_API_KEY", "")
    model: str = os.getenv("TRANSLATION_MODEL", "llama-3.1-8b-instant")
    timeout: float = 8.0
    max_tokens: int = 100
    enabled: bool = _as_bool(os.getenv("TRANSLATION_ENABLED"))


DEFAULT_LLM_CONFIG = LLMConfig()
