from __future__ import annotations

import logging

from groq import Groq

from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a translator. Translate the user's query to English for a "
    "service marketplace search. Only output the English translation, "
    "nothing else. If it mentions household services like cooking, "
    "cleaning, etc., translate appropriately. Examples: "
    "'khana banane wali chahiye' -> 'cook needed', "
    "'room safai' -> 'room cleaning'."
)


def is_probably_english(text: str) -> bool:
    """Treat pure-ASCII text as English; anything else needs translating."""
    return text.isascii()


def translate(text: str, config: LLMConfig = DEFAULT_LLM_CONFIG) -> str:
    """
    Translate a search query to English via the Groq LLM.

    Returns the input unchanged when it is blank or already ASCII, when the
    translator is disabled, and on any failure (timeout, API error, empty
    completion).
    """
    if not isinstance(text, str) or not text.strip():
        return text if isinstance(text, str) else ""

    if is_probably_english(text):
        return text

    if not config.enabled or not config.api_key:
        return text

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            max_tokens=config.max_tokens,
            temperature=0.1,
        )

        translated = (response.choices[0].message.content or "").strip()
        return translated or text

    except Exception:
        logger.warning("Query translation failed, searching with original text", exc_info=True)
        return text
