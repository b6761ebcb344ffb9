"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Translate non-English search queries to English before tokenization.
- Fall back to the original query text when the LLM is unavailable or fails.
"""
