"""
Search relevance engine.

Responsibilities:
- Normalize and tokenize raw free-text queries.
- Infer the category a query is aimed at (synonyms, then Jaccard similarity).
- Build a broadened OR-of-contains predicate for the listing store.
- Score and stably rank the candidate listings the store returns.
"""
