"""
Service listing store.

Responsibilities:
- Load approved, active service listings into an in-memory DataFrame.
- Execute OR-of-contains search predicates plus caller filters
  (category, location, price ceiling, rating floor).
- Return rows most recent first, ready for relevance ranking.
"""
