"""
Service category catalog.

Responsibilities:
- Hold the fixed list of marketplace categories (name + description).
- Serve them to category inference and the public API.
"""
