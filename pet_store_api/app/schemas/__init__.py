"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and are kept separate
from the plain dict records held by the in‑memory store.
"""
