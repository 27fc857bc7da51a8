"""
Core infrastructure: settings, logging, error handling, the in‑memory
pet store and query string decoding.
"""
