"""
Core utilities shared across the Users API.

This package hosts:
- configuration helpers (env vars, storage path, listen port)
- logging setup used by the process entry point

Routers and services depend on these primitives instead of reading
os.environ directly.
"""
