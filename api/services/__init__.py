"""
High-level use cases for the Users API.

Each service module orchestrates repositories to implement a use case.
Routers (FastAPI endpoints) call these services instead of reading the
JSON document directly.
"""
