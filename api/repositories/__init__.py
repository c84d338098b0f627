"""
Persistence adapters.

These modules encapsulate how user data is stored/retrieved (today a JSON
file, tomorrow a DB or a remote service). Services depend on the
UserRepository interface rather than touching the JSON file.
"""

from .json_storage import (
    JsonUserRepository,
    MalformedDocumentError,
    StorageError,
    UserRepository,
)

__all__ = [
    "JsonUserRepository",
    "MalformedDocumentError",
    "StorageError",
    "UserRepository",
]
