"""
JSON-file persistence adapter for user records.

The document is read fresh on every call and never written back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol
import json
import logging

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class for storage-related exceptions."""


class MalformedDocumentError(StorageError):
    """Raised when the document parses but has no `users` collection."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class UserRepository(Protocol):
    """Capability interface for anything able to load the user collection."""

    def load_users(self) -> list[dict[str, Any]]:
        ...


class JsonUserRepository:
    """Reads the `users` field from a JSON document on the local filesystem."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _reject_constant(self, name: str):
        # NaN and Infinity are not JSON
        raise MalformedDocumentError(self._path, f"non-standard constant {name!r}")

    def load_users(self) -> list[dict[str, Any]]:
        # OSError and json.JSONDecodeError propagate as-is
        data = self._path.read_text(encoding="utf-8")
        db = json.loads(data, parse_constant=self._reject_constant)
        if not isinstance(db, dict):
            raise MalformedDocumentError(self._path, "document is not a JSON object")
        if "users" not in db:
            raise MalformedDocumentError(self._path, "missing 'users' field")
        users = db["users"]
        logger.debug("Loaded users from %s", self._path)
        return users
