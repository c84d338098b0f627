"""User retrieval use case."""

from __future__ import annotations

from typing import Any

from api.repositories.json_storage import UserRepository


class UserService:
    """Forwards the user collection (or the failure) from a repository."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def get_users(self) -> list[dict[str, Any]]:
        return self.repository.load_users()
