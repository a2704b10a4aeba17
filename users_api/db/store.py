"""In-memory user storage."""

from __future__ import annotations

from typing import Protocol

from users_api.schemas.user import User


class UserStore(Protocol):
    """Storage contract the service layer depends on."""

    def add(self, user: User) -> User: ...

    def get_by_id(self, user_id: int | None) -> User | None: ...

    def list_all(self) -> list[User]: ...


class InMemoryUserStore:
    """Append-only list of users, kept for the lifetime of the process.

    Ids are not unique; lookups return the first record inserted with a
    matching id.
    """

    def __init__(self) -> None:
        self._users: list[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def add(self, user: User) -> User:
        self._users.append(user)
        return user

    def get_by_id(self, user_id: int | None) -> User | None:
        if user_id is None:
            return None
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def list_all(self) -> list[User]:
        return list(self._users)
