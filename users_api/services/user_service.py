"""User service operations."""

import logging

from users_api.db.store import UserStore
from users_api.schemas.user import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: UserStore) -> None:
        self.store = store

    def add_user(self, user: User) -> User:
        stored = self.store.add(user)
        logger.info("[USERS] stored user id=%s", stored.id)
        return stored

    def get_user_by_id(self, user_id: int | None) -> User | None:
        return self.store.get_by_id(user_id)

    def list_users(self) -> list[User]:
        return self.store.list_all()
