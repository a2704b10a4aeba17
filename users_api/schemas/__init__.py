"""Schema exports."""

from users_api.schemas.user import User

__all__ = [
    "User",
]
