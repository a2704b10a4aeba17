"""Controller sitting between the HTTP routes and the user service."""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import ValidationError

from users_api.core.errors import UserValidationError, ValidationIssue
from users_api.schemas.user import User
from users_api.services.user_service import UserService

logger = logging.getLogger(__name__)

_USER_ID_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")

_CONSTRAINTS: dict[str, str] = {
    "missing": "missing",
    "model_type": "object",
    "model_attributes_type": "object",
    "greater_than": "greater_than",
    "string_too_short": "min_length",
    "greater_than_equal": "range",
    "less_than_equal": "range",
    "value_error": "email",
}


def _issue_from_error(error: dict[str, Any]) -> ValidationIssue:
    loc = error.get("loc") or ()
    field = ".".join(str(part) for part in loc) or "user"
    error_type = str(error.get("type", ""))
    constraint = _CONSTRAINTS.get(error_type)
    if constraint is None:
        constraint = "type" if error_type.endswith("_type") else error_type
    return ValidationIssue(field=field, constraint=constraint, message=str(error.get("msg", "")))


def validate_user(raw_input: Any) -> User:
    """Decode untyped input into a ``User`` or raise ``UserValidationError``."""
    try:
        return User.model_validate(raw_input)
    except ValidationError as exc:
        issues = tuple(_issue_from_error(error) for error in exc.errors())
        raise UserValidationError(issues) from exc


def parse_user_id(raw: str) -> int | None:
    """Read the leading decimal integer of a path parameter.

    Returns ``None`` when there are no digits to read; ``None`` never
    matches a stored user.
    """
    match = _USER_ID_PREFIX.match(raw)
    if match is None:
        return None
    return int(match.group(1))


class UserController:
    def __init__(self, service: UserService) -> None:
        self.service = service

    def create_user(self, raw_input: Any) -> User:
        try:
            user = validate_user(raw_input)
        except UserValidationError as exc:
            logger.debug("[USERS] rejected create: %s", [(i.field, i.constraint) for i in exc.issues])
            raise
        return self.service.add_user(user)

    def get_user(self, user_id: int | None) -> User | None:
        return self.service.get_user_by_id(user_id)

    def list_users(self) -> list[User]:
        return self.service.list_users()
