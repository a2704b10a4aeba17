"""Domain errors and their HTTP mapping."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import status


@dataclass(frozen=True)
class ValidationIssue:
    """A single violated constraint on one input field."""

    field: str
    constraint: str
    message: str


class UsersApiError(Exception):
    """Base error carrying the public message and HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)


class UserValidationError(UsersApiError):
    """Input did not satisfy the User schema.

    ``issues`` enumerates every field/constraint that failed. The public
    message never includes them.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "Invalid user data"

    def __init__(self, issues: tuple[ValidationIssue, ...] = ()) -> None:
        super().__init__()
        self.issues = issues


class UserNotFoundError(UsersApiError):
    status_code = status.HTTP_404_NOT_FOUND
    public_message = "User not found"

    def __init__(self, user_id: int | None = None) -> None:
        super().__init__()
        self.user_id = user_id
