"""User endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, Request, status

from users_api.api.deps import get_user_controller
from users_api.controllers.user_controller import UserController, parse_user_id
from users_api.core.errors import UserNotFoundError, UserValidationError
from users_api.schemas.user import User

router: APIRouter = APIRouter()

# The body is read raw so every decoding failure maps to the same 400; the
# documented schema still comes from the User model.
_CREATE_USER_BODY: dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/User"}}},
    }
}


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    openapi_extra=_CREATE_USER_BODY,
)
async def create_user(request: Request, controller: UserController = Depends(get_user_controller)) -> User:
    try:
        payload = await request.json()
    except ValueError as exc:
        raise UserValidationError() from exc
    return controller.create_user(payload)


@router.get("/{user_id}", response_model=User, summary="Get user by id")
async def get_user(user_id: str, controller: UserController = Depends(get_user_controller)) -> User:
    parsed_id = parse_user_id(user_id)
    user = controller.get_user(parsed_id)
    if user is None:
        raise UserNotFoundError(parsed_id)
    return user


@router.get("", response_model=list[User], summary="List users")
async def list_users(controller: UserController = Depends(get_user_controller)) -> list[User]:
    """Return every stored user in insertion order."""
    return controller.list_users()
