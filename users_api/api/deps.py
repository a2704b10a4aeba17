"""Request dependencies shared by the endpoint modules."""

from fastapi import Request

from users_api.controllers.user_controller import UserController


def get_user_controller(request: Request) -> UserController:
    """Return the controller owned by the running application."""
    return request.app.state.user_controller
