"""FastAPI entrypoint for the in-memory users API."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from users_api.api.api import api_router
from users_api.controllers.user_controller import UserController
from users_api.core.config import settings
from users_api.core.errors import UsersApiError, UserValidationError
from users_api.db.store import InMemoryUserStore, UserStore
from users_api.services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(*, store: UserStore | None = None) -> FastAPI:
    """Build the application around ``store`` (a fresh in-memory store by default)."""
    user_store = store if store is not None else InMemoryUserStore()

    app = FastAPI(title=settings.app_name, debug=settings.debug)
    app.state.user_store = user_store
    app.state.user_controller = UserController(UserService(user_store))
    app.include_router(api_router)

    @app.exception_handler(UsersApiError)
    async def handle_users_api_error(_: Request, exc: UsersApiError) -> JSONResponse:
        if isinstance(exc, UserValidationError):
            logger.info("[USERS] invalid user data (%s issue(s))", len(exc.issues))
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    logger.info("[BOOTSTRAP] %s app created (env=%s, store=%s)", settings.app_name, settings.app_env, type(user_store).__name__)
    return app


app = create_app()


__all__ = ["app", "create_app"]
