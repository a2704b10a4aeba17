"""API router composition."""

from fastapi import APIRouter

from users_api.api.endpoints import users

api_router: APIRouter = APIRouter()
api_router.include_router(users.router, prefix="/users", tags=["users"])
