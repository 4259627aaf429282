from fastapi import APIRouter

from .endpoints import chat
from .endpoints import health

api_router = APIRouter()

# Include endpoint routers (no prefix, paths are part of the public contract)
api_router.include_router(health.router, prefix="", tags=["health"])
api_router.include_router(chat.router, prefix="", tags=["chat"])
