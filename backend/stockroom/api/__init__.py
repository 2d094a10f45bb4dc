"""API router aggregator."""
from fastapi import APIRouter

from stockroom.api.routes import auth, health, products, users

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(products.router)

__all__ = ["api_router"]
