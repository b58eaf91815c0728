"""Router aggregation."""

from __future__ import annotations

from fastapi import APIRouter

from app.routers import connections as connections_router_module
from app.routers import health as health_router_module
from app.routers import messaging as messaging_router_module

# Create aggregated router
api_router = APIRouter(prefix="/api/v1")

# Include routers
api_router.include_router(health_router_module.router)
api_router.include_router(messaging_router_module.router)
api_router.include_router(connections_router_module.router)

__all__ = ["api_router"]
