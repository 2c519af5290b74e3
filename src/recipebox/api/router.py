"""Routers aggregating all endpoint modules.

api_router is mounted under settings.api.prefix; the health and dashboard
routers are mounted at the root.
"""

from __future__ import annotations

from fastapi import APIRouter

from recipebox.api.endpoints import dashboard, health, recipes


api_router = APIRouter()
api_router.include_router(recipes.router)

root_router = APIRouter()
root_router.include_router(health.router)
root_router.include_router(dashboard.router)
