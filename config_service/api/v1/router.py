"""Main API router that includes all v1 routes."""
from fastapi import APIRouter
from config_service.api.v1.routes import health, environments, variables

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(environments.router, tags=["environments"])
api_router.include_router(variables.router, tags=["variables"])
