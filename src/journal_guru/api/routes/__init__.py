"""Application routers."""

from fastapi import APIRouter

from . import health, prompts

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(prompts.router)
