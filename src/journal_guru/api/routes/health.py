"""Liveness probe endpoint."""

from fastapi import APIRouter

from ..schemas.prompts import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Basic liveness check")
async def health() -> HealthResponse:
    # Process reachability only; the provider is not contacted.
    return HealthResponse(status="ok", message="Server is running")
