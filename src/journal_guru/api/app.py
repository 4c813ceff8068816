"""Application factory for the Journal Guru FastAPI backend."""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from journal_guru.configuration import Settings, configure_logging, settings as default_settings
from journal_guru.providers import GenerationProvider, build_provider

from .routes import api_router
from .schemas.prompts import ErrorResponse
from .services.relay_service import RelayService


async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are reported like missing fields: no field-level detail.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error="Missing required fields").model_dump(exclude_none=True),
    )


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[GenerationProvider] = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance.

    When no provider is injected one is built from settings, which raises
    ConfigurationError if the provider's API key is missing.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Journal Guru API",
        description="Relays journal prompt requests to a text-generation provider.",
        version="0.1.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_body)

    app.state.settings = settings
    app.state.relay = RelayService(
        provider=provider or build_provider(settings),
        model=settings.model,
        max_tokens=settings.llm_max_tokens,
    )

    app.include_router(api_router, prefix="/api")

    return app
