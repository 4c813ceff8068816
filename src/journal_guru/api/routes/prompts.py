"""Journal prompt generation endpoint."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from journal_guru.errors import UpstreamError, ValidationError

from ..schemas.prompts import ErrorResponse, GenerationRequest, GenerationResult
from ..services.relay_service import RelayService

router = APIRouter(tags=["prompts"])


def get_relay(request: Request) -> RelayService:
    return request.app.state.relay


@router.post(
    "/generate-prompts",
    response_model=GenerationResult,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
    summary="Generate journal prompts for the submitted form",
)
def generate_prompts(request: GenerationRequest, relay: RelayService = Depends(get_relay)):
    """Render the instruction, call the provider once and return its text."""
    try:
        return relay.generate(request)
    except ValidationError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=exc.message).model_dump(exclude_none=True),
        )
    except UpstreamError as exc:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Failed to generate prompts", details=exc.details).model_dump(),
        )
