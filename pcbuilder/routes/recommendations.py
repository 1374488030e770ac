"""
FastAPI routes for the AI recommendation endpoints.

Paths mirror the serverless function names the web client already invokes,
so `supabase.functions.invoke("generate-pc-build", ...)`-style callers can be
pointed at this service unchanged.

Endpoints:
- POST /functions/v1/generate-pc-build: three build tiers for a budget
- POST /functions/v1/recommend-peripherals: peripherals for a chosen build

OPTIONS pre-flight and CORS headers are handled by CORSHeadersMiddleware.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from pcbuilder.schemas.recommendations import (
    BuildGenerationRequest,
    BuildGenerationResponse,
    ErrorResponse,
    PeripheralRequest,
    PeripheralResponse,
)
from pcbuilder.services.completion_gateway import CompletionGateway, get_completion_gateway
from pcbuilder.services.recommendation_service import (
    RecommendationOutcome,
    generate_pc_builds,
    recommend_peripherals,
)

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/functions/v1",
    tags=["recommendations"]
)

ERROR_RESPONSES = {
    402: {"model": ErrorResponse, "description": "AI service credits depleted"},
    429: {"model": ErrorResponse, "description": "Upstream rate limit exceeded"},
    500: {"model": ErrorResponse, "description": "Configuration, upstream or transport failure"},
}


def _to_response(outcome: RecommendationOutcome) -> Response:
    """Completion text goes out verbatim; failures go out as {"error": ...}."""
    if outcome.ok:
        return Response(content=outcome.content, media_type="application/json")

    return JSONResponse(
        status_code=outcome.status_code,
        content=ErrorResponse(error=outcome.error).model_dump()
    )


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/generate-pc-build",
    response_class=Response,
    responses={
        200: {
            "model": BuildGenerationResponse,
            "description": "Raw model completion (not validated against this schema)"
        },
        **ERROR_RESPONSES,
    },
    summary="Generate three PC build tiers",
    description="""
    Asks the AI model for Good, Better and Best builds within the budget.

    **Frontend Flow:**
    1. User enters budget, use case and optional custom requirements
    2. POST /functions/v1/generate-pc-build
    3. Receive {"builds": [...]} on 200, or {"error": "..."} otherwise

    **Retry behavior:**
    Upstream 5xx and network failures are retried twice (1s, then 2s).
    429 and 402 are returned immediately.
    """
)
async def generate_pc_build_endpoint(
    request: BuildGenerationRequest,
    gateway: Annotated[CompletionGateway, Depends(get_completion_gateway)],
) -> Response:
    """
    Build generation endpoint.

    - Parse: BuildGenerationRequest (lenient, camelCase aliases)
    - Call AI: service layer, bounded retry
    - Return: completion passthrough or error envelope
    """
    logger.info("POST /functions/v1/generate-pc-build called")

    outcome = await generate_pc_builds(gateway, request)

    logger.info(f"Returning generate-pc-build response with status={outcome.status_code}")
    return _to_response(outcome)


@router.post(
    "/recommend-peripherals",
    response_class=Response,
    responses={
        200: {
            "model": PeripheralResponse,
            "description": "Raw model completion (not validated against this schema)"
        },
        **ERROR_RESPONSES,
    },
    summary="Recommend peripherals for a build",
    description="""
    Asks the AI model for a monitor, keyboard, mouse and headset that match
    the selected build's CPU/GPU and the remaining budget.

    Same retry and error behavior as generate-pc-build.
    """
)
async def recommend_peripherals_endpoint(
    request: PeripheralRequest,
    gateway: Annotated[CompletionGateway, Depends(get_completion_gateway)],
) -> Response:
    """Peripheral recommendation endpoint."""
    logger.info("POST /functions/v1/recommend-peripherals called")

    outcome = await recommend_peripherals(gateway, request)

    logger.info(f"Returning recommend-peripherals response with status={outcome.status_code}")
    return _to_response(outcome)
