"""
Health check route for the PC Builder backend.

This endpoint is PUBLIC and provides a simple status check for load
balancers, monitoring, and deployment verification. It never calls the
AI gateway.
"""

import logging

from fastapi import APIRouter

from pcbuilder.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. "
        "Returns a simple status indicator for monitoring and load balancing."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Returns:
        HealthResponse: Simple status object with "ok" status

    Example response:
        {
            "status": "ok",
            "service": "pcbuilder-backend"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
