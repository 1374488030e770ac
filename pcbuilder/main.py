"""
FastAPI application entry point for the PC Builder backend.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pcbuilder import __version__
from pcbuilder.config import settings
from pcbuilder.middleware.cors import CORSHeadersMiddleware
from pcbuilder.routes.health import router as health_router
from pcbuilder.routes.recommendations import router as recommendations_router
from pcbuilder.schemas.recommendations import ErrorResponse
from pcbuilder.services.completion_gateway import ConfigurationError
from pcbuilder.utils.constants import ERROR_MESSAGES

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="PC Builder API",
    description="AI-generated PC build and peripheral recommendations",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Report unreadable bodies through the same {"error": ...} envelope.

    Request models accept any JSON object, so this only fires for bodies
    that are not JSON objects at all (or a `build` that is not an object).
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )
    logger.error(f"Request body preview: {str(exc.body)[:500]}")

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=ERROR_MESSAGES['INVALID_REQUEST_BODY']).model_dump()
    )


@app.exception_handler(ConfigurationError)
async def configuration_exception_handler(request: Request, exc: ConfigurationError):
    """Missing AI credential: no upstream call is made, the key name is not exposed."""
    logger.error(f"Configuration error on {request.method} {request.url.path}: {exc}")

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=ERROR_MESSAGES['NOT_CONFIGURED']).model_dump()
    )


# CORS headers on every response, empty 200 for pre-flight
app.add_middleware(CORSHeadersMiddleware)

# Register routers
app.include_router(health_router)
app.include_router(recommendations_router)

logger.info(f"FastAPI app initialized successfully (environment={settings.ENVIRONMENT})")
