"""CORS headers for browser clients."""

from __future__ import annotations

import logging
from typing import Mapping

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from pcbuilder.utils.constants import CORS_HEADERS

logger = logging.getLogger(__name__)


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Attach fixed CORS headers to every response.

    Any OPTIONS request is answered here with an empty 200, so pre-flight
    never reaches a route (and never reaches the AI gateway). The body is
    always empty, with or without an Origin header.
    """

    def __init__(self, app: ASGIApp, headers: Mapping[str, str] = CORS_HEADERS) -> None:
        super().__init__(app)
        self._headers = dict(headers)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method == "OPTIONS":
            logger.debug(f"Pre-flight for {request.url.path}")
            return Response(status_code=200, headers=self._headers)

        response = await call_next(request)
        response.headers.update(self._headers)
        return response
