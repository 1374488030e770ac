"""
AI Completion Gateway - bounded-retry client for the chat-completion API

This module sends one system/user prompt pair to an OpenAI-compatible
chat-completion endpoint and returns the raw completion text.

Architecture:
- Transport: httpx.AsyncClient, opened fresh for every attempt
- Output: response_format json_object, temperature 0.7
- Retries: up to MAX_RETRIES (2) on 5xx and transport errors
- Backoff: linear, attempt_number * RETRY_BACKOFF_SECONDS

Failure taxonomy (all subclasses of AIGatewayError):
- ConfigurationError: no API key, raised at construction, no call made
- RateLimitedError: upstream 429, never retried
- QuotaExhaustedError: upstream 402, never retried
- TransientUpstreamError: upstream 5xx, retried
- UnexpectedUpstreamError: any other non-2xx or an unreadable 2xx body, never retried

Transport failures (connection refused, timeouts, ...) propagate as the
native httpx.TransportError subclasses and are retried as well.

The completion content is returned verbatim. It is expected to be a JSON
document but is never parsed or validated here.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from pcbuilder.config import settings
from pcbuilder.utils.constants import (
    COMPLETION_TEMPERATURE,
    DEFAULT_AI_GATEWAY_URL,
    DEFAULT_AI_MODEL,
    ERROR_MESSAGES,
    LOG_BODY_PREVIEW_CHARS,
    MAX_RETRIES,
    RETRY_BACKOFF_SECONDS,
)
from pcbuilder.utils.retry import Sleep, linear_backoff, retry_with_backoff

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class AIGatewayError(Exception):
    """Base class for AI gateway failures."""
    pass


class ConfigurationError(AIGatewayError):
    """The gateway cannot be used because a required setting is missing."""
    pass


class UpstreamHTTPError(AIGatewayError):
    """The upstream answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class RateLimitedError(UpstreamHTTPError):
    """Upstream returned 429."""
    pass


class QuotaExhaustedError(UpstreamHTTPError):
    """Upstream returned 402 (credits depleted)."""
    pass


class TransientUpstreamError(UpstreamHTTPError):
    """Upstream returned a 5xx status. Worth retrying."""
    pass


class UnexpectedUpstreamError(UpstreamHTTPError):
    """Upstream returned a status or body we do not know how to handle."""
    pass


def is_retryable(exc: BaseException) -> bool:
    """5xx answers and transport-level failures are retried, nothing else."""
    return isinstance(exc, (TransientUpstreamError, httpx.TransportError))


# =============================================================================
# GATEWAY
# =============================================================================

class CompletionGateway:
    """
    Client for one chat-completion endpoint.

    The API key is required at construction. Tests inject `transport`
    (e.g. httpx.MockTransport) and `sleep` (a fake clock).
    """

    def __init__(
        self,
        api_key: str,
        *,
        url: str = DEFAULT_AI_GATEWAY_URL,
        model: str = DEFAULT_AI_MODEL,
        timeout: Optional[float] = 60.0,
        max_retries: int = MAX_RETRIES,
        backoff_seconds: float = RETRY_BACKOFF_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        if not api_key:
            raise ConfigurationError("AI gateway API key is not configured")

        self._api_key = api_key
        self.url = url
        self.model = model
        self.timeout = timeout
        self.max_retries = max_retries
        self._backoff = linear_backoff(backoff_seconds)
        self._transport = transport
        self._sleep = sleep

    def build_payload(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        """Request body for the chat-completion endpoint."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "response_format": {"type": "json_object"},
            "temperature": COMPLETION_TEMPERATURE,
        }

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Run the prompt pair through the upstream model.

        Returns:
            The raw `choices[0].message.content` string.

        Raises:
            RateLimitedError, QuotaExhaustedError, UnexpectedUpstreamError:
                on the first occurrence, no retry.
            TransientUpstreamError or httpx.TransportError:
                once all attempts have failed.
        """
        payload = self.build_payload(system_prompt, user_prompt)

        async def attempt_once(attempt: int) -> str:
            return await self._post(payload, attempt)

        return await retry_with_backoff(
            attempt_once,
            max_attempts=self.max_retries + 1,
            backoff=self._backoff,
            is_retryable=is_retryable,
            sleep=self._sleep,
            on_retry=self._log_failed_attempt,
        )

    async def _post(self, payload: Dict[str, Any], attempt: int) -> str:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(self.url, json=payload, headers=headers)

        if not response.is_success:
            status_code = response.status_code
            logger.error(
                f"AI gateway error (attempt {attempt + 1}): {status_code} "
                f"{response.text[:LOG_BODY_PREVIEW_CHARS]}"
            )

            if status_code == 429:
                raise RateLimitedError(status_code, "AI Gateway rate limit exceeded")
            if status_code == 402:
                raise QuotaExhaustedError(status_code, "AI Gateway credits depleted")
            if status_code >= 500:
                raise TransientUpstreamError(
                    status_code, f"AI Gateway temporary error: {status_code}"
                )
            raise UnexpectedUpstreamError(status_code, f"AI Gateway error: {status_code}")

        content = self._extract_content(response)
        logger.info(f"AI response received successfully (attempt {attempt + 1})")
        return content

    @staticmethod
    def _extract_content(response: httpx.Response) -> str:
        """Pull choices[0].message.content out of a 2xx response."""
        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unreadable AI gateway response body: {e}")
            raise UnexpectedUpstreamError(
                response.status_code, ERROR_MESSAGES['UNEXPECTED_RESPONSE']
            ) from e

        if not isinstance(content, str):
            logger.error(f"AI gateway content is {type(content).__name__}, expected str")
            raise UnexpectedUpstreamError(
                response.status_code, ERROR_MESSAGES['UNEXPECTED_RESPONSE']
            )

        return content

    @staticmethod
    def _log_failed_attempt(attempt: int, exc: BaseException) -> None:
        logger.error(f"Attempt {attempt + 1} failed: {str(exc) or type(exc).__name__}")


def get_completion_gateway() -> CompletionGateway:
    """
    FastAPI dependency building a gateway from application settings.

    Raises:
        ConfigurationError: If AI_GATEWAY_API_KEY is not set. main.py turns
            this into a 500 {"error": ...} response before any upstream call.
    """
    return CompletionGateway(
        api_key=settings.AI_GATEWAY_API_KEY,
        url=settings.AI_GATEWAY_URL,
        model=settings.AI_MODEL,
        timeout=settings.AI_GATEWAY_TIMEOUT_SECONDS,
    )
