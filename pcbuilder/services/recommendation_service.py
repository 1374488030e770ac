"""
Recommendation Service - PC builds and peripherals through the AI gateway

Two call sites share one control flow:

1. generate_pc_builds: budget + use case (+ custom requirements)
   -> three build tiers {"builds": [...]}
2. recommend_peripherals: remaining budget + chosen build + use case
   -> {"peripherals": [...]}

Flow for both:
1. Build the system/user prompt pair
2. Call CompletionGateway.complete (bounded retry, linear backoff)
3. Return the completion text verbatim, or map the failure to a status code
   and user-facing message

Every exception is caught here. Routes only translate the returned
RecommendationOutcome into an HTTP response, so no stack trace ever
reaches the client.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from pcbuilder.agents.build.prompts import BUILD_SYSTEM_PROMPT, build_pc_build_user_prompt
from pcbuilder.agents.formatting import format_text
from pcbuilder.agents.peripherals.prompts import (
    PERIPHERALS_SYSTEM_PROMPT,
    build_peripherals_user_prompt,
)
from pcbuilder.schemas.recommendations import BuildGenerationRequest, PeripheralRequest
from pcbuilder.services.completion_gateway import (
    CompletionGateway,
    QuotaExhaustedError,
    RateLimitedError,
    TransientUpstreamError,
    UnexpectedUpstreamError,
)
from pcbuilder.utils.constants import ERROR_MESSAGES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecommendationOutcome:
    """
    Result of one recommendation call.

    On success `content` holds the raw completion and `error` is None.
    On failure `error` holds the user-facing message.
    """
    status_code: int
    content: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class CallSite:
    """
    Per-endpoint wording used when mapping failures.

    Without a timeout_message, timeouts are reported like any other
    transport failure (exception message or fallback).
    """
    name: str
    fallback_message: str
    quota_message: str
    timeout_message: Optional[str] = None


BUILD_CALL_SITE = CallSite(
    name="generate-pc-build",
    fallback_message="Failed to generate builds. Please try again.",
    quota_message="AI service credits depleted. Please contact support.",
    timeout_message=ERROR_MESSAGES['TIMEOUT'],
)

PERIPHERALS_CALL_SITE = CallSite(
    name="recommend-peripherals",
    fallback_message="Failed to generate peripheral recommendations. Please try again.",
    quota_message="AI service credits depleted.",
)


def map_failure(exc: BaseException, call_site: CallSite) -> RecommendationOutcome:
    """
    Translate a gateway failure into a status code and user-facing message.

    429 and 402 keep their status; everything else becomes a 500.
    """
    if isinstance(exc, RateLimitedError):
        return RecommendationOutcome(status_code=429, error=ERROR_MESSAGES['RATE_LIMITED'])

    if isinstance(exc, QuotaExhaustedError):
        return RecommendationOutcome(status_code=402, error=call_site.quota_message)

    if isinstance(exc, TransientUpstreamError):
        return RecommendationOutcome(
            status_code=500, error=ERROR_MESSAGES['TEMPORARILY_UNAVAILABLE']
        )

    if isinstance(exc, UnexpectedUpstreamError):
        return RecommendationOutcome(status_code=500, error=str(exc))

    if isinstance(exc, httpx.TimeoutException) and call_site.timeout_message:
        return RecommendationOutcome(status_code=500, error=call_site.timeout_message)

    if isinstance(exc, httpx.TransportError):
        return RecommendationOutcome(
            status_code=500, error=str(exc) or call_site.fallback_message
        )

    return RecommendationOutcome(status_code=500, error=call_site.fallback_message)


async def _run_completion(
    gateway: CompletionGateway,
    call_site: CallSite,
    system_prompt: str,
    user_prompt: str,
) -> RecommendationOutcome:
    try:
        content = await gateway.complete(system_prompt, user_prompt)
    except Exception as e:
        logger.error(f"Error in {call_site.name}: {type(e).__name__}: {e}")
        return map_failure(e, call_site)

    return RecommendationOutcome(status_code=200, content=content)


async def generate_pc_builds(
    gateway: CompletionGateway,
    request: BuildGenerationRequest,
) -> RecommendationOutcome:
    """
    Ask the model for three build tiers (Good, Better, Best).

    Args:
        gateway: Configured completion gateway
        request: Budget, use case and optional custom requirements

    Returns:
        RecommendationOutcome with the raw {"builds": [...]} completion on
        success, or a status code and error message.
    """
    logger.info(
        f"generate_pc_builds called: budget={request.budget}, "
        f"use_case='{format_text(request.use_case)[:50]}', "
        f"custom_requirements={'yes' if request.custom_requirements else 'no'}"
    )

    user_prompt = build_pc_build_user_prompt(
        budget=request.budget,
        use_case=request.use_case,
        custom_requirements=request.custom_requirements,
    )

    return await _run_completion(gateway, BUILD_CALL_SITE, BUILD_SYSTEM_PROMPT, user_prompt)


async def recommend_peripherals(
    gateway: CompletionGateway,
    request: PeripheralRequest,
) -> RecommendationOutcome:
    """
    Ask the model for a monitor, keyboard, mouse and headset that suit the build.

    Only the CPU and GPU model names are taken from the build snapshot.
    """
    cpu_model = request.build.component_model("cpu") if request.build else None
    gpu_model = request.build.component_model("gpu") if request.build else None

    logger.info(
        f"recommend_peripherals called: budget={request.budget}, "
        f"cpu='{cpu_model}', gpu='{gpu_model}'"
    )

    user_prompt = build_peripherals_user_prompt(
        budget=request.budget,
        use_case=request.use_case,
        cpu_model=cpu_model,
        gpu_model=gpu_model,
    )

    return await _run_completion(
        gateway, PERIPHERALS_CALL_SITE, PERIPHERALS_SYSTEM_PROMPT, user_prompt
    )
