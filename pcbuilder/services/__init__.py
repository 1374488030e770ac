"""
Service layer for the PC Builder backend.

Contains the logic between routes (HTTP layer) and the upstream AI model:
- completion_gateway: bounded-retry chat-completion client and failure taxonomy
- recommendation_service: the build and peripheral call sites, mapping
  failures into status codes and user-facing messages
"""

from .completion_gateway import (
    AIGatewayError,
    CompletionGateway,
    ConfigurationError,
    QuotaExhaustedError,
    RateLimitedError,
    TransientUpstreamError,
    UnexpectedUpstreamError,
    get_completion_gateway,
)
from .recommendation_service import (
    RecommendationOutcome,
    generate_pc_builds,
    recommend_peripherals,
)

__all__ = [
    "AIGatewayError",
    "CompletionGateway",
    "ConfigurationError",
    "QuotaExhaustedError",
    "RateLimitedError",
    "TransientUpstreamError",
    "UnexpectedUpstreamError",
    "get_completion_gateway",
    "RecommendationOutcome",
    "generate_pc_builds",
    "recommend_peripherals",
]
