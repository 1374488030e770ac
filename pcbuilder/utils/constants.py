"""
Fixed parameters of the AI recommendation pipeline.

Upstream request defaults, the retry budget, and every user-facing error
message returned in the {"error": ...} envelope live here so the two
recommendation call sites stay in sync.
"""

# Upstream chat-completion endpoint
DEFAULT_AI_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_AI_MODEL = "google/gemini-2.5-flash"
COMPLETION_TEMPERATURE = 0.7

# 2 retries = 3 attempts in total
MAX_RETRIES = 2
RETRY_BACKOFF_SECONDS = 1.0

# Upstream error bodies are cut to this length before logging
LOG_BODY_PREVIEW_CHARS = 200

# Browser clients call the endpoints cross-origin
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

ERROR_MESSAGES = {
    'NOT_CONFIGURED': "AI service is not configured. Please contact support.",
    'RATE_LIMITED': "Rate limit exceeded. Please try again in a moment.",
    'TEMPORARILY_UNAVAILABLE': "The AI service is temporarily unavailable. Please try again in a moment.",
    'TIMEOUT': "Request timed out. Please try again.",
    'INVALID_REQUEST_BODY': "Invalid request body",
    'UNEXPECTED_RESPONSE': "AI Gateway returned an unexpected response",
}
