"""
Pytest configuration for PC Builder backend tests.

Sets up test environment and global fixtures.

The upstream AI gateway is never contacted: gateways are built on an
httpx.MockTransport that replays a scripted list of responses/exceptions,
and on a fake sleep that records the requested delays instead of waiting.
"""
import os

import httpx
import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("AI_GATEWAY_API_KEY", "test-ai-gateway-key")

from pcbuilder.services.completion_gateway import CompletionGateway  # noqa: E402

TEST_API_KEY = "test-ai-gateway-key"


class ScriptedUpstream:
    """
    httpx MockTransport handler that answers requests from a script.

    Each entry is either an httpx.Response to return or an exception to raise.
    Every request received is recorded.
    """

    def __init__(self, outcomes):
        self._outcomes = list(outcomes)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._outcomes:
            raise AssertionError("Upstream called more times than scripted")
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def completion_response():
    """Build a chat-completion response carrying `content`."""
    def _build(content: str, status_code: int = 200) -> httpx.Response:
        return httpx.Response(
            status_code,
            json={"choices": [{"message": {"role": "assistant", "content": content}}]}
        )
    return _build


@pytest.fixture
def error_response():
    """Build a non-2xx upstream response."""
    def _build(status_code: int, text: str = "upstream error") -> httpx.Response:
        return httpx.Response(status_code, text=text)
    return _build


@pytest.fixture
def sleep_calls():
    """Delays (seconds) requested from the fake sleep, in order."""
    return []


@pytest.fixture
def fake_sleep(sleep_calls):
    """Async sleep replacement that records instead of waiting."""
    async def _sleep(seconds: float) -> None:
        sleep_calls.append(seconds)
    return _sleep


@pytest.fixture
def make_gateway(fake_sleep):
    """
    Factory: make_gateway(*outcomes) -> (CompletionGateway, ScriptedUpstream).
    """
    def _make(*outcomes, api_key: str = TEST_API_KEY):
        upstream = ScriptedUpstream(outcomes)
        gateway = CompletionGateway(
            api_key=api_key,
            transport=httpx.MockTransport(upstream),
            sleep=fake_sleep,
        )
        return gateway, upstream
    return _make
