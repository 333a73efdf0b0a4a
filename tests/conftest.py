"""Pytest fixtures and shared test configuration.

Fixtures:
    - relay_config: Relay configuration with a dummy API key
    - fake_completions: Stand-in for the SDK's chat.completions resource
    - relay_service: ChatRelayService wired to the fake SDK client
    - app: FastAPI app with the relay dependency overridden
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator, AsyncIterator
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from relaychat.agent.config import RelayConfig
from relaychat.agent.relay import ChatRelayService, get_relay_service
from relaychat.api.app import create_app


def completion_chunk(content: str | None) -> SimpleNamespace:
    """Build an object shaped like a streamed ChatCompletionChunk."""
    return SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=content))])


class FakeCompletions:
    """Records create() calls and streams canned deltas."""

    def __init__(self, deltas: list[str | None], error: Exception | None = None) -> None:
        self.deltas = deltas
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> AsyncIterator[SimpleNamespace]:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self._stream()

    async def _stream(self) -> AsyncIterator[SimpleNamespace]:
        for delta in self.deltas:
            yield completion_chunk(delta)


class FakeOpenAI:
    def __init__(self, completions: FakeCompletions) -> None:
        self.chat = SimpleNamespace(completions=completions)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def relay_config() -> RelayConfig:
    return RelayConfig(
        api_key="sk-test-key",
        model_name="gpt-4-turbo",
        system_prompt="You are a helpful assistant.",
    )


@pytest.fixture
def fake_completions() -> FakeCompletions:
    return FakeCompletions(["Hel", "lo", None, " world"])


@pytest.fixture
def relay_service(relay_config: RelayConfig, fake_completions: FakeCompletions) -> ChatRelayService:
    return ChatRelayService(config=relay_config, client=FakeOpenAI(fake_completions))


@pytest.fixture
def app(relay_service: ChatRelayService) -> FastAPI:
    """FastAPI app whose relay dependency uses the fake SDK client."""
    application = create_app()
    application.dependency_overrides[get_relay_service] = lambda: relay_service
    return application


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
