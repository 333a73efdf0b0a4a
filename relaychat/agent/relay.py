"""Upstream completion relay built on the OpenAI SDK.

Translates the UI's conversation into a Chat Completions request and
exposes the streamed reply as plain text deltas.

Design notes:

1. **No retries** - the SDK retries twice by default. The relay reports a
   failure instead, so the client is created with ``max_retries=0``.

2. **Singleton** - the SDK client holds a connection pool. One service
   instance is shared across requests via ``get_relay_service``, which is
   also the FastAPI dependency tests override.

3. **Deltas only** - chunks without choices or without content become
   empty strings, so the caller can forward every unit unconditionally.
"""

import logging
from collections.abc import AsyncGenerator, AsyncIterator, Sequence
from typing import Any

from openai import AsyncOpenAI

from relaychat.agent.config import RelayConfig, get_relay_config
from relaychat.models.schemas import Message, MessageRole

logger = logging.getLogger(__name__)

# UI role -> Chat Completions role
UPSTREAM_ROLES: dict[MessageRole, str] = {
    MessageRole.USER: "user",
    MessageRole.AI: "assistant",
}


class ChatRelayService:
    """Service streaming chat completions from the upstream model API."""

    def __init__(
        self,
        config: RelayConfig | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        """Initialize the relay service.

        Args:
            config: Optional relay configuration.
                    Loads from environment if not provided.
            client: Optional preconfigured SDK client.
        """
        self._config = config or get_relay_config()
        self._client = client or self._create_client()

    def _create_client(self) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            timeout=self._config.max_duration,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        """Model identifier sent upstream."""
        return self._config.model_name

    def build_request(self, messages: Sequence[Message]) -> dict[str, Any]:
        """Build the upstream request payload for a conversation.

        The system instruction comes first, followed by the conversation in
        order with UI roles mapped to upstream roles. Message ids stay local.

        Args:
            messages: The conversation as sent by the UI.

        Returns:
            Keyword arguments for ``chat.completions.create``.
        """
        upstream_messages = [{"role": "system", "content": self._config.system_prompt}]
        upstream_messages.extend(
            {"role": UPSTREAM_ROLES[message.role], "content": message.content}
            for message in messages
        )
        return {"model": self.model, "messages": upstream_messages}

    async def open_stream(self, messages: Sequence[Message]) -> AsyncIterator[str]:
        """Open a streaming completion for the conversation.

        The request is sent before this returns, so connection and
        authentication failures surface here rather than mid-stream.

        Args:
            messages: The conversation as sent by the UI.

        Returns:
            Async iterator over the reply's text deltas.

        Raises:
            openai.APIError: If the upstream request fails.
        """
        request = self.build_request(messages)
        logger.info(
            f"Opening completion stream: model={request['model']}, "
            f"messages={len(request['messages'])}"
        )
        stream = await self._client.chat.completions.create(**request, stream=True)
        return self._iter_deltas(stream)

    async def aclose(self) -> None:
        """Close the SDK client and its connection pool."""
        await self._client.close()

    async def _iter_deltas(self, stream: AsyncIterator[Any]) -> AsyncGenerator[str]:
        count = 0
        async for completion in stream:
            count += 1
            yield extract_delta(completion)
        logger.debug(f"Completion stream finished after {count} chunks")


def extract_delta(completion: Any) -> str:
    """Return the text delta of a streamed completion chunk, or ``""``."""
    if not completion.choices:
        return ""
    delta = completion.choices[0].delta
    if delta is None:
        return ""
    return delta.content or ""


# Module-level singleton instance
_relay_service: ChatRelayService | None = None


def get_relay_service() -> ChatRelayService:
    """Get or create the global relay service.

    Returns:
        The ChatRelayService instance.
    """
    global _relay_service
    if _relay_service is None:
        _relay_service = ChatRelayService()
    return _relay_service


async def close_relay_service() -> None:
    """Close and forget the global relay service, if one was created."""
    global _relay_service
    if _relay_service is not None:
        await _relay_service.aclose()
        _relay_service = None
