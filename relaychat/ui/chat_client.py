"""Streaming client for the chat relay endpoint."""

import codecs
import logging
import os
import uuid
from collections.abc import AsyncGenerator, Sequence

import httpx

from relaychat.models.schemas import Message, MessageList, ResponseChunk

logger = logging.getLogger(__name__)


def default_api_base_url() -> str:
    """Relay URL from API_BASE_URL, else the local server on PORT."""
    return os.getenv("API_BASE_URL") or f"http://localhost:{os.getenv('PORT', '8000')}"


API_BASE_URL = default_api_base_url()
CHAT_PATH = "/api/chat"


class ChatRequestError(Exception):
    """The relay did not return a readable streaming response."""


def new_message_id() -> str:
    return uuid.uuid4().hex


def _has_no_body(response: httpx.Response) -> bool:
    if response.status_code == httpx.codes.NO_CONTENT:
        return True
    return response.headers.get("content-length") == "0"


async def get_ai_response(
    messages: Sequence[Message],
    *,
    http_client: httpx.AsyncClient | None = None,
    base_url: str | None = None,
) -> AsyncGenerator[ResponseChunk]:
    """Stream the AI reply to a conversation from the relay.

    Every chunk of one call carries the same id, generated once per call,
    so the caller can merge them into a single message.

    Args:
        messages: Full conversation to send, newest message last.
        http_client: Client to use. A temporary one is created if omitted.
        base_url: Relay base URL, defaults to ``API_BASE_URL``.

    Yields:
        Decoded reply fragments in arrival order.

    Raises:
        ChatRequestError: If the response is not ok or has no body.
    """
    response_id = new_message_id()
    url = f"{base_url or API_BASE_URL}{CHAT_PATH}"
    payload = MessageList(list(messages)).model_dump(mode="json")

    owns_client = http_client is None
    client = http_client or httpx.AsyncClient(timeout=120.0)
    try:
        async with client.stream("POST", url, json=payload) as response:
            if not response.is_success:
                logger.warning(f"Chat relay returned HTTP {response.status_code}")
                raise ChatRequestError("Failed to make a request")
            if _has_no_body(response):
                raise ChatRequestError("Body is empty")

            decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
            async for raw in response.aiter_bytes():
                text = decoder.decode(raw)
                if text:
                    yield ResponseChunk(id=response_id, text=text)
            tail = decoder.decode(b"", final=True)
            if tail:
                yield ResponseChunk(id=response_id, text=tail)
    finally:
        if owns_client:
            await client.aclose()
