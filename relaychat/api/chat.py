"""Chat relay endpoint.

Validates the conversation, opens the upstream completion stream, and
re-streams its text deltas as a chunked plain-text response.
"""

import logging
from typing import Annotated

import openai
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from relaychat.agent.relay import ChatRelayService, get_relay_service
from relaychat.models.schemas import Message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

STREAM_HEADERS = {"Transfer-Encoding": "chunked"}


@router.post("/chat", response_class=StreamingResponse)
async def chat(
    messages: list[Message],
    relay: Annotated[ChatRelayService, Depends(get_relay_service)],
) -> StreamingResponse:
    """Relay a conversation to the model and stream the reply.

    The body is a JSON array of messages. Each chunk of the response body
    is the next piece of the reply text with no framing of its own.

    Args:
        messages: The conversation so far, oldest first.
        relay: Upstream relay service.

    Returns:
        Chunked text/plain StreamingResponse.

    Raises:
        422: Body is not an array of valid messages.
        502: The upstream completion request failed.
    """
    try:
        deltas = await relay.open_stream(messages)
    except openai.APIError as e:
        logger.error(f"Upstream completion request failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Upstream completion request failed",
        ) from e

    return StreamingResponse(
        deltas,
        status_code=status.HTTP_200_OK,
        media_type="text/plain",
        headers=STREAM_HEADERS,
    )
