"""In-memory conversation state for one chat page."""

import logging
from collections.abc import AsyncIterator, Callable, Sequence

from relaychat.models.schemas import Message, MessageRole, ResponseChunk
from relaychat.ui.chat_client import get_ai_response, new_message_id

logger = logging.getLogger(__name__)

ResponseFetcher = Callable[[Sequence[Message]], AsyncIterator[ResponseChunk]]


class ChatSession:
    """Manages chat state for a user session.

    Messages are keyed by id and rendered in insertion order. AI messages
    are created by the first chunk of a reply and grow with each later one.
    """

    def __init__(self, fetch: ResponseFetcher | None = None) -> None:
        self.messages: dict[str, Message] = {}
        self.input_text: str = ""
        self._fetch = fetch or get_ai_response

    def all_messages(self) -> list[Message]:
        return list(self.messages.values())

    def submit(self) -> list[Message] | None:
        """Add the current input as a user message and clear the input.

        Returns:
            The outbound conversation (existing messages plus the new one),
            or None when the input is blank.
        """
        text = self.input_text
        if not text.strip():
            return None

        message = Message(id=new_message_id(), role=MessageRole.USER, content=text)
        outbound = [*self.messages.values(), message]
        self.messages[message.id] = message
        self.input_text = ""
        return outbound

    def merge_chunk(self, chunk: ResponseChunk) -> Message:
        """Merge a reply fragment into the AI message with the same id."""
        existing = self.messages.get(chunk.id)
        if existing is None:
            merged = Message(id=chunk.id, role=MessageRole.AI, content=chunk.text)
        else:
            merged = existing.model_copy(update={"content": existing.content + chunk.text})
        self.messages[chunk.id] = merged
        return merged

    async def receive(
        self,
        outbound: Sequence[Message],
        on_update: Callable[[Message], None] | None = None,
    ) -> None:
        """Stream the reply to ``outbound`` into the conversation.

        Args:
            outbound: Conversation sent to the relay.
            on_update: Called with the merged message after every chunk.
        """
        count = 0
        async for chunk in self._fetch(outbound):
            merged = self.merge_chunk(chunk)
            count += 1
            if on_update is not None:
                on_update(merged)
        logger.debug(f"Reply stream ended after {count} chunks")
