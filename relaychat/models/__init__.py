"""Pydantic models shared by the relay API and the chat UI.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - MessageRole: The two speaker roles known to the UI
    - Message: Individual message in the conversation
    - MessageList: Request body of the chat relay endpoint
    - ResponseChunk: One decoded fragment of a streamed reply
"""

from relaychat.models.schemas import Message, MessageList, MessageRole, ResponseChunk

__all__ = ["Message", "MessageList", "MessageRole", "ResponseChunk"]
