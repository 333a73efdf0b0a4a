from enum import Enum

from pydantic import BaseModel, RootModel


class MessageRole(str, Enum):
    """Speaker of a chat message as seen by the browser UI."""

    USER = "user"
    AI = "ai"


class Message(BaseModel):
    """A single chat message in the conversation.

    Attributes:
        id: Opaque token identifying the message within a UI session.
        role: Who wrote the message (user or ai).
        content: The message text. Grows chunk by chunk for ai messages.
    """

    id: str
    role: MessageRole
    content: str


class MessageList(RootModel[list[Message]]):
    """Request payload for the chat relay: the whole conversation so far."""


class ResponseChunk(BaseModel):
    """A decoded fragment of a streamed AI reply.

    Attributes:
        id: Id shared by every fragment of the same reply.
        text: Text to append to the reply.
    """

    id: str
    text: str
