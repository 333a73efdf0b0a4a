"""Unit tests for chat page rendering helpers."""

from relaychat.models.schemas import Message, MessageRole
from relaychat.ui.chat_page import CUSTOM_CSS, ai_message_decoration


class TestAiMessageDecoration:
    def test_ai_message_gets_fade_class_and_transition_name(self) -> None:
        message = Message(id="r1", role=MessageRole.AI, content="Hello")

        assert ai_message_decoration(message) == (
            "ai-message ai-message-r1",
            "view-transition-name: ai-response-r1",
        )

    def test_user_message_is_not_decorated(self) -> None:
        message = Message(id="u1", role=MessageRole.USER, content="Hi")

        assert ai_message_decoration(message) is None

    def test_fade_animation_is_defined(self) -> None:
        assert ".ai-message { animation: reply-fade" in CUSTOM_CSS
        assert "@keyframes reply-fade" in CUSTOM_CSS
