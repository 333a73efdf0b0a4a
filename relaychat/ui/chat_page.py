"""NiceGUI chat page streaming replies from the relay."""

import logging

import httpx
from nicegui import background_tasks, ui

from relaychat.models.schemas import Message, MessageRole
from relaychat.ui.chat_client import ChatRequestError
from relaychat.ui.state import ChatSession

logger = logging.getLogger(__name__)

ROLE_LABELS = {
    MessageRole.USER: "User",
    MessageRole.AI: "AI",
}

CUSTOM_CSS = """
<style>
    body { background: #fafafa; }
    .chat-container { max-width: 32rem; margin: 0 auto; }
    .message-content { white-space: pre-wrap; }
    .ai-message { animation: reply-fade 0.25s ease-out; }
    @keyframes reply-fade { from { opacity: 0.4; } to { opacity: 1; } }
</style>
"""


def ai_message_decoration(message: Message) -> tuple[str, str] | None:
    """CSS classes and style for an AI message element, None for user messages."""
    if message.role != MessageRole.AI:
        return None
    return (
        f"ai-message ai-message-{message.id}",
        f"view-transition-name: ai-response-{message.id}",
    )


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession()

    def render_message(message: Message) -> None:
        with ui.column().classes("w-full gap-0"):
            ui.label(ROLE_LABELS[message.role]).classes("font-bold")
            content = ui.label(message.content).classes("message-content")
            decoration = ai_message_decoration(message)
            if decoration is not None:
                classes, style = decoration
                content.classes(classes).style(style)

    @ui.refreshable
    def message_list() -> None:
        for message in session.all_messages():
            render_message(message)

    async def respond(outbound: list[Message]) -> None:
        try:
            await session.receive(outbound, on_update=lambda _: message_list.refresh())
        except (ChatRequestError, httpx.HTTPError) as e:
            logger.warning(f"Chat turn failed: {e}")
            with container:
                ui.notify(f"Reply failed: {e}", type="negative")

    def send_message() -> None:
        outbound = session.submit()
        if outbound is None:
            return
        message_list.refresh()
        background_tasks.create(respond(outbound), name="chat-response")

    # === UI Layout ===
    with ui.column().classes("chat-container w-full gap-4 p-4") as container:
        with ui.column().classes("w-full gap-2"):
            message_list()
        with ui.column().classes("w-full gap-2"):
            ui.input(placeholder="Type a message...").bind_value(
                session, "input_text"
            ).classes("w-full").on("keydown.enter", send_message)
            ui.button("Submit", on_click=send_message).classes("self-end")


def main() -> None:
    ui.run(title="Relay Chat", port=8080, reload=False)


if __name__ == "__main__":
    main()
