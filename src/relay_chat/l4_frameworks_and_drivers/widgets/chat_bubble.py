"""Chat bubble — one rendered message; doubles as the text target the animators drive."""

from __future__ import annotations

from textual.widgets import Static

from relay_chat.l1_entities.chat_message import ChatMessage
from relay_chat.l3_interface_adapters.presenters.message_renderer import build_fragment, render_message


class ChatBubble(Static):
    """Static showing avatar plus literal text. Assistant bubbles use the message's element id as widget id."""

    DEFAULT_CSS = """
    ChatBubble {
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
    }
    ChatBubble.assistant {
        background: $boost;
    }
    """

    def __init__(self, message: ChatMessage, avatars: dict[str, str] | None = None, **kwargs) -> None:
        fragment = build_fragment(message.role, message.text, message.element_id, avatars)
        super().__init__(fragment.build(), id=fragment.element_id, classes=message.role, **kwargs)
        self._role = message.role
        self._text = message.text
        self._avatars = avatars

    @property
    def element_id(self) -> str | None:
        return self.id

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text
        self.update(render_message(self._role, text, self.id, self._avatars))
