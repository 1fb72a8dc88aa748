"""Port: the chat surface the submission controller drives."""

from __future__ import annotations

from typing import Protocol

from relay_chat.l1_entities.chat_message import ChatMessage
from relay_chat.l2_use_cases.ports.text_target import TextTarget


class ChatView(Protocol):
    def append_message(self, message: ChatMessage) -> TextTarget:
        """Render *message* at the end of the list and return its text target."""
        ...

    def clear_input(self) -> None: ...

    def scroll_to_end(self) -> None: ...

    def alert(self, text: str) -> None:
        """Show *text* in a notification the user has to dismiss."""
        ...
