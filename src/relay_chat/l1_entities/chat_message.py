"""Chat message entity and prompt validation rule."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from relay_chat.l1_entities.errors import EmptyPromptError

Role = Literal['user', 'assistant']


class ChatMessage(BaseModel):
    """A single message shown in the chat list. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str
    element_id: str | None = None


def normalize_prompt(raw: str) -> str:
    """Trim *raw* and reject it when nothing is left."""
    prompt = raw.strip()
    if not prompt:
        raise EmptyPromptError('Prompt is empty')
    return prompt
