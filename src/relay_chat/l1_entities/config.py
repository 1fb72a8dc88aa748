"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnimationConfig(BaseModel):
    loading_interval: float = Field(gt=0)
    typing_interval: float = Field(gt=0)
    max_dots: int = Field(ge=1)


class ChatConfig(BaseModel):
    fallback_text: str
    user_avatar: str
    assistant_avatar: str
    id_prefix: str

    @property
    def avatars(self) -> dict[str, str]:
        """Avatar glyph per role, in the shape the message renderer takes."""
        return {'user': self.user_avatar, 'assistant': self.assistant_avatar}


class AppConfig(BaseModel):
    animation: AnimationConfig
    chat: ChatConfig
