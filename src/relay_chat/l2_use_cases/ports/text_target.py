"""Port: a piece of UI whose text an animator may rewrite."""

from __future__ import annotations

from typing import Protocol


class TextTarget(Protocol):
    @property
    def element_id(self) -> str | None: ...

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...
