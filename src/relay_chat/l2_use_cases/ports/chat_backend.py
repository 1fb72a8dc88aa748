"""Port: chat backend reached over the network."""

from __future__ import annotations

from typing import Protocol


class ChatBackend(Protocol):
    """Abstract backend. Raises relay_chat.l1_entities.errors.BackendError subclasses."""

    async def ask(self, prompt: str) -> str:
        """Send *prompt* and return the raw ``bot`` text of the reply."""
        ...

    def check_connectivity(self) -> tuple[bool, str]:
        """Pre-flight connectivity check. Returns (ok, error_message)."""
        ...
