"""Status bar — bottom bar showing in-flight requests and keybinding hints."""

from __future__ import annotations

from rich.cells import cell_len
from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """Bottom status bar with request state and keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    pending: reactive[int] = reactive(0)
    keybinding_hints: reactive[str] = reactive('')

    def render(self) -> str:
        if self.pending == 1:
            left = '⟳ Waiting for reply…'
        elif self.pending > 1:
            left = f'⟳ Waiting for {self.pending} replies…'
        else:
            left = '○ Idle'

        hints = self.keybinding_hints
        if hints:
            content_width = (self.size.width or 80) - 2
            hints_width = cell_len(hints.replace(r'\[', '['))
            gap = content_width - cell_len(left) - hints_width
            if gap >= 2:
                left = left + ' ' * gap + hints
        return left
