"""Alert modal — blocking notification for backend failures; must be dismissed."""

from __future__ import annotations

import pyperclip
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static


class AlertModal(ModalScreen[None]):
    """Shows raw error text verbatim (no markup). Escape/Enter to dismiss, c to copy."""

    DEFAULT_CSS = """
    AlertModal {
        align: center middle;
    }

    AlertModal > VerticalScroll {
        width: 70%;
        max-width: 100;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: thick $error;
        padding: 1 2;
    }

    AlertModal > VerticalScroll > #alert-title {
        text-style: bold;
        color: $error;
        margin-bottom: 1;
    }

    AlertModal > VerticalScroll > #alert-body {
        height: auto;
    }

    AlertModal > VerticalScroll > #alert-hint {
        text-align: center;
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [
        ('escape', 'dismiss', 'Close'),
        ('enter', 'dismiss', 'Close'),
        ('c', 'copy_body', 'Copy'),
    ]

    def __init__(self, body: str, title: str = 'Backend error', **kwargs) -> None:
        super().__init__(**kwargs)
        self._title = title
        self._body = body

    @property
    def body(self) -> str:
        return self._body

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(self._title, id='alert-title', markup=False)
            yield Static(self._body, id='alert-body', markup=False)
            yield Static('Press Escape or Enter to close, c to copy', id='alert-hint')

    def action_copy_body(self) -> None:
        pyperclip.copy(self._body)
        self.app.notify('Error text copied', timeout=2)
