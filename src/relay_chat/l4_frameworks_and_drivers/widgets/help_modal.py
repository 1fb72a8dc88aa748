"""Help modal — backend, animation timing and key reference for the chat screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Markdown, Static

from relay_chat.l1_entities.config import AnimationConfig

KEYS: list[tuple[str, str]] = [
    ('Enter', 'Send prompt'),
    ('ctrl+y', 'Copy last reply'),
    ('F1', 'Toggle this help'),
    ('ctrl+q', 'Quit'),
]


def build_help_markdown(backend_url: str, animation: AnimationConfig, pending: int = 0) -> str:
    """Markdown body: where prompts go, how replies animate, which keys do what."""
    lines = [
        f'**Backend:** `{backend_url or "(not set)"}`  ',
        f'**Replies pending:** {pending}',
        '',
        '### Reply animation',
        f'- Waiting: up to {animation.max_dots} dots, one every {animation.loading_interval:g}s',
        f'- Reply: one character every {animation.typing_interval:g}s',
        '- Failure: placeholder shows the fallback text and the error opens in an alert',
        '',
        '### Keys',
        '| Key | Action |',
        '|-----|--------|',
    ]
    lines.extend(f'| `{key}` | {action} |' for key, action in KEYS)
    return '\n'.join(lines)


class HelpModal(ModalScreen[None]):
    """Reference card for the chat screen. Escape or F1 closes it."""

    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
    }

    HelpModal > VerticalScroll {
        width: 60%;
        max-width: 72;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: round $accent;
        padding: 1 2;
    }

    HelpModal #help-title {
        text-style: bold;
        color: $accent;
    }

    HelpModal #help-body {
        height: auto;
    }
    """

    BINDINGS = [
        ('escape', 'dismiss', 'Close'),
        ('f1', 'dismiss', 'Close'),
    ]

    def __init__(self, backend_url: str, animation: AnimationConfig, pending: int = 0, **kwargs) -> None:
        super().__init__(**kwargs)
        self._body_md = build_help_markdown(backend_url, animation, pending)

    @property
    def body_md(self) -> str:
        return self._body_md

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static('relay-chat help', id='help-title')
            yield Markdown(self._body_md, id='help-body')
