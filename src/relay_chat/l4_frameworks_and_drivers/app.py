"""Textual chat App — composes the widgets and implements the ChatView port."""

from __future__ import annotations

import logging
from pathlib import Path

import pyperclip
from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Input, Static

from relay_chat.l1_entities.chat_message import ChatMessage
from relay_chat.l1_entities.config import AppConfig
from relay_chat.l3_interface_adapters.controllers.chat_controller import ChatController
from relay_chat.l4_frameworks_and_drivers.container import DependencyContainer
from relay_chat.l4_frameworks_and_drivers.logging_setup import setup_file_logging
from relay_chat.l4_frameworks_and_drivers.widgets.alert_modal import AlertModal
from relay_chat.l4_frameworks_and_drivers.widgets.chat_bubble import ChatBubble
from relay_chat.l4_frameworks_and_drivers.widgets.help_modal import HelpModal
from relay_chat.l4_frameworks_and_drivers.widgets.status_bar import StatusBar

log = logging.getLogger('rc.app')


class App(TextualApp):
    """Chat TUI: message list, prompt input, status bar."""

    CSS = """
    #header {
        height: 1;
        background: $primary;
        color: $text;
        padding: 0 1;
    }
    #messages {
        height: 1fr;
        padding: 1 1 0 1;
        scrollbar-size: 1 1;
    }
    #prompt-input {
        dock: bottom;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding('ctrl+q', 'quit_app', 'Quit', priority=True),
        Binding('f1', 'show_help', 'Help', priority=True),
        Binding('ctrl+y', 'copy_reply', 'Copy reply', show=False),
    ]

    def __init__(
        self,
        config: AppConfig,
        container: DependencyContainer | None = None,
        log_dir: Path | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config
        if log_dir is not None:
            setup_file_logging(log_dir)

        self._container = container or DependencyContainer(config)
        self._backend_url = self._container.infra.backend.url
        self._controller = self._container.build_controller(scheduler=self)

    @property
    def controller(self) -> ChatController:
        return self._controller

    def compose(self) -> ComposeResult:
        header = '  relay-chat'
        if self._backend_url:
            header += f' | {self._backend_url}'
        # Held directly: app-level queries only see the active screen, which may be a modal.
        self._messages = VerticalScroll(id='messages')
        self._input = Input(placeholder='Ask something…', id='prompt-input')
        self._status_bar = StatusBar(id='status-bar')
        yield Static(header, id='header', markup=False)
        yield self._messages
        yield self._input
        yield self._status_bar

    def on_mount(self) -> None:
        self._status_bar.keybinding_hints = r'\[Enter] send  \[ctrl+y] copy  \[F1] help  \[ctrl+q] quit'
        self._input.focus()
        self.set_interval(0.2, self._refresh_status_bar)

    def _refresh_status_bar(self) -> None:
        self._status_bar.pending = self._controller.pending

    # --- ChatView port ---

    def append_message(self, message: ChatMessage) -> ChatBubble:
        bubble = ChatBubble(message, avatars=self._config.chat.avatars)
        self._messages.mount(bubble)
        return bubble

    def clear_input(self) -> None:
        self._input.value = ''

    def scroll_to_end(self) -> None:
        # The new bubble is laid out on the next refresh.
        self.call_after_refresh(self._messages.scroll_end, animate=False)

    def alert(self, text: str) -> None:
        self.push_screen(AlertModal(body=text))

    # --- Event handlers ---

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if event.input.id != 'prompt-input':
            return
        # Not exclusive: overlapping submissions each get their own placeholder.
        self.run_worker(self._controller.submit(event.value, self), group='submit')

    # --- Actions ---

    def action_copy_reply(self) -> None:
        reply = self._controller.last_reply
        if not reply:
            self.notify('No reply to copy yet', severity='warning', timeout=2)
            return
        pyperclip.copy(reply)
        self.notify('Reply copied', timeout=2)

    def action_show_help(self) -> None:
        if isinstance(self.screen, HelpModal):
            self.screen.dismiss()
            return

        self.push_screen(
            HelpModal(
                backend_url=self._backend_url,
                animation=self._config.animation,
                pending=self._controller.pending,
            )
        )

    def action_quit_app(self) -> None:
        log.info('Quit requested')
        self.exit()
