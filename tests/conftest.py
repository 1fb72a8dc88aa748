"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest

from relay_chat.l1_entities.chat_message import ChatMessage
from relay_chat.l1_entities.config import AppConfig
from relay_chat.l1_entities.errors import BackendError
from relay_chat.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeTimer:
    def __init__(self, interval: float, callback: Callable[[], object]) -> None:
        self.interval = interval
        self.callback = callback
        self.stopped = False
        self.stop_calls = 0

    def stop(self) -> None:
        self.stop_calls += 1
        self.stopped = True


class FakeScheduler:
    """Manual-tick scheduler: nothing fires until tick() is called."""

    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def set_interval(self, interval: float, callback: Callable[[], object]) -> FakeTimer:
        timer = FakeTimer(interval, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.stopped]

    def tick(self, times: int = 1) -> None:
        for _ in range(times):
            for timer in self.active:
                timer.callback()


class FakeTarget:
    """Text target that records every text it was given."""

    def __init__(self, element_id: str | None = None, text: str = '') -> None:
        self._element_id = element_id
        self._text = text
        self.history: list[str] = []

    @property
    def element_id(self) -> str | None:
        return self._element_id

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text
        self.history.append(text)


class FakeView:
    """Fake ChatView for controller tests; logs every call in order."""

    def __init__(self) -> None:
        self.messages: list[ChatMessage] = []
        self.targets: list[FakeTarget] = []
        self.alerts: list[str] = []
        self.events: list[str] = []

    def append_message(self, message: ChatMessage) -> FakeTarget:
        self.messages.append(message)
        self.events.append(f'append:{message.role}')
        target = FakeTarget(message.element_id, message.text)
        self.targets.append(target)
        return target

    def clear_input(self) -> None:
        self.events.append('clear_input')

    def scroll_to_end(self) -> None:
        self.events.append('scroll_to_end')

    def alert(self, text: str) -> None:
        self.events.append('alert')
        self.alerts.append(text)

    def target_for(self, element_id: str) -> FakeTarget:
        return next(t for t in self.targets if t.element_id == element_id)


class FakeChatBackend:
    """Fake backend for L2/L3 tests. Either returns *reply* or raises *error*."""

    def __init__(self, reply: str = 'Fake reply', error: BackendError | None = None) -> None:
        self._reply = reply
        self._error = error
        self._connectivity = (True, '')
        self.ask_calls: list[str] = []
        self.on_ask: Callable[[str], None] | None = None
        self.gate: asyncio.Event | None = None

    async def ask(self, prompt: str) -> str:
        self.ask_calls.append(prompt)
        if self.on_ask is not None:
            self.on_ask(prompt)
        if self.gate is not None:
            await self.gate.wait()
        if self._error is not None:
            raise self._error
        return self._reply

    def check_connectivity(self) -> tuple[bool, str]:
        return self._connectivity

    def set_reply(self, reply: str) -> None:
        self._reply = reply
        self._error = None

    def set_error(self, error: BackendError) -> None:
        self._error = error

    def set_connectivity(self, ok: bool, msg: str = '') -> None:
        self._connectivity = (ok, msg)


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def fast_config() -> AppConfig:
    return build_app_config({'animation': {'loading_interval': 0.01, 'typing_interval': 0.001}})


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
backend:
  url: "http://chat.example:8080/"
  timeout: 5
animation:
  loading_interval: 0.5
  typing_interval: 0.05
chat:
  fallback_text: "Oops"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def fake_view() -> FakeView:
    return FakeView()


@pytest.fixture
def fake_backend() -> FakeChatBackend:
    return FakeChatBackend()
