"""Port: periodic timer source driving the text animations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class IntervalTimer(Protocol):
    def stop(self) -> None: ...


class Scheduler(Protocol):
    """Anything with a Textual-style ``set_interval`` (Textual App/Widget satisfy it)."""

    def set_interval(self, interval: float, callback: Callable[[], object]) -> IntervalTimer: ...
