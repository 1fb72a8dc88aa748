"""Typing animator: reveals a finished reply one character per tick."""

from __future__ import annotations

import logging

from relay_chat.l2_use_cases.ports.scheduler import Scheduler
from relay_chat.l2_use_cases.ports.text_target import TextTarget
from relay_chat.l2_use_cases.utils.animation_handle import AnimationHandle

log = logging.getLogger('rc.animation')


class TypingAnimator:
    """Appends *full_text* to a target character by character, then releases its timer.

    Only one run per target: starting again on the same target cancels the
    previous run so the two never interleave.
    """

    def __init__(self, scheduler: Scheduler, interval: float = 0.02) -> None:
        self._scheduler = scheduler
        self._interval = interval
        self._running: dict[int, AnimationHandle] = {}

    def start(self, target: TextTarget, full_text: str) -> AnimationHandle:
        self.cancel(target)
        handle = AnimationHandle(target)
        if not full_text:
            return handle

        key = id(target)
        index = 0

        def _tick() -> None:
            nonlocal index
            if not handle.active:
                return
            target.set_text(target.get_text() + full_text[index])
            index += 1
            if index >= len(full_text):
                handle.cancel()
                if self._running.get(key) is handle:
                    del self._running[key]
                log.debug('Typing finished on %s (%d chars)', target.element_id, len(full_text))

        handle.attach(self._scheduler.set_interval(self._interval, _tick))
        self._running[key] = handle
        return handle

    def cancel(self, target: TextTarget) -> None:
        """Stop any run currently typing into *target*."""
        previous = self._running.pop(id(target), None)
        if previous is not None:
            previous.cancel()

    @property
    def running(self) -> int:
        return len(self._running)
