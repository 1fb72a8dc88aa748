"""Loading animator: cycles a placeholder through an ellipsis while a reply is pending."""

from __future__ import annotations

import logging

from relay_chat.l2_use_cases.ports.scheduler import Scheduler
from relay_chat.l2_use_cases.ports.text_target import TextTarget
from relay_chat.l2_use_cases.utils.animation_handle import AnimationHandle

log = logging.getLogger('rc.animation')


class LoadingAnimator:
    """Shows '', '.', '..', '...' on *target*, one step per tick, until stopped."""

    def __init__(self, scheduler: Scheduler, interval: float = 0.3, max_dots: int = 3) -> None:
        self._scheduler = scheduler
        self._interval = interval
        self._max_dots = max_dots

    def start(self, target: TextTarget) -> AnimationHandle:
        target.set_text('')
        handle = AnimationHandle(target)

        def _tick() -> None:
            if not handle.active:
                return
            text = target.get_text() + '.'
            if len(text) > self._max_dots:
                text = ''
            target.set_text(text)

        handle.attach(self._scheduler.set_interval(self._interval, _tick))
        log.debug('Loading animation started on %s', target.element_id)
        return handle

    @staticmethod
    def stop(handle: AnimationHandle | None) -> None:
        if handle is not None:
            handle.cancel()
