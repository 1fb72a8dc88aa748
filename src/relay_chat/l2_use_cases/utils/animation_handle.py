"""Handle returned by the animators; owns one interval timer."""

from __future__ import annotations

from relay_chat.l2_use_cases.ports.scheduler import IntervalTimer
from relay_chat.l2_use_cases.ports.text_target import TextTarget


class AnimationHandle:
    """Cancellation token for a running animation. ``cancel()`` is idempotent."""

    def __init__(self, target: TextTarget, timer: IntervalTimer | None = None) -> None:
        self.target = target
        self._timer = timer
        self._done = timer is None

    @property
    def active(self) -> bool:
        return not self._done

    def attach(self, timer: IntervalTimer) -> None:
        self._timer = timer
        self._done = False

    def cancel(self) -> None:
        if self._done:
            return
        self._done = True
        if self._timer is not None:
            self._timer.stop()
