"""Unique element ids for assistant placeholders."""

from __future__ import annotations

import itertools
import time
from collections.abc import Callable


class MessageIdGenerator:
    """Hands out ids that never repeat within one generator's lifetime.

    The counter alone guarantees uniqueness; the optional millisecond timestamp
    only makes ids from separate sessions easy to tell apart in logs. Ids are
    valid Textual widget ids (start with a letter, no spaces).
    """

    def __init__(
        self,
        prefix: str = 'id',
        *,
        with_timestamp: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not prefix or not prefix[0].isalpha():
            raise ValueError(f'Id prefix must start with a letter: {prefix!r}')
        self._prefix = prefix
        self._with_timestamp = with_timestamp
        self._clock = clock
        self._counter = itertools.count(1)

    def next_id(self) -> str:
        n = next(self._counter)
        if self._with_timestamp:
            stamp = int(self._clock() * 1000)
            return f'{self._prefix}-{stamp}-{n:x}'
        return f'{self._prefix}-{n}'
