"""Use case: send one prompt to the backend and normalize the outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from relay_chat.l1_entities.errors import BackendError, MalformedResponseError, ServerError, TransportError
from relay_chat.l2_use_cases.ports.chat_backend import ChatBackend

log = logging.getLogger('rc.backend')


@dataclass(frozen=True)
class ReplyResult:
    """Either the reply text or a failure with the detail to show the user."""

    data: str | None = None
    error: str = ''
    detail: str = ''

    @property
    def ok(self) -> bool:
        return self.data is not None


class AskBackendUseCase:
    """Single-shot request. Never raises for backend failures; returns a ReplyResult."""

    def __init__(self, backend: ChatBackend) -> None:
        self._backend = backend

    async def execute(self, prompt: str) -> ReplyResult:
        log.info('Backend request: %d chars', len(prompt))
        try:
            raw = await self._backend.ask(prompt)
        except MalformedResponseError as e:
            log.error('Malformed backend response (HTTP %d): %s', e.status_code, e.body[:500])
            return ReplyResult(error='malformed', detail=e.body or str(e))
        except ServerError as e:
            log.error('Backend returned HTTP %d: %s', e.status_code, e.body[:500])
            return ReplyResult(error='server', detail=e.body)
        except TransportError as e:
            log.error('Backend unreachable: %s', e)
            return ReplyResult(error='transport', detail=str(e))
        except BackendError as e:
            log.error('Backend failure: %s', e, exc_info=True)
            return ReplyResult(error='backend', detail=str(e))

        text = raw.strip()
        log.debug('Backend reply (%d chars): %s', len(text), text[:500])
        return ReplyResult(data=text)
