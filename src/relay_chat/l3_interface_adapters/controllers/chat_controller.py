"""ChatController — runs one submission from prompt to rendered reply."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from relay_chat.l1_entities.chat_message import ChatMessage, normalize_prompt
from relay_chat.l1_entities.config import AppConfig
from relay_chat.l1_entities.errors import EmptyPromptError
from relay_chat.l1_entities.message_id import MessageIdGenerator
from relay_chat.l1_entities.submission_state import SubmissionState, advance
from relay_chat.l2_use_cases.ask_backend_use_case import AskBackendUseCase
from relay_chat.l2_use_cases.loading_animator import LoadingAnimator
from relay_chat.l2_use_cases.ports.chat_backend import ChatBackend
from relay_chat.l2_use_cases.ports.chat_view import ChatView
from relay_chat.l2_use_cases.ports.scheduler import Scheduler
from relay_chat.l2_use_cases.typing_animator import TypingAnimator

log = logging.getLogger('rc.controller')


@dataclass(frozen=True)
class SubmissionOutcome:
    state: SubmissionState
    element_id: str | None = None
    text: str = ''


class ChatController:
    """Owns the submit lifecycle. The App (L4) only forwards events and implements ChatView.

    Every submission keeps its own loading handle, so overlapping submissions
    each animate their own placeholder.
    """

    def __init__(
        self,
        config: AppConfig,
        backend: ChatBackend,
        scheduler: Scheduler,
        id_generator: MessageIdGenerator | None = None,
    ) -> None:
        self._config = config
        self._ask_uc = AskBackendUseCase(backend)
        self._ids = id_generator or MessageIdGenerator(config.chat.id_prefix)

        anim = config.animation
        self.loading = LoadingAnimator(scheduler, interval=anim.loading_interval, max_dots=anim.max_dots)
        self.typing = TypingAnimator(scheduler, interval=anim.typing_interval)

        self.pending: int = 0
        self.last_reply: str | None = None

    async def submit(self, raw_prompt: str, view: ChatView) -> SubmissionOutcome:
        state = SubmissionState.IDLE
        try:
            normalize_prompt(raw_prompt)
        except EmptyPromptError:
            log.debug('Rejected empty prompt')
            return SubmissionOutcome(state=advance(state, SubmissionState.REJECTED))

        view.append_message(ChatMessage(role='user', text=raw_prompt))
        state = advance(state, SubmissionState.USER_MESSAGE_RENDERED)
        view.clear_input()

        element_id = self._ids.next_id()
        target = view.append_message(ChatMessage(role='assistant', text='', element_id=element_id))
        view.scroll_to_end()

        handle = self.loading.start(target)
        state = advance(state, SubmissionState.PLACEHOLDER_PENDING)
        self.pending += 1
        log.info('Submission %s pending (%d in flight)', element_id, self.pending)
        try:
            result = await self._ask_uc.execute(raw_prompt)
        finally:
            self.loading.stop(handle)
            self.pending -= 1

        if result.data is not None:
            target.set_text('')
            self.typing.start(target, result.data)
            self.last_reply = result.data
            state = advance(state, SubmissionState.PLACEHOLDER_RESOLVED)
            return SubmissionOutcome(state=state, element_id=element_id, text=result.data)

        fallback = self._config.chat.fallback_text
        target.set_text(fallback)
        view.alert(result.detail or fallback)
        log.warning('Submission %s failed (%s)', element_id, result.error)
        state = advance(state, SubmissionState.PLACEHOLDER_FAILED)
        return SubmissionOutcome(state=state, element_id=element_id, text=fallback)
