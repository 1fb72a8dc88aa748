"""One-shot runner — send a single prompt without the TUI and print the reply."""

from __future__ import annotations

import asyncio
import logging
import sys

from relay_chat.l1_entities.chat_message import normalize_prompt
from relay_chat.l1_entities.errors import EmptyPromptError
from relay_chat.l2_use_cases.ask_backend_use_case import AskBackendUseCase
from relay_chat.l2_use_cases.ports.chat_backend import ChatBackend

log = logging.getLogger('rc.app')


def _err(msg: str) -> None:
    print(msg, file=sys.stderr, flush=True)


def run_oneshot(prompt: str, backend: ChatBackend, fallback_text: str = 'Something went wrong') -> int:
    """Ask *backend* once. Reply goes to stdout; failures to stderr. Returns the exit status."""
    try:
        normalize_prompt(prompt)
    except EmptyPromptError as exc:
        _err(f'Error: {exc}')
        return 1

    result = asyncio.run(AskBackendUseCase(backend).execute(prompt))
    if result.ok:
        print(result.data, flush=True)
        return 0

    log.warning('One-shot request failed (%s)', result.error)
    _err(fallback_text)
    if result.detail:
        _err(result.detail)
    return 1
