"""L1 entity: lifecycle of one prompt submission."""

from __future__ import annotations

import enum


class SubmissionState(enum.Enum):
    IDLE = 'idle'
    REJECTED = 'rejected'
    USER_MESSAGE_RENDERED = 'user_message_rendered'
    PLACEHOLDER_PENDING = 'placeholder_pending'
    PLACEHOLDER_RESOLVED = 'placeholder_resolved'
    PLACEHOLDER_FAILED = 'placeholder_failed'

    @property
    def terminal(self) -> bool:
        return self in _TERMINAL


_TERMINAL = frozenset(
    {
        SubmissionState.REJECTED,
        SubmissionState.PLACEHOLDER_RESOLVED,
        SubmissionState.PLACEHOLDER_FAILED,
    }
)

_TRANSITIONS: dict[SubmissionState, frozenset[SubmissionState]] = {
    SubmissionState.IDLE: frozenset({SubmissionState.REJECTED, SubmissionState.USER_MESSAGE_RENDERED}),
    SubmissionState.USER_MESSAGE_RENDERED: frozenset({SubmissionState.PLACEHOLDER_PENDING}),
    SubmissionState.PLACEHOLDER_PENDING: frozenset(
        {SubmissionState.PLACEHOLDER_RESOLVED, SubmissionState.PLACEHOLDER_FAILED}
    ),
}


def advance(current: SubmissionState, new: SubmissionState) -> SubmissionState:
    """Return *new* if the lifecycle allows moving there from *current*."""
    if new not in _TRANSITIONS.get(current, frozenset()):
        raise ValueError(f'Illegal submission transition: {current.value} -> {new.value}')
    return new
