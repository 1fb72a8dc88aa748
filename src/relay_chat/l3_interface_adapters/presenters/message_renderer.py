"""Presenter: turns a chat message into a styled Rich ``Text`` fragment.

The fragment is assembled from plain spans, never parsed as markup, so a
prompt such as ``[b]hi[/b]``, ``[$primary]x`` or ``[@click=app.quit]x[/]`` is
shown literally by the widget.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.text import Text

from relay_chat.l1_entities.chat_message import Role

DEFAULT_AVATARS: dict[str, str] = {'user': '👤', 'assistant': '🤖'}
_ROLE_STYLE: dict[str, str] = {'user': 'bold cyan', 'assistant': 'bold green'}


@dataclass
class MessageFragment:
    """Builder for one rendered message: avatar column plus body text.

    ``element_id`` is only set on assistant fragments. It is not part of the
    rendered text; the widget hosting the fragment takes it as its widget id,
    which is how animators address the message.
    """

    role: Role
    avatar: str = ''
    element_id: str | None = None
    _body: list[str] = field(default_factory=list)

    def with_avatar(self, avatar: str) -> MessageFragment:
        self.avatar = avatar
        return self

    def with_element_id(self, element_id: str | None) -> MessageFragment:
        self.element_id = element_id
        return self

    def add_text(self, text: str) -> MessageFragment:
        self._body.append(text)
        return self

    def build(self) -> Text:
        return Text.assemble((self.avatar, _ROLE_STYLE[self.role]), ' ', ''.join(self._body))


def build_fragment(
    role: Role,
    text: str,
    element_id: str | None = None,
    avatars: dict[str, str] | None = None,
) -> MessageFragment:
    avatar = (avatars or DEFAULT_AVATARS)[role]
    fragment = MessageFragment(role=role).with_avatar(avatar).add_text(text)
    if role == 'assistant':
        fragment.with_element_id(element_id)
    return fragment


def render_message(
    role: Role,
    text: str,
    element_id: str | None = None,
    avatars: dict[str, str] | None = None,
) -> Text:
    """Return the fragment for a single message. Pure function of its inputs."""
    return build_fragment(role, text, element_id, avatars).build()
