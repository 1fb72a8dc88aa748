"""Tests for the Textual chat app using headless Pilot."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from textual.containers import VerticalScroll
from textual.widgets import Input, Static

from relay_chat.l1_entities.errors import ServerError, TransportError
from relay_chat.l4_frameworks_and_drivers.app import App
from relay_chat.l4_frameworks_and_drivers.container import DependencyContainer
from relay_chat.l4_frameworks_and_drivers.infra_config import InfraConfig
from relay_chat.l4_frameworks_and_drivers.widgets.alert_modal import AlertModal
from relay_chat.l4_frameworks_and_drivers.widgets.chat_bubble import ChatBubble
from relay_chat.l4_frameworks_and_drivers.widgets.help_modal import HelpModal
from relay_chat.l4_frameworks_and_drivers.widgets.status_bar import StatusBar
from tests.conftest import FakeChatBackend


def make_app(config, backend: FakeChatBackend | None = None) -> App:
    infra = InfraConfig.model_validate({'backend': {'url': 'http://chat.test'}})
    container = DependencyContainer(config, infra, backend=backend or FakeChatBackend())
    return App(config=config, container=container)


async def _send(app: App, pilot, text: str) -> None:
    app.query_one('#prompt-input', Input).value = text
    await pilot.press('enter')
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause(0.3)


class TestComposition:
    @pytest.mark.asyncio
    async def test_has_required_widgets(self, fast_config):
        app = make_app(fast_config)
        async with app.run_test():
            assert app.query_one('#messages')
            assert app.query_one('#prompt-input', Input).has_focus
            assert app.query_one('#status-bar', StatusBar)
            assert len(app.query(ChatBubble)) == 0

    @pytest.mark.asyncio
    async def test_header_shows_container_backend_url(self, fast_config):
        app = make_app(fast_config)
        async with app.run_test():
            assert 'http://chat.test' in str(app.query_one('#header', Static).content)


class TestSubmit:
    @pytest.mark.asyncio
    async def test_reply_is_typed_into_placeholder(self, fast_config):
        app = make_app(fast_config, FakeChatBackend(reply='  Hi there!  \n'))
        async with app.run_test() as pilot:
            await _send(app, pilot, 'hello')

            bubbles = list(app.query(ChatBubble))
            assert len(bubbles) == 2
            assert bubbles[0].has_class('user')
            assert bubbles[0].get_text() == 'hello'
            assert bubbles[1].has_class('assistant')
            assert bubbles[1].id == 'id-1'
            assert bubbles[1].get_text() == 'Hi there!'
            assert app.query_one('#prompt-input', Input).value == ''

    @pytest.mark.asyncio
    async def test_empty_prompt_renders_nothing(self, fast_config):
        backend = FakeChatBackend()
        app = make_app(fast_config, backend)
        async with app.run_test() as pilot:
            await _send(app, pilot, '   ')
            assert len(app.query(ChatBubble)) == 0
            assert backend.ask_calls == []

    @pytest.mark.asyncio
    async def test_markup_prompt_shown_literally(self, fast_config):
        app = make_app(fast_config)
        async with app.run_test() as pilot:
            await _send(app, pilot, '[b]not bold[/b]')
            assert app.query(ChatBubble).first().get_text() == '[b]not bold[/b]'

    @pytest.mark.asyncio
    async def test_server_error_pushes_alert(self, fast_config):
        app = make_app(fast_config, FakeChatBackend(error=ServerError(500, 'rate limited')))
        async with app.run_test() as pilot:
            await _send(app, pilot, 'hello')

            assert isinstance(app.screen, AlertModal)
            assert app.screen.body == 'rate limited'
            placeholder = app.screen_stack[0].query_one('#id-1', ChatBubble)
            assert placeholder.get_text() == 'Something went wrong'

            await pilot.press('escape')
            await pilot.pause()
            assert not isinstance(app.screen, AlertModal)

    @pytest.mark.asyncio
    async def test_transport_error_pushes_alert(self, fast_config):
        app = make_app(fast_config, FakeChatBackend(error=TransportError('Connection refused')))
        async with app.run_test() as pilot:
            await _send(app, pilot, 'hello')
            assert isinstance(app.screen, AlertModal)
            assert 'Connection refused' in app.screen.body

    @pytest.mark.asyncio
    async def test_two_submissions_get_distinct_bubbles(self, fast_config):
        app = make_app(fast_config, FakeChatBackend(reply='ok'))
        async with app.run_test() as pilot:
            await _send(app, pilot, 'one')
            await _send(app, pilot, 'two')
            assistants = [b for b in app.query(ChatBubble) if b.has_class('assistant')]
            assert [b.id for b in assistants] == ['id-1', 'id-2']
            assert [b.get_text() for b in assistants] == ['ok', 'ok']


class TestActions:
    @pytest.mark.asyncio
    async def test_copy_reply(self, fast_config):
        app = make_app(fast_config, FakeChatBackend(reply='copy me'))
        async with app.run_test() as pilot:
            await _send(app, pilot, 'hello')
            with patch('relay_chat.l4_frameworks_and_drivers.app.pyperclip.copy') as mock_copy:
                await pilot.press('ctrl+y')
                await pilot.pause()
            mock_copy.assert_called_once_with('copy me')

    @pytest.mark.asyncio
    async def test_copy_reply_without_reply(self, fast_config):
        app = make_app(fast_config)
        async with app.run_test() as pilot:
            with patch('relay_chat.l4_frameworks_and_drivers.app.pyperclip.copy') as mock_copy:
                await pilot.press('ctrl+y')
                await pilot.pause()
            mock_copy.assert_not_called()

    @pytest.mark.asyncio
    async def test_help_toggles(self, fast_config):
        app = make_app(fast_config)
        async with app.run_test() as pilot:
            await pilot.press('f1')
            await pilot.pause()
            assert isinstance(app.screen, HelpModal)
            await pilot.press('f1')
            await pilot.pause()
            assert not isinstance(app.screen, HelpModal)

    @pytest.mark.asyncio
    async def test_quit(self, fast_config):
        app = make_app(fast_config)
        async with app.run_test() as pilot:
            await pilot.press('ctrl+q')
            await pilot.pause()
        assert app.return_code == 0


class TestRendering:
    @pytest.mark.asyncio
    async def test_textual_variable_markup_shown_literally(self, fast_config):
        app = make_app(fast_config)
        async with app.run_test() as pilot:
            await _send(app, pilot, '[$primary]hi')
            user = app.query(ChatBubble).first()
            assert user.render().plain.endswith('[$primary]hi')

    @pytest.mark.asyncio
    async def test_prompt_whitespace_kept_in_bubble_and_request(self, fast_config):
        backend = FakeChatBackend()
        app = make_app(fast_config, backend)
        async with app.run_test() as pilot:
            await _send(app, pilot, '  hello  ')
            assert app.query(ChatBubble).first().get_text() == '  hello  '
            assert backend.ask_calls == ['  hello  ']

    @pytest.mark.asyncio
    async def test_message_list_follows_newest_bubble(self, fast_config):
        app = make_app(fast_config, FakeChatBackend(reply='ok'))
        async with app.run_test(size=(60, 14)) as pilot:
            for n in range(6):
                await _send(app, pilot, f'prompt {n}')
            messages = app.query_one('#messages', VerticalScroll)
            assert messages.max_scroll_y > 0
            assert messages.scroll_y == messages.max_scroll_y

    @pytest.mark.asyncio
    async def test_help_shows_backend_and_pending(self, fast_config):
        app = make_app(fast_config)
        async with app.run_test() as pilot:
            await pilot.press('f1')
            await pilot.pause()
            assert isinstance(app.screen, HelpModal)
            assert 'http://chat.test' in app.screen.body_md
            assert '**Replies pending:** 0' in app.screen.body_md
