"""Gateway: JSON-over-HTTP chat backend — implements ChatBackend port.

The backend is an external collaborator: ``POST <url>`` with ``{"prompt": ...}``
answers ``{"bot": ...}`` on success and plain text otherwise.
"""

from __future__ import annotations

import logging

import httpx

from relay_chat.l1_entities.errors import MalformedResponseError, ServerError, TransportError

log = logging.getLogger('rc.backend')


class HttpxChatBackend:
    """Wraps httpx.AsyncClient to implement the ChatBackend protocol.

    No credentials are sent; any API key belongs to the backend itself.
    """

    def __init__(
        self,
        url: str = 'http://localhost:5000',
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def ask(self, prompt: str) -> str:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                resp = await client.post(
                    self._url,
                    json={'prompt': prompt},
                    headers={'Content-Type': 'application/json'},
                )
            except httpx.RequestError as e:
                raise TransportError(f'Cannot reach {self._url}: {e}') from e

        log.debug('POST %s -> HTTP %d', self._url, resp.status_code)
        if not resp.is_success:
            raise ServerError(resp.status_code, resp.text)

        try:
            payload = resp.json()
        except ValueError as e:
            raise MalformedResponseError(resp.status_code, resp.text) from e
        bot = payload.get('bot') if isinstance(payload, dict) else None
        if not isinstance(bot, str):
            raise MalformedResponseError(resp.status_code, resp.text)
        return bot

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            with httpx.Client(timeout=5.0) as client:
                client.get(self._url)
            return True, ''
        except httpx.HTTPError as e:
            return False, f'Cannot connect to backend: {e}'
