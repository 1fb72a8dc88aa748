"""Domain error types."""


class EmptyPromptError(ValueError):
    """Raised when a submitted prompt is empty after trimming."""


class BackendError(Exception):
    """Base class for failures talking to the chat backend."""


class ServerError(BackendError):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f'HTTP {status_code}: {body}')
        self.status_code = status_code
        self.body = body


class MalformedResponseError(ServerError):
    """Raised when a 2xx response does not carry a string ``bot`` field."""


class TransportError(BackendError):
    """Raised when the request never produced a response (offline, refused, timeout)."""
