"""relay-chat -- terminal chat client that relays prompts to an HTTP backend."""

__version__ = '0.1.0'
