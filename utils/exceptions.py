"""
Exceptions

Error types raised by the pool usage pipeline stages.
"""


class PoolMonitorError(Exception):
    """Base class for all pipeline errors."""


class ConfigError(PoolMonitorError):
    """A required environment variable is missing or invalid."""


class StorageError(PoolMonitorError):
    """Database connection, schema or write failure."""


class InvalidReadingError(StorageError):
    """A usage percentage outside the 0-100 range was rejected."""


class FetchError(PoolMonitorError):
    """The pool page could not be requested."""


class ReadError(PoolMonitorError):
    """The pool page body could not be read."""


class ParseError(PoolMonitorError):
    """The usage percentage could not be extracted from the page."""


class NotifyError(PoolMonitorError):
    """The Telegram message was not delivered."""

    def __init__(self, message, status_code=None, response_body=None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
